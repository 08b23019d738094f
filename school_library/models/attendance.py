from sqlalchemy import Column, String
from ..database import Base, StoredRecord, UTCDateTime, utcnow


class Attendance(StoredRecord, Base):
    __tablename__ = "attendance"
    __required__ = {"first_names": "nombres", "last_names": "apellidos"}

    first_names = Column(String(120))
    last_names = Column(String(120))
    student_id = Column(String(50))  # matricula
    program = Column(String(120))
    semester = Column(String(50))
    gender = Column(String(30))
    activity = Column(String(255))
    checked_in_at = Column(UTCDateTime, default=utcnow, index=True)  # fecha
