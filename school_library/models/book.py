from sqlalchemy import Column, String, Boolean, Text
from ..database import Base, StoredRecord


class Book(StoredRecord, Base):
    """Catalog entry. Stored field names are the Spanish ones the clients use."""
    __tablename__ = "books"
    __required__ = {"title": "titulo"}

    title = Column(String(255))
    author = Column(String(255))
    program = Column(String(120))  # carrera
    semester = Column(String(50))
    genre = Column(String(120))
    description = Column(Text)
    available = Column(Boolean, default=True)
    file_name = Column(String(255))
    file_data = Column(Text)  # inline data URL
