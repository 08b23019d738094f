from sqlalchemy import Column, String, Text
from ..database import Base, StoredRecord


class News(StoredRecord, Base):
    __tablename__ = "news"
    __required__ = {"title": "titulo"}

    title = Column(String(255))
    body = Column(Text)
    img = Column(Text)
