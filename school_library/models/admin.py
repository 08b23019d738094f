from sqlalchemy import Column, String
from ..database import Base, StoredRecord


class Admin(StoredRecord, Base):
    __tablename__ = "admins"
    __required__ = {"username": "username", "password": "password"}

    username = Column(String(50), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash, never plaintext
