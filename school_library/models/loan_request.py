from sqlalchemy import Column, String, Boolean
from sqlalchemy.orm import relationship
from ..database import Base, StoredRecord, UTCDateTime, utcnow
from .book import Book  # noqa: F401  registers the relationship target


class LoanRequest(StoredRecord, Base):
    __tablename__ = "requests"
    __required__ = {"book_id": "bookId"}

    # Not a foreign key: a request may outlive the book it points at
    book_id = Column(String(32), index=True)
    requester_name = Column(String(255))
    ts = Column(UTCDateTime, default=utcnow)
    returned = Column(Boolean, default=False)

    # Relationships
    book = relationship(
        "Book",
        primaryjoin="foreign(LoanRequest.book_id) == Book.id",
        viewonly=True,
    )
