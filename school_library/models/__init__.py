from ..database import Base
from .admin import Admin
from .book import Book
from .news import News
from .attendance import Attendance
from .loan_request import LoanRequest

__all__ = [
    "Base",
    "Admin",
    "Book",
    "News",
    "Attendance",
    "LoanRequest",
]
