from .auth import LoginRequest, LoginResponse, AdminCheckResponse
from .book import BookPayload, BookRecord, BookListing, book_listing
from .news import NewsPayload, NewsRecord, NewsListing, news_listing
from .attendance import AttendancePayload, AttendanceRecord
from .loan_request import LoanRequestPayload, LoanRequestRecord, LoanRequestExpanded

__all__ = [
    "LoginRequest", "LoginResponse", "AdminCheckResponse",
    "BookPayload", "BookRecord", "BookListing", "book_listing",
    "NewsPayload", "NewsRecord", "NewsListing", "news_listing",
    "AttendancePayload", "AttendanceRecord",
    "LoanRequestPayload", "LoanRequestRecord", "LoanRequestExpanded",
]
