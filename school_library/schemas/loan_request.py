from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from .book import BookRecord


class LoanRequestPayload(BaseModel):
    book_id: Optional[str] = Field(None, alias="bookId")
    requester_name: Optional[str] = Field(None, alias="requesterName")
    ts: Optional[datetime] = None
    returned: Optional[bool] = None

    class Config:
        populate_by_name = True
        coerce_numbers_to_str = True
        extra = "ignore"


class LoanRequestBase(BaseModel):
    id: str = Field(serialization_alias="_id")
    requester_name: Optional[str] = Field(None, serialization_alias="requesterName")
    ts: Optional[datetime] = None
    returned: Optional[bool] = None
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(None, serialization_alias="updatedAt")

    class Config:
        from_attributes = True


class LoanRequestRecord(LoanRequestBase):
    book_id: str = Field(serialization_alias="bookId")


class LoanRequestExpanded(LoanRequestBase):
    # the referenced book, or None once it has been deleted
    book: Optional[BookRecord] = Field(None, serialization_alias="bookId")
