from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class NewsPayload(BaseModel):
    title: Optional[str] = Field(None, alias="titulo")
    body: Optional[str] = Field(None, alias="cuerpo")
    img: Optional[str] = None

    class Config:
        populate_by_name = True
        extra = "ignore"


class NewsRecord(BaseModel):
    id: str = Field(serialization_alias="_id")
    title: Optional[str] = Field(None, serialization_alias="titulo")
    body: Optional[str] = Field(None, serialization_alias="cuerpo")
    img: Optional[str] = None
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(None, serialization_alias="updatedAt")

    class Config:
        from_attributes = True


class NewsListing(BaseModel):
    id: str
    title: Optional[str] = None
    body: Optional[str] = None
    ts: Optional[datetime] = None
    img: Optional[str] = None


def news_listing(item) -> NewsListing:
    return NewsListing(id=item.id, title=item.title, body=item.body, ts=item.created_at, img=item.img)
