from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class BookPayload(BaseModel):
    """Create/update body. Keys are the stored field names; unknown keys are dropped."""
    title: Optional[str] = Field(None, alias="titulo")
    author: Optional[str] = Field(None, alias="autor")
    program: Optional[str] = Field(None, alias="carrera")
    semester: Optional[str] = Field(None, alias="semestre")
    genre: Optional[str] = Field(None, alias="genero")
    description: Optional[str] = Field(None, alias="descripcion")
    available: Optional[bool] = Field(None, alias="disponible")
    file_name: Optional[str] = Field(None, alias="fileName")
    file_data: Optional[str] = Field(None, alias="fileData")

    class Config:
        populate_by_name = True
        coerce_numbers_to_str = True
        extra = "ignore"


class BookRecord(BaseModel):
    id: str = Field(serialization_alias="_id")
    title: Optional[str] = Field(None, serialization_alias="titulo")
    author: Optional[str] = Field(None, serialization_alias="autor")
    program: Optional[str] = Field(None, serialization_alias="carrera")
    semester: Optional[str] = Field(None, serialization_alias="semestre")
    genre: Optional[str] = Field(None, serialization_alias="genero")
    description: Optional[str] = Field(None, serialization_alias="descripcion")
    available: Optional[bool] = Field(None, serialization_alias="disponible")
    file_name: Optional[str] = Field(None, serialization_alias="fileName")
    file_data: Optional[str] = Field(None, serialization_alias="fileData")
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(None, serialization_alias="updatedAt")

    class Config:
        from_attributes = True


class BookListing(BaseModel):
    """Flat shape used by the public catalog listing"""
    id: str
    title: Optional[str] = None
    author: Optional[str] = None
    program: Optional[str] = None
    semester: Optional[str] = None
    genre: Optional[str] = None
    desc: Optional[str] = None
    available: Optional[bool] = None
    fileName: Optional[str] = None
    fileData: Optional[str] = None
    createdAt: Optional[datetime] = None


def book_listing(book) -> BookListing:
    return BookListing(
        id=book.id,
        title=book.title,
        author=book.author,
        program=book.program,
        semester=book.semester,
        genre=book.genre,
        desc=book.description,
        available=book.available,
        fileName=book.file_name,
        fileData=book.file_data,
        createdAt=book.created_at,
    )
