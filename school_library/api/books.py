from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import String, func, or_
from sqlalchemy.orm import Session
from typing import List, Optional
from ..database import get_db
from ..models.book import Book
from ..schemas.book import BookPayload, BookRecord, BookListing, book_listing
from ..core.errors import store_failure
from ..core.permissions import require_admin

router = APIRouter(prefix="/api/books", tags=["books"])

LIST_LIMIT = 1000


def like_pattern(text: str) -> str:
    """Substring LIKE pattern with the wildcard characters escaped"""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def contains_folded(db: Session, column, text: str):
    """Case-insensitive substring test, Unicode-aware on every dialect"""
    if db.get_bind().dialect.name == "sqlite":
        # py_lower is registered on each SQLite connection by create_context
        return func.py_lower(column, type_=String).like(like_pattern(text.casefold()), escape="\\")
    return column.ilike(like_pattern(text), escape="\\")


@router.post(
    "",
    response_model=BookRecord,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_book(payload: BookPayload, db: Session = Depends(get_db)):
    """Add a book to the catalog"""
    try:
        book = Book(
            title=payload.title,
            author=payload.author,
            program=payload.program,
            semester=payload.semester,
            genre=payload.genre,
            description=payload.description,
            available=True if payload.available is None else payload.available,
            file_name=payload.file_name,
            file_data=payload.file_data,
        )
        db.add(book)
        db.commit()
        db.refresh(book)
        return book
    except Exception as e:
        raise store_failure(db, e, "create book")


@router.get("", response_model=List[BookListing])
def list_books(q: Optional[str] = None, db: Session = Depends(get_db)):
    """List the catalog, newest first.

    ``q`` matches title, author, genre or program as a case-insensitive
    substring.
    """
    try:
        query = db.query(Book)
        if q:
            query = query.filter(or_(*(
                contains_folded(db, column, q)
                for column in (Book.title, Book.author, Book.genre, Book.program)
            )))
        books = query.order_by(Book.created_at.desc()).limit(LIST_LIMIT).all()
        return [book_listing(b) for b in books]
    except Exception as e:
        raise store_failure(db, e, "list books")


@router.put("/{book_id}", response_model=BookRecord, dependencies=[Depends(require_admin)])
def update_book(book_id: str, payload: BookPayload, db: Session = Depends(get_db)):
    """Partially update a book"""
    try:
        book = db.query(Book).filter(Book.id == book_id).first()
        if not book:
            raise HTTPException(status_code=404, detail="Libro no encontrado")

        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(book, field, value)

        db.commit()
        db.refresh(book)
        return book
    except HTTPException:
        raise
    except Exception as e:
        raise store_failure(db, e, "update book")


@router.delete("/{book_id}", dependencies=[Depends(require_admin)])
def delete_book(book_id: str, db: Session = Depends(get_db)):
    """Delete a book. Missing ids are not an error."""
    try:
        db.query(Book).filter(Book.id == book_id).delete()
        db.commit()
        return {"deleted": True}
    except Exception as e:
        raise store_failure(db, e, "delete book")
