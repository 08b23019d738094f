from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ..database import get_db
from ..models.news import News
from ..schemas.news import NewsPayload, NewsRecord, NewsListing, news_listing
from ..core.errors import store_failure
from ..core.permissions import require_admin

router = APIRouter(prefix="/api/news", tags=["news"])

LIST_LIMIT = 500


@router.post(
    "",
    response_model=NewsRecord,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_news(payload: NewsPayload, db: Session = Depends(get_db)):
    try:
        item = News(**payload.model_dump(exclude_unset=True))
        db.add(item)
        db.commit()
        db.refresh(item)
        return item
    except Exception as e:
        raise store_failure(db, e, "create news")


@router.get("", response_model=List[NewsListing])
def list_news(db: Session = Depends(get_db)):
    try:
        items = db.query(News).order_by(News.created_at.desc()).limit(LIST_LIMIT).all()
        return [news_listing(n) for n in items]
    except Exception as e:
        raise store_failure(db, e, "list news")


@router.put("/{news_id}", response_model=NewsRecord, dependencies=[Depends(require_admin)])
def update_news(news_id: str, payload: NewsPayload, db: Session = Depends(get_db)):
    try:
        item = db.query(News).filter(News.id == news_id).first()
        if not item:
            raise HTTPException(status_code=404, detail="Noticia no encontrada")

        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(item, field, value)

        db.commit()
        db.refresh(item)
        return item
    except HTTPException:
        raise
    except Exception as e:
        raise store_failure(db, e, "update news")


@router.delete("/{news_id}", dependencies=[Depends(require_admin)])
def delete_news(news_id: str, db: Session = Depends(get_db)):
    try:
        db.query(News).filter(News.id == news_id).delete()
        db.commit()
        return {"deleted": True}
    except Exception as e:
        raise store_failure(db, e, "delete news")
