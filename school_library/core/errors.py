import logging
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def store_failure(db: Session, exc: Exception, action: str) -> HTTPException:
    """Roll back and turn a store-layer failure into a 500 carrying its message"""
    db.rollback()
    logger.error("Failed to %s: %s", action, exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(exc),
    )
