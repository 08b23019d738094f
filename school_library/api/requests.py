from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session, joinedload
from ..database import get_db
from ..models.loan_request import LoanRequest
from ..schemas.loan_request import LoanRequestPayload, LoanRequestRecord, LoanRequestExpanded
from ..core.errors import store_failure
from ..core.permissions import require_admin

router = APIRouter(prefix="/api/requests", tags=["requests"])

LIST_LIMIT = 1000


@router.post("", response_model=LoanRequestRecord, status_code=status.HTTP_201_CREATED)
def create_request(payload: LoanRequestPayload, db: Session = Depends(get_db)):
    """Public loan request. ``bookId`` is stored as given, without a lookup."""
    try:
        fields = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
        loan = LoanRequest(**fields)
        db.add(loan)
        db.commit()
        db.refresh(loan)
        return loan
    except Exception as e:
        raise store_failure(db, e, "create request")


@router.get("", response_model=List[LoanRequestExpanded])
def list_requests(db: Session = Depends(get_db)):
    """Requests newest first, each with its book expanded under ``bookId``"""
    try:
        return (
            db.query(LoanRequest)
            .options(joinedload(LoanRequest.book))
            .order_by(LoanRequest.created_at.desc())
            .limit(LIST_LIMIT)
            .all()
        )
    except Exception as e:
        raise store_failure(db, e, "list requests")


@router.delete("/{request_id}", dependencies=[Depends(require_admin)])
def delete_request(request_id: str, db: Session = Depends(get_db)):
    try:
        db.query(LoanRequest).filter(LoanRequest.id == request_id).delete()
        db.commit()
        return {"deleted": True}
    except Exception as e:
        raise store_failure(db, e, "delete request")
