from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from ..database import get_db, utcnow
from ..models.attendance import Attendance
from ..schemas.attendance import AttendancePayload, AttendanceRecord
from ..core.errors import store_failure
from ..core.permissions import require_admin

router = APIRouter(prefix="/api/attendance", tags=["attendance"])

LIST_LIMIT = 2000


@router.post("", response_model=AttendanceRecord, status_code=status.HTTP_201_CREATED)
def check_in(payload: AttendancePayload, db: Session = Depends(get_db)):
    """Public check-in. The timestamp is always the server's clock."""
    try:
        record = Attendance(**payload.model_dump(exclude_unset=True), checked_in_at=utcnow())
        db.add(record)
        db.commit()
        db.refresh(record)
        return record
    except Exception as e:
        raise store_failure(db, e, "record attendance")


@router.get("", response_model=List[AttendanceRecord])
def list_attendance(db: Session = Depends(get_db)):
    try:
        return (
            db.query(Attendance)
            .order_by(Attendance.checked_in_at.desc())
            .limit(LIST_LIMIT)
            .all()
        )
    except Exception as e:
        raise store_failure(db, e, "list attendance")


# Attendance records are never edited, only removed
@router.delete("/{attendance_id}", dependencies=[Depends(require_admin)])
def delete_attendance(attendance_id: str, db: Session = Depends(get_db)):
    try:
        db.query(Attendance).filter(Attendance.id == attendance_id).delete()
        db.commit()
        return {"deleted": True}
    except Exception as e:
        raise store_failure(db, e, "delete attendance")
