from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class AttendancePayload(BaseModel):
    """Check-in body. There is no ``fecha`` field: the server stamps the time."""
    first_names: Optional[str] = Field(None, alias="nombres")
    last_names: Optional[str] = Field(None, alias="apellidos")
    student_id: Optional[str] = Field(None, alias="matricula")
    program: Optional[str] = Field(None, alias="carrera")
    semester: Optional[str] = Field(None, alias="semestre")
    gender: Optional[str] = Field(None, alias="genero")
    activity: Optional[str] = Field(None, alias="actividad")

    class Config:
        populate_by_name = True
        coerce_numbers_to_str = True
        extra = "ignore"


class AttendanceRecord(BaseModel):
    id: str = Field(serialization_alias="_id")
    first_names: Optional[str] = Field(None, serialization_alias="nombres")
    last_names: Optional[str] = Field(None, serialization_alias="apellidos")
    student_id: Optional[str] = Field(None, serialization_alias="matricula")
    program: Optional[str] = Field(None, serialization_alias="carrera")
    semester: Optional[str] = Field(None, serialization_alias="semestre")
    gender: Optional[str] = Field(None, serialization_alias="genero")
    activity: Optional[str] = Field(None, serialization_alias="actividad")
    checked_in_at: Optional[datetime] = Field(None, serialization_alias="fecha")
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(None, serialization_alias="updatedAt")

    class Config:
        from_attributes = True
