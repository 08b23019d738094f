from pydantic import BaseModel
from typing import Optional


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    ok: bool
    token: Optional[str] = None
    msg: Optional[str] = None


class AdminCheckResponse(BaseModel):
    ok: bool = True
    admin: str
