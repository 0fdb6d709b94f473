from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr

from api.schemas.base import CamelModel


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str
    confirm_password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class LoginResponse(CamelModel):
    message: str
    token_set: bool


class RegisterResponse(BaseModel):
    message: str


class LogoutResponse(BaseModel):
    message: str


class AuthTokenPayload(BaseModel):
    sub: str
    exp: Optional[datetime] = None
