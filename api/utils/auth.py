from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Cookie, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from api.config import get_db, settings
from api.models.models import User
from api.schemas.auth_schemas import AuthTokenPayload
from api.utils.jwt import create_access_token, get_password_hash, verify_password, verify_token
from api.utils.logger import get_logger

logger = get_logger(__name__)

TEACHER_ROLE = "teacher"


def get_current_user(access_token: Optional[str] = Cookie(None), db: Session = Depends(get_db)) -> User:
    if not access_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing token",
        )

    payload = verify_token(access_token)
    if payload is None or payload.sub is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token"
        )
    user = get_user_by_email(payload.sub, db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found"
        )
    return user


def require_teacher(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != TEACHER_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Teacher role required"
        )
    return current_user


def set_auth_cookie(response: Response, user: User) -> None:
    minutes = settings.access_token_expire_minutes
    token = create_access_token(AuthTokenPayload(sub=user.email, exp=datetime.now(timezone.utc) + timedelta(minutes=minutes)))
    response.set_cookie(
        key="access_token",
        value=token,
        httponly=True,
        secure=False,
        samesite="lax",
        max_age=minutes * 60,
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(
        key="access_token",
        httponly=True,
        secure=False,
        samesite="lax"
    )


def get_user_by_email(email: str, db: Session) -> User | None:
    return db.query(User).filter(User.email == email).first()


def create_user(
    email: str,
    password: str,
    db: Session,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    role: str = "student",
) -> User:
    logger.info("creating user email=%s role=%s", email, role)
    user = User(
        email=email,
        hashed_password=get_password_hash(password),
        first_name=first_name,
        last_name=last_name,
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    return user


def authenticate_user(email: str, password: str, db: Session) -> User | None:
    user = get_user_by_email(email, db)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user
