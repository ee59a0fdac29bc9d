from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel
from typing import Optional
import logging

from database import UserORM, verify_password
from database.db import get_db
from sqlalchemy.orm import Session
from auth import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    """Request model for JSON login."""
    username: str
    password: str


class LoginResponse(BaseModel):
    """Response model for login with user data."""
    access_token: str
    token_type: str
    user: dict


def authenticate(db: Session, username: str, password: str) -> Optional[UserORM]:
    """Return the user when the credentials match, raising 403 for disabled accounts."""
    user = (
        db.query(UserORM)
        .filter(UserORM.username == username)
        .one_or_none()
    )
    if not user or not verify_password(user.password_salt, user.password_hash, password):
        logger.info(f"Login fallido para {username}")
        return None
    if not user.enabled:
        raise HTTPException(status_code=403, detail="This account has been disabled")
    return user


def issue_token(user: UserORM) -> str:
    return create_access_token(
        {"sub": user.id, "username": user.username, "role": user.role}
    )


@router.post("/login", response_model=LoginResponse)
def login_with_json(login_data: LoginRequest, db: Session = Depends(get_db)):
    """
    Login endpoint that accepts JSON and returns user data.
    """
    user = authenticate(db, login_data.username, login_data.password)
    if not user:
        raise HTTPException(status_code=400, detail="Incorrect username or password")

    return {
        "access_token": issue_token(user),
        "token_type": "bearer",
        "user": {
            "id": user.id,
            "username": user.username,
            "role": user.role,
            "enabled": user.enabled,
        }
    }


@router.post("/token")
def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """
    OAuth2 compatible token endpoint (form-data).
    Used by Swagger UI and OAuth2 clients.
    """
    user = authenticate(db, form_data.username, form_data.password)
    if not user:
        raise HTTPException(status_code=400, detail="Incorrect username or password")
    return {"access_token": issue_token(user), "token_type": "bearer"}
