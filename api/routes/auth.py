"""Registration and login routes (public)"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from domain.schemas.auth_schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from services.auth_service import AuthService

router = APIRouter(tags=["Auth"])
logger = logging.getLogger("nutriapp.api.auth")


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    """Create an account. Weak passwords get 400, a taken email or nickname 409."""
    user = AuthService.register(db, body)
    return RegisterResponse.model_validate(user)


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    """Exchange email-or-nickname and password for a 24 h bearer token."""
    token, user = AuthService.login(db, body.login_identifier, body.password)
    return LoginResponse(token=token, message=f"Welcome back, {user.first_name}")
