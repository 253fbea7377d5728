import logging
from typing import Optional
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session
from homestay.db import get_db
from homestay.errors import ApiError
from homestay.schemas.user import (
    AuthResponse,
    CurrentUserResponse,
    LoginRequest,
    UserCreate,
    UserPublic,
)
from homestay.storage.sessions import SessionStore
from homestay.storage.users import UserRepository
from homestay.utils.auth import (
    end_session,
    get_optional_user,
    get_password_hash,
    get_session_store,
    start_session,
    verify_password,
)

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "Incorrect email or password"

router = APIRouter(
    prefix="/api/auth",
    tags=["auth"],
)

user_router = APIRouter(
    prefix="/api/user",
    tags=["auth"],
)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: UserCreate,
    response: Response,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    """
    Register an admin account and log it in.

    - **fullName**: at least 2 characters.
    - **email**: must be a valid, unused address.
    - **password**: at least 6 characters.
    """
    users = UserRepository(db)
    if users.email_exists(payload.email):
        logger.error("Registration rejected: email already exists")
        raise ApiError(
            status_code=status.HTTP_409_CONFLICT,
            message="Email already exists",
            field="email",
        )
    user = users.create_account(
        full_name=payload.full_name,
        email=payload.email,
        hashed_password=get_password_hash(payload.password),
    )
    start_session(response, store, user.id)
    logger.info(f"Registered user {user.id}")
    return AuthResponse(message="User created and logged in successfully", user=user)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
):
    """
    Log in with email and password.

    Unknown email and wrong password get the same 401 so accounts cannot be
    probed.
    """
    account = UserRepository(db).get_account_by_email(payload.email)
    if account is None or not verify_password(payload.password, account.hashed_password):
        logger.info("Login failed")
        raise ApiError(status_code=status.HTTP_401_UNAUTHORIZED, message=LOGIN_FAILED_MESSAGE)
    start_session(response, store, account.id)
    logger.info(f"User {account.id} logged in")
    return AuthResponse(
        message="Login successful",
        user=UserPublic(id=account.id, email=account.email, full_name=account.full_name),
    )


@router.post("/logout")
def logout(
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
):
    end_session(request, response, store)
    return {"message": "Logout successful"}


@user_router.get("", response_model=CurrentUserResponse)
def current_user(user: Optional[UserPublic] = Depends(get_optional_user)):
    """The logged-in user, or ``{"user": null}``."""
    return CurrentUserResponse(user=user)
