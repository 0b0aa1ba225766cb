"""
Authentication endpoints.

``POST /register`` creates an account and ``POST /login`` exchanges an
email and password for a bearer token carrying ``id``, ``email`` and
``role``.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from sport_community_api.app.core.config import Settings, get_settings
from sport_community_api.app.core.db import Database, get_db
from sport_community_api.app.core.errors import to_http
from sport_community_api.app.core.security import create_access_token
from sport_community_api.app.schemas.user import RegisterResponse, TokenResponse, UserLogin, UserRegister
from sport_community_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register_user(
    user: UserRegister,
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> RegisterResponse:
    """Register a new user.

    Responds 409 if the username or the email is already taken (the
    username is checked first) and 400 if a field is missing.
    """
    try:
        created = UserService.register(db, user, settings.bcrypt_rounds)
    except ValueError as e:
        raise to_http(e) from e
    return RegisterResponse(
        message="User created successfully",
        userId=created["user_id"],
        username=created["username"],
    )


@router.post("/login", response_model=TokenResponse)
def login_user(
    credentials: UserLogin,
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    """Authenticate a user and return a token.

    Unknown email → 404, wrong password → 401.
    """
    try:
        db_user = UserService.authenticate(db, credentials.email, credentials.password)
    except ValueError as e:
        raise to_http(e) from e
    if not db_user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect password")
    token = create_access_token(
        {"id": db_user["user_id"], "email": db_user["email"], "role": db_user["role"]},
        settings,
    )
    logger.info("Issued token for user %s", db_user["user_id"])
    return TokenResponse(token=token)
