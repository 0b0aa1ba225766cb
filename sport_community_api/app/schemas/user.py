"""
Pydantic models for user data.

Request fields are optional at the schema level so that a missing
field produces the handler's own 400 message instead of a generic
validation error.  Passwords are never part of a response model.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    """Payload for ``POST /register``."""

    username: Optional[str] = Field(None, examples=["alice"])
    password: Optional[str] = Field(None, examples=["pw123"])
    email: Optional[str] = Field(None, examples=["a@x.com"])


class UserLogin(BaseModel):
    """Payload for ``POST /login``."""

    email: Optional[str] = Field(None, examples=["a@x.com"])
    password: Optional[str] = Field(None, examples=["pw123"])


class RegisterResponse(BaseModel):
    message: str
    userId: int
    username: str


class TokenResponse(BaseModel):
    token: str
