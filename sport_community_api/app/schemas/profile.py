"""
Pydantic models for the two-step profile bootstrap.

Step one arrives as multipart form data (it may carry a photo) and is
read with ``Form`` parameters; step two is a JSON body described by
``ProfileFollowedSports``.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ProfileFollowedSports(BaseModel):
    """Payload for ``PUT /profil-2-2``."""

    username: Optional[str] = Field(None, examples=["alice"])
    # Any JSON value; stored JSON-encoded.
    sports_suivis: Any = Field(None, examples=[["Tennis", "Rugby"]])


class ProfileCreated(BaseModel):
    message: str
    profilId: int
