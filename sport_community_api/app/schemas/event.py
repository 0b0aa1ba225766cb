"""
Pydantic models for event data.

``EventBase`` carries the descriptive fields shared by creation (read
from multipart form fields) and update (a JSON body).  All of them are
optional at the schema level; ``EventService`` checks presence and
answers with one message naming the whole field set.  ``EventRead``
mirrors the ``events`` table.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class EventBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Sunday 5-a-side"])
    date: Optional[str] = Field(None, examples=["2025-09-01"])
    lieu: Optional[str] = Field(None, examples=["Stade municipal"])
    sport: Optional[str] = Field(None, examples=["Football"])
    genre: Optional[str] = Field(None, examples=["mixte"])
    nb_participants_max: Optional[int] = Field(None, examples=[10])
    description: Optional[str] = Field(None, examples=["Friendly game, all levels"])


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class EventUpdate(EventBase):
    """Schema for updating an event.

    Unlike a partial update, every field is required; the service
    rejects the request if any is missing.
    """
    pass


class EventRead(BaseModel):
    """Schema for reading an event from the API."""

    id_event: int
    user_id: int
    # Creator's username at creation time.
    username: str
    name: str
    date: str
    lieu: str
    sport: str
    genre: str
    nb_participants_max: int
    description: str
    id_media: Optional[int] = None


class EventPage(BaseModel):
    events: List[EventRead]
    nextPage: Optional[int] = None


class ParticipantRead(BaseModel):
    user_id: int
    username: str


class ParticipantList(BaseModel):
    participants: List[ParticipantRead]


class ParticipantCount(BaseModel):
    participants: int
    maxParticipants: int
