"""
Event endpoints.

Reading events and their participants is public.  Creating, updating
and deleting events, and joining or leaving one, require a bearer
token.  Update and delete only touch events owned by the caller but
answer 200 either way.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from sport_community_api.app.core.config import Settings, get_settings
from sport_community_api.app.core.db import Database, get_db
from sport_community_api.app.core.errors import to_http
from sport_community_api.app.core.security import get_current_user
from sport_community_api.app.schemas.event import (
    EventCreate,
    EventPage,
    EventRead,
    EventUpdate,
    ParticipantCount,
    ParticipantList,
)
from sport_community_api.app.services.event_service import EventService
from sport_community_api.app.services.pagination import parse_page_params
from sport_community_api.app.services.participant_service import ParticipantService


router = APIRouter()


@router.get("", response_model=EventPage)
def list_events(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    db: Database = Depends(get_db),
) -> EventPage:
    """List events.

    - **page**, **limit**: paging hints (defaults 1 and 10).  Every
      event is returned; ``nextPage`` is ``page + 1`` only when the
      number of events equals ``limit``.
    """
    page_number, page_size, _offset = parse_page_params(page, limit)
    return EventService.list_events(db, page_number, page_size)


@router.get("/{event_id}", response_model=EventRead)
def get_event(event_id: int, db: Database = Depends(get_db)) -> EventRead:
    """Retrieve a single event by its ID.  Raises 404 if the event is not found."""
    try:
        return EventService.get_event(db, event_id)
    except ValueError as e:
        raise to_http(e) from e


@router.post("", status_code=status.HTTP_201_CREATED)
def create_event(
    name: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    lieu: Optional[str] = Form(None),
    sport: Optional[str] = Form(None),
    genre: Optional[str] = Form(None),
    nb_participants_max: Optional[int] = Form(None),
    description: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Create a new event owned by the caller, with its image or video."""
    data = EventCreate(
        name=name,
        date=date,
        lieu=lieu,
        sport=sport,
        genre=genre,
        nb_participants_max=nb_participants_max,
        description=description,
    )
    try:
        event_id, media_id = EventService.create_event(
            db, current_user["id"], data, file, settings.upload_dir
        )
    except ValueError as e:
        raise to_http(e) from e
    return {"message": "Event and media created successfully", "eventId": event_id, "mediaId": media_id}


@router.put("/{event_id}")
def update_event(
    event_id: int,
    updates: EventUpdate,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> dict:
    """Replace the descriptive fields of an event.

    All fields are required.  Only the owner's event is changed; for
    anyone else the request succeeds without effect.
    """
    try:
        EventService.update_event(db, event_id, current_user["id"], updates)
    except ValueError as e:
        raise to_http(e) from e
    return {"message": "Event updated successfully", "eventId": event_id}


@router.delete("/{event_id}")
def delete_event(
    event_id: int,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> dict:
    """Delete an event owned by the caller.  Always answers 200."""
    EventService.delete_event(db, event_id, current_user["id"])
    return {"message": "Event deleted successfully", "eventId": event_id}


@router.post("/{event_id}/participants", status_code=status.HTTP_201_CREATED)
def join_event(
    event_id: int,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> dict:
    """Register the caller for an event.

    404 if the event does not exist; 400 if the caller is already
    registered or the event is full.
    """
    try:
        ParticipantService.join(db, event_id, current_user["id"])
    except ValueError as e:
        raise to_http(e) from e
    return {"message": "User added to the event successfully"}


@router.delete("/{event_id}/participants")
def leave_event(
    event_id: int,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
) -> dict:
    try:
        ParticipantService.leave(db, event_id, current_user["id"])
    except ValueError as e:
        raise to_http(e) from e
    return {"message": "User removed from the event successfully"}


@router.get("/{event_id}/participants", response_model=ParticipantList)
def list_event_participants(event_id: int, db: Database = Depends(get_db)) -> ParticipantList:
    """List the ``user_id`` and ``username`` of every participant."""
    participants = ParticipantService.list_participants(db, event_id)
    return ParticipantList(participants=participants)


@router.get("/{event_id}/participants/count", response_model=ParticipantCount)
def count_event_participants(event_id: int, db: Database = Depends(get_db)) -> ParticipantCount:
    try:
        return ParticipantService.count(db, event_id)
    except ValueError as e:
        raise to_http(e) from e
