"""
Business logic for events.

Updates and deletes are filtered on both the event id and the caller's
user id.  A caller who does not own the event therefore changes
nothing, and the operation still reports success; callers that need to
know can compare the row before and after.
"""

import logging
from typing import Optional, Tuple

from fastapi import UploadFile

from ..core.db import Database
from ..core.errors import NotFoundError, require_fields
from ..schemas.event import EventBase, EventCreate, EventUpdate
from .media_service import MediaService
from .pagination import next_page
from .user_service import UserService

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = (
    "Fields name, date, lieu, sport, genre, nb_participants_max and description are required"
)


def _require_event_fields(data: EventBase) -> None:
    require_fields(
        REQUIRED_FIELDS_MESSAGE,
        data.name,
        data.date,
        data.lieu,
        data.sport,
        data.genre,
        data.nb_participants_max,
        data.description,
    )


class EventService:
    """Service for managing events.

    Each public method opens one unit of work and runs its statements
    in order, stopping at the first failed check.
    """

    @classmethod
    def list_events(cls, db: Database, page: int, limit: int) -> dict:
        """Return every event plus a ``nextPage`` hint derived from ``limit``."""
        with db.unit_of_work() as store:
            rows = store.fetch_all("SELECT * FROM events")
        return {"events": rows, "nextPage": next_page(rows, page, limit)}

    @classmethod
    def get_event(cls, db: Database, event_id: int) -> dict:
        """Retrieve a single event by ID.

        Raises ``NotFoundError`` if the event does not exist.
        """
        with db.unit_of_work() as store:
            row = store.fetch_one("SELECT * FROM events WHERE id_event = ?", (event_id,))
        if not row:
            raise NotFoundError("Event not found")
        return row

    @classmethod
    def create_event(
        cls,
        db: Database,
        user_id: int,
        data: EventCreate,
        upload: Optional[UploadFile],
        upload_dir: str,
    ) -> Tuple[int, int]:
        """Create an event and its media; return ``(event_id, media_id)``."""
        _require_event_fields(data)
        upload = MediaService.require_file(upload)
        with db.unit_of_work() as store:
            username = UserService.username_for(store, user_id)
            media_id = MediaService.attach(store, user_id, upload, upload_dir)
            cursor = store.execute(
                """
                INSERT INTO events (user_id, username, name, date, lieu, sport, genre,
                                    nb_participants_max, description, id_media)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    user_id,
                    username,
                    data.name,
                    data.date,
                    data.lieu,
                    data.sport,
                    data.genre,
                    data.nb_participants_max,
                    data.description,
                    media_id,
                ),
            )
            event_id = cursor.lastrowid
        logger.info("User %s created event %s '%s'", user_id, event_id, data.name)
        return event_id, media_id

    @classmethod
    def update_event(cls, db: Database, event_id: int, user_id: int, data: EventUpdate) -> int:
        """Overwrite the descriptive fields of an event owned by ``user_id``.

        Returns the number of rows changed (0 when the caller is not the
        owner or the event does not exist).
        """
        _require_event_fields(data)
        with db.unit_of_work() as store:
            UserService.username_for(store, user_id)
            cursor = store.execute(
                """
                UPDATE events
                SET name = ?, date = ?, lieu = ?, sport = ?, genre = ?, nb_participants_max = ?, description = ?
                WHERE id_event = ? AND user_id = ?
                """,
                (
                    data.name,
                    data.date,
                    data.lieu,
                    data.sport,
                    data.genre,
                    data.nb_participants_max,
                    data.description,
                    event_id,
                    user_id,
                ),
            )
            changed = cursor.rowcount
        if not changed:
            logger.info("Update of event %s by user %s matched no row", event_id, user_id)
        return changed

    @classmethod
    def delete_event(cls, db: Database, event_id: int, user_id: int) -> int:
        """Delete an event owned by ``user_id``; return the number of rows removed."""
        with db.unit_of_work() as store:
            cursor = store.execute(
                "DELETE FROM events WHERE id_event = ? AND user_id = ?",
                (event_id, user_id),
            )
            removed = cursor.rowcount
        logger.info("User %s deleted event %s (%s row(s))", user_id, event_id, removed)
        return removed
