"""
Business logic for event participation.

Joining an event runs four statements in sequence: the event lookup,
the duplicate check, the participant count and the insert.  Unless
``ATOMIC_WRITES`` is enabled they are separate commits, so two callers
joining at the same time can both see a free seat and push the event
over ``nb_participants_max``.  The UNIQUE(event_id, user_id) constraint
still stops a user from holding two rows for one event.
"""

import logging
from typing import List

from ..core.db import Database
from ..core.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


class ParticipantService:
    """Service for joining, leaving and counting event participants."""

    @classmethod
    def join(cls, db: Database, event_id: int, user_id: int) -> None:
        """Register ``user_id`` for ``event_id``.

        Raises ``NotFoundError`` if the event does not exist and
        ``BadRequestError`` if the user is already registered or the
        event is full.
        """
        with db.unit_of_work() as store:
            event = store.fetch_one(
                "SELECT nb_participants_max FROM events WHERE id_event = ?",
                (event_id,),
            )
            if not event:
                raise NotFoundError("Event not found")

            if store.fetch_one(
                "SELECT id FROM event_participants WHERE event_id = ? AND user_id = ?",
                (event_id, user_id),
            ):
                raise BadRequestError("User already registered for this event")

            count_row = store.fetch_one(
                "SELECT COUNT(*) AS count FROM event_participants WHERE event_id = ?",
                (event_id,),
            )
            if count_row["count"] >= event["nb_participants_max"]:
                logger.info("Event %s is full (%s)", event_id, count_row["count"])
                raise BadRequestError("Maximum number of participants reached")

            store.execute(
                "INSERT INTO event_participants (event_id, user_id) VALUES (?, ?)",
                (event_id, user_id),
            )
        logger.info("User %s joined event %s", user_id, event_id)

    @classmethod
    def leave(cls, db: Database, event_id: int, user_id: int) -> None:
        """Remove ``user_id`` from ``event_id``; ``NotFoundError`` if not registered."""
        with db.unit_of_work() as store:
            cursor = store.execute(
                "DELETE FROM event_participants WHERE event_id = ? AND user_id = ?",
                (event_id, user_id),
            )
            if cursor.rowcount == 0:
                raise NotFoundError("Participant not found")
        logger.info("User %s left event %s", user_id, event_id)

    @classmethod
    def list_participants(cls, db: Database, event_id: int) -> List[dict]:
        with db.unit_of_work() as store:
            return store.fetch_all(
                """
                SELECT u.user_id, u.username
                FROM users u
                JOIN event_participants ep ON u.user_id = ep.user_id
                WHERE ep.event_id = ?
                ORDER BY ep.id
                """,
                (event_id,),
            )

    @classmethod
    def count(cls, db: Database, event_id: int) -> dict:
        """Return ``{"participants", "maxParticipants"}`` from two queries."""
        with db.unit_of_work() as store:
            count_row = store.fetch_one(
                "SELECT COUNT(*) AS count FROM event_participants WHERE event_id = ?",
                (event_id,),
            )
            max_row = store.fetch_one(
                "SELECT nb_participants_max FROM events WHERE id_event = ?",
                (event_id,),
            )
        if not max_row:
            raise NotFoundError("Event not found")
        return {"participants": count_row["count"], "maxParticipants": max_row["nb_participants_max"]}
