"""Read-only access to the sport taxonomy seeded by the migrations."""

from typing import List

from ..core.db import Database
from ..core.errors import NotFoundError


class SportService:

    @classmethod
    def list_sports(cls, db: Database) -> List[dict]:
        with db.unit_of_work() as store:
            return store.fetch_all("SELECT id_sport, name FROM sports ORDER BY id_sport")

    @classmethod
    def get_sport(cls, db: Database, sport_id: int) -> dict:
        with db.unit_of_work() as store:
            row = store.fetch_one("SELECT * FROM sports WHERE id_sport = ?", (sport_id,))
        if not row:
            raise NotFoundError("Sport not found")
        return row
