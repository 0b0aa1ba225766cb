"""Sport taxonomy endpoints (read only)."""

from typing import List

from fastapi import APIRouter, Depends

from sport_community_api.app.core.db import Database, get_db
from sport_community_api.app.core.errors import to_http
from sport_community_api.app.schemas.sport import SportRead, SportSummary
from sport_community_api.app.services.sport_service import SportService

router = APIRouter()


@router.get("", response_model=List[SportSummary])
def list_sports(db: Database = Depends(get_db)) -> List[SportSummary]:
    """Return the id and name of every sport."""
    return SportService.list_sports(db)


@router.get("/{sport_id}", response_model=SportRead)
def get_sport(sport_id: int, db: Database = Depends(get_db)) -> SportRead:
    try:
        return SportService.get_sport(db, sport_id)
    except ValueError as e:
        raise to_http(e) from e
