"""Pydantic models for the sport taxonomy."""

from typing import Optional

from pydantic import BaseModel


class SportSummary(BaseModel):
    id_sport: int
    name: str


class SportRead(SportSummary):
    description: Optional[str] = None
