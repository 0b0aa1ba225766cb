"""Liveness endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/test", response_class=PlainTextResponse)
async def test() -> str:
    return "Hello World!"
