"""
Subscriptions API — Greeting Route
====================================

What:  GET / answers `Hello World!` as plain text.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Greeting"])

DEFAULT_NAME = "World"


def greeting(name: str | None = None) -> str:
    return f"Hello {name or DEFAULT_NAME}!"


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def greet() -> str:
    return greeting()
