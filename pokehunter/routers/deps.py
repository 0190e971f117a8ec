"""Helpers shared by the routers."""

from __future__ import annotations

from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from pokehunter.repositories.base import Storage


def get_storage(request: Request) -> Storage:
    storage = getattr(getattr(request.app, "state", None), "storage", None)
    if storage is None:
        raise RuntimeError("Storage not configured")
    return storage


def parse_id(value: Optional[str]) -> Optional[int]:
    """Lenient integer parsing for path/query ids; anything non-numeric is None."""
    text = (value or "").strip()
    try:
        return int(text)
    except ValueError:
        return None


def message(text: str, status_code: int) -> JSONResponse:
    return JSONResponse({"message": text}, status_code=status_code)
