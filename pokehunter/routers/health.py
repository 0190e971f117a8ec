from __future__ import annotations

from fastapi import APIRouter, Depends

from pokehunter.repositories.base import Storage
from pokehunter.routers.deps import get_storage

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health(storage: Storage = Depends(get_storage)):
    return {"status": "ok", "storage": storage.name}
