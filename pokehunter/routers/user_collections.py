from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from pokehunter.repositories.base import Storage
from pokehunter.routers.deps import get_storage, message, parse_id
from pokehunter.schemas import InsertUserCollection, MessageOut, UserCollectionOut

router = APIRouter(prefix="/api/user-collections", tags=["user-collections"])
logger = logging.getLogger(__name__)


@router.get("/{user_id}", response_model=List[UserCollectionOut])
def list_user_collection(user_id: str, storage: Storage = Depends(get_storage)):
    pk = parse_id(user_id)
    if pk is None:
        return []
    try:
        return storage.get_user_collection(pk)
    except Exception:
        logger.exception("Failed to fetch collection of user %s", user_id)
        return message("Failed to fetch user collection", 500)


@router.post("", response_model=UserCollectionOut, status_code=201)
async def add_to_user_collection(request: Request, storage: Storage = Depends(get_storage)):
    try:
        payload = InsertUserCollection.model_validate(await request.json())
    except ValueError:  # malformed JSON or pydantic.ValidationError
        return message("Invalid user collection data", 400)
    try:
        return await run_in_threadpool(storage.add_to_user_collection, payload.to_domain())
    except Exception:
        logger.exception("Failed to store %s", payload)
        return message("Failed to add item to collection", 500)


@router.delete("/{user_id}/{product_id}", response_model=MessageOut)
def remove_from_user_collection(user_id: str, product_id: str, storage: Storage = Depends(get_storage)):
    user_pk, product_pk = parse_id(user_id), parse_id(product_id)
    try:
        removed = (
            storage.remove_from_user_collection(user_pk, product_pk)
            if user_pk is not None and product_pk is not None
            else False
        )
    except Exception:
        logger.exception("Failed to remove product %s from user %s", product_id, user_id)
        return message("Failed to remove item from collection", 500)
    if not removed:
        return message("User collection item not found", 404)
    return {"message": "Item removed from collection"}
