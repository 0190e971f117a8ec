"""Card sets and product types."""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends

from pokehunter.repositories.base import Storage
from pokehunter.routers.deps import get_storage, message, parse_id
from pokehunter.schemas import CollectionOut, ProductTypeOut

router = APIRouter(prefix="/api", tags=["catalog"])
logger = logging.getLogger(__name__)


@router.get("/collections", response_model=List[CollectionOut])
def list_collections(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_collections()
    except Exception:
        logger.exception("Failed to fetch collections")
        return message("Failed to fetch collections", 500)


@router.get("/collections/{collection_id}", response_model=CollectionOut)
def get_collection(collection_id: str, storage: Storage = Depends(get_storage)):
    try:
        pk = parse_id(collection_id)
        collection = storage.get_collection(pk) if pk is not None else None
    except Exception:
        logger.exception("Failed to fetch collection %s", collection_id)
        return message("Failed to fetch collection", 500)
    if not collection:
        return message("Collection not found", 404)
    return collection


@router.get("/product-types", response_model=List[ProductTypeOut])
def list_product_types(storage: Storage = Depends(get_storage)):
    try:
        return storage.get_product_types()
    except Exception:
        logger.exception("Failed to fetch product types")
        return message("Failed to fetch product types", 500)


@router.get("/product-types/{product_type_id}", response_model=ProductTypeOut)
def get_product_type(product_type_id: str, storage: Storage = Depends(get_storage)):
    try:
        pk = parse_id(product_type_id)
        product_type = storage.get_product_type(pk) if pk is not None else None
    except Exception:
        logger.exception("Failed to fetch product type %s", product_type_id)
        return message("Failed to fetch product type", 500)
    if not product_type:
        return message("Product type not found", 404)
    return product_type
