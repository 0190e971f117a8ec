from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from starlette.concurrency import run_in_threadpool

from pokehunter.domain import ProductFilters
from pokehunter.repositories.base import Storage
from pokehunter.routers.deps import get_storage, message, parse_id
from pokehunter.schemas import InsertProduct, ProductOut

router = APIRouter(prefix="/api/products", tags=["products"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[ProductOut])
def list_products(
    collection_id: Optional[str] = Query(None, alias="collectionId"),
    product_type_id: Optional[str] = Query(None, alias="productTypeId"),
    language: Optional[str] = None,
    search: Optional[str] = None,
    storage: Storage = Depends(get_storage),
):
    filters = ProductFilters(
        collection_id=parse_id(collection_id),
        product_type_id=parse_id(product_type_id),
        language=language or None,
        search=search or None,
    )
    try:
        return storage.get_products(filters)
    except Exception:
        logger.exception("Failed to fetch products with %s", filters)
        return message("Failed to fetch products", 500)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, storage: Storage = Depends(get_storage)):
    try:
        pk = parse_id(product_id)
        product = storage.get_product(pk) if pk is not None else None
    except Exception:
        logger.exception("Failed to fetch product %s", product_id)
        return message("Failed to fetch product", 500)
    if not product:
        return message("Product not found", 404)
    return product


@router.post("", response_model=ProductOut, status_code=201)
async def create_product(request: Request, storage: Storage = Depends(get_storage)):
    try:
        payload = InsertProduct.model_validate(await request.json())
    except ValueError:  # malformed JSON or pydantic.ValidationError
        return message("Invalid product data", 400)
    try:
        return await run_in_threadpool(storage.create_product, payload.to_domain())
    except Exception:
        logger.exception("Failed to store %s", payload)
        return message("Failed to create product", 500)
