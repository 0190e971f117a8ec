from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from pokehunter.repositories.base import Storage
from pokehunter.routers.deps import get_storage, message, parse_id
from pokehunter.schemas import ArticleOut, InsertArticle

router = APIRouter(prefix="/api/articles", tags=["articles"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[ArticleOut])
def list_articles(language: Optional[str] = None, storage: Storage = Depends(get_storage)):
    try:
        return storage.get_articles(language or None)
    except Exception:
        logger.exception("Failed to fetch articles")
        return message("Failed to fetch articles", 500)


@router.get("/{article_id}", response_model=ArticleOut)
def get_article(article_id: str, storage: Storage = Depends(get_storage)):
    try:
        article_pk = parse_id(article_id)
        article = storage.get_article(article_pk) if article_pk is not None else None
    except Exception:
        logger.exception("Failed to fetch article %s", article_id)
        return message("Failed to fetch article", 500)
    if not article:
        return message("Article not found", 404)
    return article


@router.post("", response_model=ArticleOut, status_code=201)
async def create_article(request: Request, storage: Storage = Depends(get_storage)):
    try:
        payload = InsertArticle.model_validate(await request.json())
    except ValueError:  # malformed JSON or pydantic.ValidationError
        return message("Invalid article data", 400)
    try:
        return await run_in_threadpool(storage.create_article, payload.to_domain())
    except Exception:
        logger.exception("Failed to store %s", payload)
        return message("Failed to create article", 500)
