"""
In-memory storage backend.

Every entity type lives in its own id-keyed dict with an independent id
counter. Records are copied on the way in and out so callers never hold a
reference to stored state.
"""

from __future__ import annotations

import copy
import logging
import threading
from dataclasses import asdict
from datetime import datetime, timezone
from itertools import count
from typing import Dict, Iterator, Optional, TypeVar

from pokehunter.domain import (
    Article,
    Collection,
    NewArticle,
    NewCollection,
    NewProduct,
    NewProductType,
    NewUser,
    NewUserCollection,
    Product,
    ProductFilters,
    ProductType,
    User,
    UserCollection,
)
from pokehunter.repositories.base import Storage
from pokehunter.repositories.seed_data import load_seed

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Table(Dict[int, T]):
    """Id-keyed records plus the counter that hands out their ids."""

    def __init__(self) -> None:
        super().__init__()
        self._ids: Iterator[int] = count(1)

    def next_id(self) -> int:
        return next(self._ids)


def _copy(record: Optional[T]) -> Optional[T]:
    return copy.deepcopy(record) if record is not None else None


def _contains(value: Optional[str], term: str) -> bool:
    return bool(value) and term in value.lower()


class MemoryStorage(Storage):
    """Storage backend holding everything in process memory.

    The store is pre-populated with the fixed catalog fixture unless
    ``seed=False``. Each public operation runs under a single lock.
    """

    name = "memory"

    def __init__(self, *, seed: bool = True) -> None:
        self._lock = threading.Lock()
        self._users: _Table[User] = _Table()
        self._articles: _Table[Article] = _Table()
        self._collections: _Table[Collection] = _Table()
        self._product_types: _Table[ProductType] = _Table()
        self._products: _Table[Product] = _Table()
        self._user_collections: _Table[UserCollection] = _Table()
        if seed:
            load_seed(self)
            logger.debug(
                "Seeded memory storage: %d product types, %d collections, %d products, %d articles",
                len(self._product_types),
                len(self._collections),
                len(self._products),
                len(self._articles),
            )

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _insert(self, table: _Table[T], record_cls: type[T], data: object, **extra) -> T:
        with self._lock:
            values = asdict(data)
            values.update(id=table.next_id(), **extra)
            record = record_cls(**values)
            table[record.id] = record
            logger.debug("Created %s id=%s", record_cls.__name__, record.id)
            return copy.deepcopy(record)

    # -------------------------- users --------------------------
    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            return _copy(self._users.get(user_id))

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return _copy(user)
            return None

    def create_user(self, data: NewUser) -> User:
        return self._insert(self._users, User, data)

    # -------------------------- articles --------------------------
    def get_articles(self, language: Optional[str] = None) -> list[Article]:
        with self._lock:
            articles = list(self._articles.values())
            if language:
                articles = [article for article in articles if article.language == language]
            return copy.deepcopy(articles)

    def get_article(self, article_id: int) -> Optional[Article]:
        with self._lock:
            return _copy(self._articles.get(article_id))

    def create_article(self, data: NewArticle) -> Article:
        return self._insert(self._articles, Article, data, published_at=self._now())

    # -------------------------- collections --------------------------
    def get_collections(self) -> list[Collection]:
        with self._lock:
            return copy.deepcopy(list(self._collections.values()))

    def get_collection(self, collection_id: int) -> Optional[Collection]:
        with self._lock:
            return _copy(self._collections.get(collection_id))

    def create_collection(self, data: NewCollection) -> Collection:
        return self._insert(self._collections, Collection, data)

    # -------------------------- product types --------------------------
    def get_product_types(self) -> list[ProductType]:
        with self._lock:
            return copy.deepcopy(list(self._product_types.values()))

    def get_product_type(self, product_type_id: int) -> Optional[ProductType]:
        with self._lock:
            return _copy(self._product_types.get(product_type_id))

    def create_product_type(self, data: NewProductType) -> ProductType:
        return self._insert(self._product_types, ProductType, data)

    # -------------------------- products --------------------------
    def get_products(self, filters: Optional[ProductFilters] = None) -> list[Product]:
        filters = filters or ProductFilters()
        with self._lock:
            products = list(self._products.values())
            if filters.collection_id:
                products = [p for p in products if p.collection_id == filters.collection_id]
            if filters.product_type_id:
                products = [p for p in products if p.product_type_id == filters.product_type_id]
            if filters.language:
                products = [p for p in products if p.language == filters.language]
            term = filters.search_term.lower()
            if term:
                # description_it is not searched here, unlike the SQL backend
                products = [
                    p
                    for p in products
                    if _contains(p.name, term) or _contains(p.name_it, term) or _contains(p.description, term)
                ]
            return copy.deepcopy(products)

    def get_product(self, product_id: int) -> Optional[Product]:
        with self._lock:
            return _copy(self._products.get(product_id))

    def create_product(self, data: NewProduct) -> Product:
        return self._insert(self._products, Product, data)

    # -------------------------- user collections --------------------------
    def get_user_collection(self, user_id: int) -> list[UserCollection]:
        with self._lock:
            return copy.deepcopy([uc for uc in self._user_collections.values() if uc.user_id == user_id])

    def add_to_user_collection(self, data: NewUserCollection) -> UserCollection:
        return self._insert(self._user_collections, UserCollection, data, added_at=self._now())

    def remove_from_user_collection(self, user_id: int, product_id: int) -> bool:
        with self._lock:
            for entry_id, entry in self._user_collections.items():
                if entry.user_id == user_id and entry.product_id == product_id:
                    del self._user_collections[entry_id]
                    logger.debug("Removed UserCollection id=%s", entry_id)
                    return True
            return False
