"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import and_, delete, or_, select

from pokehunter import domain
from pokehunter.db import models
from pokehunter.db.session import get_session
from pokehunter.repositories.base import Storage

logger = logging.getLogger(__name__)


def _utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite hands back naive datetimes; stored values are always UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_user(row: models.User) -> domain.User:
    return domain.User(id=row.id, username=row.username, password=row.password)


def _to_article(row: models.Article) -> domain.Article:
    return domain.Article(
        id=row.id,
        title=row.title,
        content=row.content,
        excerpt=row.excerpt,
        author=row.author,
        category=row.category,
        language=row.language,
        image_url=row.image_url,
        featured=bool(row.featured),
        published_at=_utc(row.published_at),
    )


def _to_collection(row: models.Collection) -> domain.Collection:
    return domain.Collection(
        id=row.id,
        name=row.name,
        name_it=row.name_it,
        description=row.description,
        description_it=row.description_it,
        image_url=row.image_url,
        release_date=row.release_date,
    )


def _to_product_type(row: models.ProductType) -> domain.ProductType:
    return domain.ProductType(
        id=row.id,
        name=row.name,
        name_it=row.name_it,
        description=row.description,
        description_it=row.description_it,
    )


def _to_product(row: models.Product) -> domain.Product:
    return domain.Product(
        id=row.id,
        name=row.name,
        name_it=row.name_it,
        description=row.description,
        description_it=row.description_it,
        collection_id=row.collection_id,
        product_type_id=row.product_type_id,
        card_number=row.card_number,
        rarity=row.rarity,
        language=row.language,
        image_url=row.image_url,
        prices=dict(row.prices or {}),
    )


def _to_user_collection(row: models.UserCollection) -> domain.UserCollection:
    return domain.UserCollection(
        id=row.id,
        user_id=row.user_id,
        product_id=row.product_id,
        added_at=_utc(row.added_at),
    )


class SQLRepository(Storage):
    """Storage backend wrapping the SQLAlchemy session.

    Each call opens its own session; rows are converted to domain records
    before the session closes. Database errors propagate as raised.
    """

    name = "sql"

    def _add(self, entity):
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            logger.debug("Created %s id=%s", type(entity).__name__, entity.id)
            return entity

    # -------------------------- users --------------------------
    def get_user(self, user_id: int) -> Optional[domain.User]:
        with get_session() as session:
            row = session.get(models.User, user_id)
            return _to_user(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[domain.User]:
        with get_session() as session:
            stmt = select(models.User).where(models.User.username == username)
            row = session.execute(stmt).scalars().first()
            return _to_user(row) if row else None

    def create_user(self, data: domain.NewUser) -> domain.User:
        entity = models.User(username=data.username, password=data.password)
        return _to_user(self._add(entity))

    # -------------------------- articles --------------------------
    def get_articles(self, language: Optional[str] = None) -> list[domain.Article]:
        stmt = select(models.Article)
        if language:
            stmt = stmt.where(models.Article.language == language)
        stmt = stmt.order_by(models.Article.published_at.desc(), models.Article.id.desc())
        with get_session() as session:
            return [_to_article(row) for row in session.execute(stmt).scalars().all()]

    def get_article(self, article_id: int) -> Optional[domain.Article]:
        with get_session() as session:
            row = session.get(models.Article, article_id)
            return _to_article(row) if row else None

    def create_article(self, data: domain.NewArticle) -> domain.Article:
        entity = models.Article(
            title=data.title,
            content=data.content,
            excerpt=data.excerpt,
            author=data.author,
            category=data.category,
            language=data.language,
            image_url=data.image_url,
            featured=data.featured,
            published_at=datetime.now(timezone.utc),
        )
        return _to_article(self._add(entity))

    # -------------------------- collections --------------------------
    def get_collections(self) -> list[domain.Collection]:
        with get_session() as session:
            return [_to_collection(row) for row in session.execute(select(models.Collection)).scalars().all()]

    def get_collection(self, collection_id: int) -> Optional[domain.Collection]:
        with get_session() as session:
            row = session.get(models.Collection, collection_id)
            return _to_collection(row) if row else None

    def create_collection(self, data: domain.NewCollection) -> domain.Collection:
        entity = models.Collection(
            name=data.name,
            name_it=data.name_it,
            description=data.description,
            description_it=data.description_it,
            image_url=data.image_url,
            release_date=data.release_date,
        )
        return _to_collection(self._add(entity))

    # -------------------------- product types --------------------------
    def get_product_types(self) -> list[domain.ProductType]:
        with get_session() as session:
            return [_to_product_type(row) for row in session.execute(select(models.ProductType)).scalars().all()]

    def get_product_type(self, product_type_id: int) -> Optional[domain.ProductType]:
        with get_session() as session:
            row = session.get(models.ProductType, product_type_id)
            return _to_product_type(row) if row else None

    def create_product_type(self, data: domain.NewProductType) -> domain.ProductType:
        entity = models.ProductType(
            name=data.name,
            name_it=data.name_it,
            description=data.description,
            description_it=data.description_it,
        )
        return _to_product_type(self._add(entity))

    # -------------------------- products --------------------------
    def get_products(self, filters: Optional[domain.ProductFilters] = None) -> list[domain.Product]:
        filters = filters or domain.ProductFilters()
        conditions = []
        if filters.collection_id:
            conditions.append(models.Product.collection_id == filters.collection_id)
        if filters.product_type_id:
            conditions.append(models.Product.product_type_id == filters.product_type_id)
        if filters.language:
            conditions.append(models.Product.language == filters.language)
        if filters.search_term:
            pattern = f"%{filters.search_term}%"
            conditions.append(
                or_(
                    models.Product.name.ilike(pattern),
                    models.Product.name_it.ilike(pattern),
                    models.Product.description.ilike(pattern),
                    models.Product.description_it.ilike(pattern),
                )
            )
        stmt = select(models.Product)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        with get_session() as session:
            return [_to_product(row) for row in session.execute(stmt).scalars().all()]

    def get_product(self, product_id: int) -> Optional[domain.Product]:
        with get_session() as session:
            row = session.get(models.Product, product_id)
            return _to_product(row) if row else None

    def create_product(self, data: domain.NewProduct) -> domain.Product:
        entity = models.Product(
            name=data.name,
            name_it=data.name_it,
            description=data.description,
            description_it=data.description_it,
            collection_id=data.collection_id,
            product_type_id=data.product_type_id,
            card_number=data.card_number,
            rarity=data.rarity,
            language=data.language,
            image_url=data.image_url,
            prices=dict(data.prices or {}),
        )
        return _to_product(self._add(entity))

    # -------------------------- user collections --------------------------
    def get_user_collection(self, user_id: int) -> list[domain.UserCollection]:
        with get_session() as session:
            stmt = select(models.UserCollection).where(models.UserCollection.user_id == user_id)
            return [_to_user_collection(row) for row in session.execute(stmt).scalars().all()]

    def add_to_user_collection(self, data: domain.NewUserCollection) -> domain.UserCollection:
        entity = models.UserCollection(
            user_id=data.user_id,
            product_id=data.product_id,
            added_at=datetime.now(timezone.utc),
        )
        return _to_user_collection(self._add(entity))

    def remove_from_user_collection(self, user_id: int, product_id: int) -> bool:
        with get_session() as session:
            stmt = delete(models.UserCollection).where(
                and_(
                    models.UserCollection.user_id == user_id,
                    models.UserCollection.product_id == product_id,
                )
            )
            result = session.execute(stmt)
            session.commit()
            removed = result.rowcount or 0
            if removed:
                logger.debug("Removed %d UserCollection row(s) for user=%s product=%s", removed, user_id, product_id)
            return removed > 0

    # -------------------------- maintenance --------------------------
    def clear_all(self) -> None:
        """Delete every catalog row, children before parents."""
        with get_session() as session:
            for table in (
                models.UserCollection,
                models.Product,
                models.Article,
                models.Collection,
                models.ProductType,
                models.User,
            ):
                session.execute(delete(table))
            session.commit()
