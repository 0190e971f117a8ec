"""Storage contract implemented by every catalog backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

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


class Storage(ABC):
    """Read/write operations needed by the catalog API.

    Lookups by id return ``None`` when nothing matches and never raise.
    Create operations return the fully populated record, including the
    generated id and any store-assigned timestamp. Errors raised by a backend
    propagate unchanged.
    """

    name: str = "abstract"

    # -------------------------- users --------------------------
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[User]:
        """Return a user by id, or None."""

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        """Return the user with exactly this username, or None."""

    @abstractmethod
    def create_user(self, data: NewUser) -> User:
        """Persist a new user."""

    # -------------------------- articles --------------------------
    @abstractmethod
    def get_articles(self, language: Optional[str] = None) -> list[Article]:
        """Return all articles, or only those whose language equals ``language``."""

    @abstractmethod
    def get_article(self, article_id: int) -> Optional[Article]:
        """Return an article by id, or None."""

    @abstractmethod
    def create_article(self, data: NewArticle) -> Article:
        """Persist a new article; ``published_at`` is set to now."""

    # -------------------------- collections --------------------------
    @abstractmethod
    def get_collections(self) -> list[Collection]:
        """Return every card set."""

    @abstractmethod
    def get_collection(self, collection_id: int) -> Optional[Collection]:
        """Return a card set by id, or None."""

    @abstractmethod
    def create_collection(self, data: NewCollection) -> Collection:
        """Persist a new card set."""

    # -------------------------- product types --------------------------
    @abstractmethod
    def get_product_types(self) -> list[ProductType]:
        """Return every product type."""

    @abstractmethod
    def get_product_type(self, product_type_id: int) -> Optional[ProductType]:
        """Return a product type by id, or None."""

    @abstractmethod
    def create_product_type(self, data: NewProductType) -> ProductType:
        """Persist a new product type."""

    # -------------------------- products --------------------------
    @abstractmethod
    def get_products(self, filters: Optional[ProductFilters] = None) -> list[Product]:
        """Return products matching every filter that is set."""

    @abstractmethod
    def get_product(self, product_id: int) -> Optional[Product]:
        """Return a product by id, or None."""

    @abstractmethod
    def create_product(self, data: NewProduct) -> Product:
        """Persist a new product."""

    # -------------------------- user collections --------------------------
    @abstractmethod
    def get_user_collection(self, user_id: int) -> list[UserCollection]:
        """Return every collection entry owned by ``user_id``."""

    @abstractmethod
    def add_to_user_collection(self, data: NewUserCollection) -> UserCollection:
        """Persist a new collection entry; ``added_at`` is set to now."""

    @abstractmethod
    def remove_from_user_collection(self, user_id: int, product_id: int) -> bool:
        """Remove a (user, product) entry. Returns True if something was removed."""
