"""Catalog records shared by every storage backend.

Both the in-memory store and the SQL repository hand out these dataclasses,
so callers never depend on which backend is active. ``New*`` types carry the
caller-supplied fields of a create operation; the full record adds the id and
any store-assigned timestamp.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Optional


@dataclass
class NewUser:
    username: str
    password: str


@dataclass
class User(NewUser):
    id: int = 0


@dataclass
class NewArticle:
    title: str
    content: str
    excerpt: str
    author: str
    category: str
    language: str = "en"
    image_url: Optional[str] = None
    featured: bool = False


@dataclass
class Article(NewArticle):
    id: int = 0
    published_at: Optional[datetime] = None


@dataclass
class NewCollection:
    name: str
    name_it: str
    description: Optional[str] = None
    description_it: Optional[str] = None
    image_url: Optional[str] = None
    release_date: Optional[date] = None


@dataclass
class Collection(NewCollection):
    id: int = 0


@dataclass
class NewProductType:
    name: str
    name_it: str
    description: Optional[str] = None
    description_it: Optional[str] = None


@dataclass
class ProductType(NewProductType):
    id: int = 0


@dataclass
class NewProduct:
    name: str
    name_it: str
    collection_id: int
    product_type_id: int
    description: Optional[str] = None
    description_it: Optional[str] = None
    card_number: Optional[str] = None
    rarity: Optional[str] = None
    language: str = "en"
    image_url: Optional[str] = None
    prices: Dict[str, float] = field(default_factory=dict)


@dataclass
class Product(NewProduct):
    id: int = 0


@dataclass
class NewUserCollection:
    user_id: int
    product_id: int


@dataclass
class UserCollection(NewUserCollection):
    id: int = 0
    added_at: Optional[datetime] = None
