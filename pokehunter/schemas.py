"""
Request and response shapes for the HTTP layer.

Payloads travel in camelCase (``nameIt``, ``imageUrl`` ...). Insert models
validate request bodies before anything reaches storage and convert them to
the ``New*`` domain records; output models serialize domain records back.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel

from pokehunter.domain import NewArticle, NewProduct, NewUserCollection

Price = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# -------------------------- inserts --------------------------
class InsertArticle(_CamelModel):
    title: str
    content: str
    excerpt: str
    author: str
    category: str
    language: str = "en"
    image_url: Optional[str] = None
    featured: StrictBool = False

    def to_domain(self) -> NewArticle:
        return NewArticle(**self.model_dump())


class InsertProduct(_CamelModel):
    name: str
    name_it: str
    description: Optional[str] = None
    description_it: Optional[str] = None
    collection_id: int
    product_type_id: int
    card_number: Optional[str] = None
    rarity: Optional[str] = None
    language: str = "en"
    image_url: Optional[str] = None
    prices: Dict[str, Price] = {}

    def to_domain(self) -> NewProduct:
        return NewProduct(**self.model_dump())


class InsertUserCollection(_CamelModel):
    user_id: int
    product_id: int

    def to_domain(self) -> NewUserCollection:
        return NewUserCollection(**self.model_dump())


# -------------------------- outputs --------------------------
class ArticleOut(_CamelModel):
    id: int
    title: str
    content: str
    excerpt: str
    author: str
    category: str
    language: str
    image_url: Optional[str] = None
    featured: bool
    published_at: Optional[datetime] = None


class CollectionOut(_CamelModel):
    id: int
    name: str
    name_it: str
    description: Optional[str] = None
    description_it: Optional[str] = None
    image_url: Optional[str] = None
    release_date: Optional[date] = None


class ProductTypeOut(_CamelModel):
    id: int
    name: str
    name_it: str
    description: Optional[str] = None
    description_it: Optional[str] = None


class ProductOut(_CamelModel):
    id: int
    name: str
    name_it: str
    description: Optional[str] = None
    description_it: Optional[str] = None
    collection_id: int
    product_type_id: int
    card_number: Optional[str] = None
    rarity: Optional[str] = None
    language: str
    image_url: Optional[str] = None
    prices: Dict[str, float]


class UserCollectionOut(_CamelModel):
    id: int
    user_id: int
    product_id: int
    added_at: Optional[datetime] = None


class MessageOut(BaseModel):
    message: str
