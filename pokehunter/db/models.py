"""SQLAlchemy models for the catalog tables."""
from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    JSON,
    func,
)
from sqlalchemy.orm import relationship

from .session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False)
    password = Column(Text, nullable=False)

    collection_items = relationship("UserCollection", back_populates="user", cascade="all,delete-orphan")


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=False)
    author = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    language = Column(String(8), default="en", nullable=False)
    image_url = Column(Text, nullable=True)
    featured = Column(Boolean, default=False, nullable=False)
    published_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Collection(Base):
    __tablename__ = "collections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    name_it = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    description_it = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    release_date = Column(Date, nullable=True)

    products = relationship("Product", back_populates="collection")


class ProductType(Base):
    __tablename__ = "product_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    name_it = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    description_it = Column(Text, nullable=True)

    products = relationship("Product", back_populates="product_type")


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    name_it = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    description_it = Column(Text, nullable=True)
    collection_id = Column(Integer, ForeignKey("collections.id"), nullable=False)
    product_type_id = Column(Integer, ForeignKey("product_types.id"), nullable=False)
    card_number = Column(String(32), nullable=True)
    rarity = Column(String(64), nullable=True)
    language = Column(String(8), default="en", nullable=False)
    image_url = Column(Text, nullable=True)
    prices = Column(JSON, default=dict, nullable=False)

    collection = relationship("Collection", back_populates="products")
    product_type = relationship("ProductType", back_populates="products")


class UserCollection(Base):
    __tablename__ = "user_collections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    added_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="collection_items")
