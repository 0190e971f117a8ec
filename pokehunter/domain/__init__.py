"""Domain records and filter objects shared by storage backends and routers."""

from .entities import (
    Article,
    Collection,
    NewArticle,
    NewCollection,
    NewProduct,
    NewProductType,
    NewUser,
    NewUserCollection,
    Product,
    ProductType,
    User,
    UserCollection,
)
from .filters import ProductFilters

__all__ = [
    "Article",
    "Collection",
    "NewArticle",
    "NewCollection",
    "NewProduct",
    "NewProductType",
    "NewUser",
    "NewUserCollection",
    "Product",
    "ProductFilters",
    "ProductType",
    "User",
    "UserCollection",
]
