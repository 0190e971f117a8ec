"""
FastAPI routers grouped by resource (articles, catalog, products, user collections).

Each module exposes an APIRouter included by ``pokehunter.app``. Handlers
validate input, call the configured ``Storage`` and map absence/failure to
HTTP status codes; they hold no business rules of their own.
"""
