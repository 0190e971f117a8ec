import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pokehunter.core.config import get_settings
from pokehunter.repositories import get_storage
from pokehunter.repositories.base import Storage
from pokehunter.routers import articles as articles_router
from pokehunter.routers import catalog as catalog_router
from pokehunter.routers import health as health_router
from pokehunter.routers import products as products_router
from pokehunter.routers import user_collections as user_collections_router

DEV_ORIGINS = (
    "http://localhost:5000",
    "http://127.0.0.1:5000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """Build the API around ``storage`` (default: the configured backend)."""
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(title="PokeHunter Catalog API")
    application.state.storage = storage if storage is not None else get_storage()

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update(DEV_ORIGINS)
    if allowed_cors:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_credentials=True,
            allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    application.include_router(articles_router.router)
    application.include_router(catalog_router.router)
    application.include_router(products_router.router)
    application.include_router(user_collections_router.router)
    application.include_router(health_router.router)
    return application


app = create_app()
