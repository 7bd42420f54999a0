"""
Cart Store Application

Serves a single process-wide shopping cart that survives restarts by
mirroring itself to a local key-value store.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI

from .core.config import Settings, get_settings
from .core.context import CartProvider
from .routes import cart_router
from .storage import PersistentKeyValueStore, get_storage

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[PersistentKeyValueStore] = None,
) -> FastAPI:
    """Build the application around one hydrated cart store"""
    settings = settings or get_settings()
    if storage is None:
        storage = get_storage(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info(f"{settings.app_name} starting up...")
        logger.info(f"Storage backend: {settings.storage_backend}")
        async with CartProvider(storage, settings) as store:
            app.state.cart_store = store
            yield
            app.state.cart_store = None
        logger.info(f"{settings.app_name} shutting down...")

    app = FastAPI(
        title="Cart Store",
        description="Persistent shopping cart state",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.include_router(cart_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": settings.app_name}

    return app


def run() -> None:
    """Run the service with uvicorn"""
    import uvicorn

    load_dotenv()
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
