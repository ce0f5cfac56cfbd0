"""
Storefront Application

Serves the storefront catalog, cart and mocked checkout to a single local
user. All business state lives in the session's cart store and local
key-value store; the routes only call into it and return what it computes.
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv(os.path.join(os.getcwd(), "config", ".env"))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.session import create_session
from .services.catalog import configure_collation
from .routes import products_router, cart_router, checkout_router, preferences_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    storage_path: Optional[str] = None,
    checkout_delay_seconds: Optional[float] = None,
) -> FastAPI:
    """Build the storefront app around one shopping session"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info("Storefront starting up...")
        configure_collation()
        app.state.session = create_session(
            storage_path=storage_path or settings.storage_path,
            checkout_delay_seconds=checkout_delay_seconds,
        )
        logger.info(f"Cart restored with {app.state.session.cart.item_count} item(s)")
        yield
        logger.info("Storefront shutting down...")

    app = FastAPI(
        title=settings.app_name,
        description="Catalog, cart and mocked checkout for a demo storefront",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routers
    app.include_router(products_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    app.include_router(preferences_router)

    @app.get("/")
    async def home():
        """Storefront index"""
        return {
            "message": settings.app_name,
            "docs": "/docs",
            "endpoints": {
                "products": "/api/products",
                "cart": "/api/cart",
                "checkout": "/api/checkout",
                "preferences": "/api/preferences",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "storefront"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
