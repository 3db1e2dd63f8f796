"""
Neon Pet Store Application

Storefront API for a pet-supply shop: catalog browsing with time-windowed
offers, session shopping carts, PDF purchase summaries and a catalog QR code.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before settings are built
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "config", ".env"))

from .core.config import settings
from .routes import products_router, categories_router, cart_router, catalog_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.app_name} starting up...")
    logger.info(f"Catalog URL: {settings.catalog_url}")
    logger.info(f"Admin endpoints: {'enabled' if settings.admin_enabled else 'disabled'}")
    yield
    logger.info(f"{settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Pet supply storefront with carts, offers and purchase summaries",
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
app.include_router(categories_router)
app.include_router(products_router)
app.include_router(cart_router)
app.include_router(catalog_router)


@app.get("/")
async def home():
    """Storefront API index"""
    return {
        "message": f"{settings.app_name} API",
        "docs": "/docs",
        "endpoints": {
            "categories": "/api/categories",
            "products": "/api/products",
            "cart": "/api/cart",
            "catalog_qr": "/api/catalog/qr",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "neon-pet-store"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "petstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
