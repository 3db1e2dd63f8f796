# API Routes

from .products import router as products_router, categories_router
from .cart import router as cart_router
from .catalog import router as catalog_router

__all__ = ["products_router", "categories_router", "cart_router", "catalog_router"]
