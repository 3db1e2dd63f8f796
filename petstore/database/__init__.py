# Database modules

from .products import product_db, ProductDatabase
from .carts import cart_db, CartDatabase, CartStore

__all__ = [
    "product_db",
    "ProductDatabase",
    "cart_db",
    "CartDatabase",
    "CartStore",
]
