# Pet Store Models

from .product import (
    Category,
    Product,
    ProductCreate,
    ProductView,
    CategoryProductsResponse,
)
from .cart import Cart, CartItem, AddToCartRequest, UpdateCartItemRequest, CartResponse

__all__ = [
    "Category",
    "Product",
    "ProductCreate",
    "ProductView",
    "CategoryProductsResponse",
    "Cart",
    "CartItem",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartResponse",
]
