"""Cart models for the pet store"""

from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal
from datetime import datetime


class CartItem(BaseModel):
    """Line item in a shopping cart, priced at the time it was added"""
    id: str
    name: str
    price: Decimal
    original_price: Decimal
    discount: int = Field(ge=0, le=100, default=0)
    quantity: int = Field(ge=1, default=1)
    image_url: Optional[str] = None

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


class Cart(BaseModel):
    """Snapshot of a shopping cart and its aggregates"""
    cart_id: str
    items: list[CartItem] = []
    total_items: int = 0
    subtotal: Decimal = Decimal("0")
    total_discount: Decimal = Decimal("0")
    total: Decimal = Decimal("0")
    currency: str = "USD"
    created_at: datetime
    updated_at: datetime


class AddToCartRequest(BaseModel):
    """Request to add a product to the cart"""
    product_id: str


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity (zero or less removes the item)"""
    quantity: int


class CartResponse(BaseModel):
    """Cart API response"""
    cart: Cart
    message: Optional[str] = None
