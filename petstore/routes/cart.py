"""Cart API routes for the pet store"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Response

from ..core.config import Settings, get_settings
from ..models.cart import (
    CartItem,
    AddToCartRequest,
    UpdateCartItemRequest,
    CartResponse,
)
from ..database.carts import cart_db, CartStore
from ..database.products import product_db
from ..services.pricing import resolve_price
from ..services.receipt import ReceiptGenerator, ReceiptError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def get_receipt_generator(settings: Settings = Depends(get_settings)) -> ReceiptGenerator:
    """Receipt generator for the configured store"""
    return ReceiptGenerator(store_name=settings.store_name)


def get_store(cart_id: str) -> CartStore:
    """Look up a cart or fail with 404"""
    store = cart_db.get_cart(cart_id)
    if store is None:
        raise HTTPException(status_code=404, detail="Cart not found")
    return store


def cart_response(cart_id: str, message: Optional[str] = None) -> CartResponse:
    return CartResponse(cart=cart_db.snapshot(cart_id), message=message)


@router.post("", response_model=CartResponse, status_code=201)
async def create_cart(settings: Settings = Depends(get_settings)):
    """Create a new shopping cart, discarding expired ones"""
    cart_db.cleanup_old_carts(settings.cart_max_age_hours)
    cart_id = cart_db.create_cart()
    return cart_response(cart_id, "Cart created")


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str, store: CartStore = Depends(get_store)):
    """Get cart by ID"""
    return cart_response(cart_id)


@router.post("/{cart_id}/items", response_model=CartResponse)
async def add_to_cart(
    cart_id: str,
    request: AddToCartRequest,
    store: CartStore = Depends(get_store),
):
    """Add one unit of a product at its currently effective price"""
    product = product_db.get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    if not product.is_active or product.stock == 0:
        raise HTTPException(status_code=400, detail=f"{product.name} is out of stock")

    resolved = resolve_price(product)
    store.add_item(
        CartItem(
            id=product.id,
            name=product.name,
            price=resolved.price,
            original_price=product.price,
            discount=resolved.discount,
            image_url=product.image_url,
        )
    )
    return cart_response(cart_id, f"Added {product.name} to cart")


@router.put("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    cart_id: str,
    product_id: str,
    request: UpdateCartItemRequest,
    store: CartStore = Depends(get_store),
):
    """Update item quantity in cart"""
    store.update_quantity(product_id, request.quantity)
    return cart_response(cart_id, "Cart updated")


@router.delete("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    cart_id: str,
    product_id: str,
    store: CartStore = Depends(get_store),
):
    """Remove an item from the cart"""
    store.remove_item(product_id)
    return cart_response(cart_id, "Item removed")


@router.delete("/{cart_id}", response_model=CartResponse)
async def clear_cart(cart_id: str, store: CartStore = Depends(get_store)):
    """Clear all items from cart"""
    store.clear_cart()
    return cart_response(cart_id, "Cart cleared")


@router.get("/{cart_id}/receipt")
async def download_receipt(
    cart_id: str,
    store: CartStore = Depends(get_store),
    generator: ReceiptGenerator = Depends(get_receipt_generator),
):
    """Download the purchase summary as a PDF"""
    if not store.items:
        raise HTTPException(status_code=400, detail="Cart is empty")

    try:
        receipt = generator.generate(store)
    except ReceiptError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    return Response(
        content=receipt.content,
        media_type=receipt.media_type,
        headers={"Content-Disposition": f'attachment; filename="{receipt.filename}"'},
    )
