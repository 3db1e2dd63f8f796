"""Catalog API routes for the pet store"""

import logging
from fastapi import APIRouter, HTTPException, Depends, Response

from ..models.product import (
    Category,
    Product,
    ProductCreate,
    ProductView,
    CategoryProductsResponse,
)
from ..database.products import product_db
from ..security.admin import require_admin
from ..services.pricing import resolve_price

logger = logging.getLogger(__name__)

categories_router = APIRouter(prefix="/api/categories", tags=["Catalog"])
router = APIRouter(prefix="/api/products", tags=["Products"])


def to_view(product: Product) -> ProductView:
    """Attach the currently effective price to a product"""
    resolved = resolve_price(product)
    return ProductView(
        product=product,
        effective_price=resolved.price,
        effective_discount=resolved.discount,
    )


@categories_router.get("", response_model=list[Category])
async def list_categories():
    """List all product categories"""
    return product_db.list_categories()


@categories_router.get("/{slug}", response_model=Category)
async def get_category(slug: str):
    """Get a category by slug"""
    category = product_db.get_category_by_slug(slug)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@categories_router.get("/{slug}/products", response_model=CategoryProductsResponse)
async def list_category_products(slug: str):
    """List the active products of a category, ordered by name"""
    category = product_db.get_category_by_slug(slug)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")

    products = [to_view(p) for p in product_db.list_products(category.id)]
    return CategoryProductsResponse(
        category=category,
        products=products,
        total=len(products),
    )


@router.get("/{product_id}", response_model=ProductView)
async def get_product(product_id: str):
    """Get a product with its effective price"""
    product = product_db.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return to_view(product)


@router.post("", response_model=Product, status_code=201, dependencies=[Depends(require_admin)])
async def create_product(request: ProductCreate):
    """Create a product (admin only)"""
    if not product_db.get_category(request.category_id):
        raise HTTPException(status_code=400, detail="Unknown category")

    product = product_db.create_product(request)
    logger.info(f"Product {product.id} created: {product.name}")
    return product


@router.delete("/{product_id}", status_code=204, dependencies=[Depends(require_admin)])
async def delete_product(product_id: str):
    """Delete a product (admin only)"""
    if not product_db.delete_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")

    logger.info(f"Product {product_id} deleted")
    return Response(status_code=204)
