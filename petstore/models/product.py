"""Catalog models for the pet store"""

from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal
from datetime import datetime


class Category(BaseModel):
    """Product category"""
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    image_url: Optional[str] = None


class Product(BaseModel):
    """Product in the catalog"""
    id: str
    name: str
    description: Optional[str] = None
    price: Decimal = Field(ge=0)
    image_url: Optional[str] = None
    stock: int = Field(ge=0, default=0)
    is_active: bool = True
    category_id: Optional[str] = None

    # Offer
    discount_percentage: int = Field(ge=0, le=100, default=0)
    offer_active: bool = False
    offer_start_date: Optional[datetime] = None
    offer_end_date: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProductCreate(BaseModel):
    """Admin request to create a product"""
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: Decimal = Field(ge=0)
    image_url: Optional[str] = None
    stock: int = Field(ge=0, default=0)
    category_id: str
    discount_percentage: int = Field(ge=0, le=100, default=0)
    offer_active: bool = False
    offer_start_date: Optional[datetime] = None
    offer_end_date: Optional[datetime] = None


class ProductView(BaseModel):
    """Product with its currently effective price"""
    product: Product
    effective_price: Decimal
    effective_discount: int


class CategoryProductsResponse(BaseModel):
    """Products listed under a category"""
    category: Category
    products: list[ProductView]
    total: int
