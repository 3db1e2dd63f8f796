"""
Offer pricing

Resolves the price and discount a product is sold at right now, honoring the
product's offer flag and its optional offer window.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from ..models.product import Product


@dataclass(frozen=True)
class ResolvedPrice:
    """Effective price and discount percentage at a given instant"""
    price: Decimal
    discount: int


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps from the catalog are stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def resolve_price(product: Product, now: Optional[datetime] = None) -> ResolvedPrice:
    """
    Resolve the effective price of a product.

    Args:
        product: Catalog product
        now: Instant to resolve at (defaults to the current UTC time)

    Returns:
        ResolvedPrice with the discounted price and percentage while the offer
        is running, or the list price and 0 otherwise
    """
    list_price = ResolvedPrice(price=product.price, discount=0)

    if not product.offer_active or product.discount_percentage == 0:
        return list_price

    now = _as_utc(now or datetime.now(timezone.utc))

    if product.offer_start_date and now < _as_utc(product.offer_start_date):
        return list_price

    if product.offer_end_date and now > _as_utc(product.offer_end_date):
        return list_price

    discount = product.discount_percentage
    price = product.price * (1 - Decimal(discount) / 100)
    return ResolvedPrice(price=price, discount=discount)
