"""Pet store catalog database"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from ..models.product import Category, Product, ProductCreate

# Catalog categories
CATEGORIES: dict[str, Category] = {
    "cat-dogs": Category(
        id="cat-dogs",
        name="Dogs",
        slug="dogs",
        description="Food, toys and gear for dogs of every size.",
        image_url="/static/images/dogs.jpg",
    ),
    "cat-cats": Category(
        id="cat-cats",
        name="Cats",
        slug="cats",
        description="Everything for indoor and outdoor cats.",
        image_url="/static/images/cats.jpg",
    ),
    "cat-birds": Category(
        id="cat-birds",
        name="Birds",
        slug="birds",
        description="Seed mixes, cages and perches.",
        image_url="/static/images/birds.jpg",
    ),
    "cat-fish": Category(
        id="cat-fish",
        name="Fish",
        slug="fish",
        description="Aquariums, filters and flakes.",
        image_url="/static/images/fish.jpg",
    ),
}

# Pet supply catalog
PRODUCTS: dict[str, Product] = {
    "prod-001": Product(
        id="prod-001",
        name="Grain-Free Salmon Kibble 12kg",
        description="High-protein dry food for adult dogs.",
        price=Decimal("64.99"),
        category_id="cat-dogs",
        image_url="/static/images/salmon-kibble.jpg",
        stock=40,
        discount_percentage=15,
        offer_active=True,
    ),
    "prod-002": Product(
        id="prod-002",
        name="Rope Tug Toy",
        description="Braided cotton rope for tug and fetch.",
        price=Decimal("12.50"),
        category_id="cat-dogs",
        image_url="/static/images/rope-toy.jpg",
        stock=120,
    ),
    "prod-003": Product(
        id="prod-003",
        name="Orthopedic Dog Bed",
        description="Memory foam bed with a washable cover.",
        price=Decimal("89.00"),
        category_id="cat-dogs",
        image_url="/static/images/dog-bed.jpg",
        stock=0,
    ),
    "prod-004": Product(
        id="prod-004",
        name="Clumping Cat Litter 10L",
        description="Low-dust bentonite litter.",
        price=Decimal("18.75"),
        category_id="cat-cats",
        image_url="/static/images/cat-litter.jpg",
        stock=80,
    ),
    "prod-005": Product(
        id="prod-005",
        name="Sisal Scratching Post",
        description="Sturdy 80cm post with a plush top perch.",
        price=Decimal("39.90"),
        category_id="cat-cats",
        image_url="/static/images/scratching-post.jpg",
        stock=25,
        discount_percentage=20,
        offer_active=True,
        offer_start_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        offer_end_date=datetime(2099, 12, 31, tzinfo=timezone.utc),
    ),
    "prod-006": Product(
        id="prod-006",
        name="Tropical Seed Mix",
        description="Seed and fruit blend for parakeets and cockatiels.",
        price=Decimal("9.99"),
        category_id="cat-birds",
        image_url="/static/images/seed-mix.jpg",
        stock=150,
    ),
    "prod-007": Product(
        id="prod-007",
        name="Canister Filter 600L/h",
        description="Quiet external filter for tanks up to 150 litres.",
        price=Decimal("119.00"),
        category_id="cat-fish",
        image_url="/static/images/canister-filter.jpg",
        stock=12,
        discount_percentage=10,
        offer_active=True,
        offer_end_date=datetime(2020, 1, 31, tzinfo=timezone.utc),
    ),
}


class ProductDatabase:
    """In-memory catalog database for the pet store"""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Restore the seeded catalog"""
        self.categories = CATEGORIES.copy()
        self.products = {pid: p.model_copy() for pid, p in PRODUCTS.items()}

    def list_categories(self) -> list[Category]:
        """Get all categories ordered by name"""
        return sorted(self.categories.values(), key=lambda c: c.name)

    def get_category(self, category_id: str) -> Optional[Category]:
        return self.categories.get(category_id)

    def get_category_by_slug(self, slug: str) -> Optional[Category]:
        """Get a category by its URL slug"""
        return next(
            (c for c in self.categories.values() if c.slug == slug),
            None,
        )

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def list_products(self, category_id: str, active_only: bool = True) -> list[Product]:
        """Get the products of a category ordered by name"""
        results = [p for p in self.products.values() if p.category_id == category_id]

        if active_only:
            results = [p for p in results if p.is_active]

        return sorted(results, key=lambda p: p.name)

    def create_product(self, data: ProductCreate) -> Product:
        """Create a new active product"""
        product = Product(
            id=str(uuid.uuid4()),
            is_active=True,
            **data.model_dump(),
        )
        self.products[product.id] = product
        return product

    def delete_product(self, product_id: str) -> bool:
        """Delete a product"""
        if product_id in self.products:
            del self.products[product_id]
            return True
        return False


# Singleton instance
product_db = ProductDatabase()
