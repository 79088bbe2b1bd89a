"""
Product Listing

Pure filter/sort/group helpers applied to a fetched product list.
Nothing here keeps state; views re-derive the list on every render.
"""

from decimal import Decimal
from enum import Enum
from typing import Iterable

from storefront.services.models import Product

UNCATEGORIZED = "Uncategorized"


class PriceRange(str, Enum):
    """Price bracket filter values."""
    ALL = "all"
    UNDER_50 = "0-50"
    FROM_50_TO_100 = "50-100"
    FROM_100_TO_200 = "100-200"
    OVER_200 = "200+"


class SortKey(str, Enum):
    """Listing sort orders."""
    FEATURED = "featured"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    NEWEST = "newest"


# (lower exclusive, upper inclusive); None means unbounded
_BRACKETS: dict[PriceRange, tuple[Decimal | None, Decimal | None]] = {
    PriceRange.UNDER_50: (None, Decimal("50")),
    PriceRange.FROM_50_TO_100: (Decimal("50"), Decimal("100")),
    PriceRange.FROM_100_TO_200: (Decimal("100"), Decimal("200")),
    PriceRange.OVER_200: (Decimal("200"), None),
}


def _coerce(enum_cls, value, default):
    """Map a raw query value to the enum; unknown values fall back to default."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return default


def in_price_range(price: Decimal, price_range: PriceRange | str) -> bool:
    """Check whether price falls inside the bracket."""
    bracket = _BRACKETS.get(_coerce(PriceRange, price_range, PriceRange.ALL))
    if bracket is None:
        return True
    lower, upper = bracket
    if lower is not None and price <= lower:
        return False
    if upper is not None and price > upper:
        return False
    return True


def filter_by_price(products: Iterable[Product], price_range: PriceRange | str) -> list[Product]:
    """Keep products whose price is inside the bracket, order unchanged."""
    return [p for p in products if in_price_range(p.price, price_range)]


def _id_sort_value(product_id):
    # Catalog ids are integers; string ids from the document store compare as text after them
    if isinstance(product_id, int):
        return (0, product_id, "")
    text = str(product_id)
    if text.lstrip("-").isdigit():
        return (0, int(text), "")
    return (1, 0, text)


def sort_products(products: Iterable[Product], sort_key: SortKey | str) -> list[Product]:
    """
    Sort a product list. Sorting is stable; FEATURED keeps fetch order.

    Args:
        products: Products in fetch order
        sort_key: price-low, price-high, newest or featured
    """
    key = _coerce(SortKey, sort_key, SortKey.FEATURED)
    items = list(products)

    if key is SortKey.PRICE_LOW:
        return sorted(items, key=lambda p: p.price)
    if key is SortKey.PRICE_HIGH:
        return sorted(items, key=lambda p: p.price, reverse=True)
    if key is SortKey.NEWEST:
        return sorted(items, key=lambda p: _id_sort_value(p.id), reverse=True)
    return items


def apply_listing(
    products: Iterable[Product],
    price_range: PriceRange | str = PriceRange.ALL,
    sort_key: SortKey | str = SortKey.FEATURED,
) -> list[Product]:
    """Filter by price bracket, then sort. An empty result is valid."""
    return sort_products(filter_by_price(products, price_range), sort_key)


def group_by_category(products: Iterable[Product]) -> dict[str, list[Product]]:
    """Group products by category for the admin panel (first-seen order)."""
    groups: dict[str, list[Product]] = {}
    for product in products:
        groups.setdefault(product.category or UNCATEGORIZED, []).append(product)
    return groups
