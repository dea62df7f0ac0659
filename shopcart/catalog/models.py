"""Catalog product value."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from shopcart.config import get_settings
from shopcart.links import build_link
from shopcart.models import ProductListEntry
from shopcart.services.money import DEFAULT_DECIMAL_PLACES, to_decimal, format_decimal


@dataclass(frozen=True)
class ProductItem:
    """Immutable product: name is the catalog key."""
    name: str
    price: Decimal

    def __post_init__(self):
        # Normalize numeric field
        object.__setattr__(self, "price", to_decimal(self.price))

    def display_price(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
        """All prices should be displayed to 2 decimal places."""
        return format_decimal(self.price, decimal_places)

    def add_to_cart_link(self, encode: bool = False, base_url: Optional[str] = None) -> str:
        if base_url is None:
            base_url = get_settings().base_add_url
        return build_link(base_url, self.name, encode)

    def to_dict(self) -> ProductListEntry:
        """Convert to catalog listing row."""
        return {
            "name": self.name,
            "price": self.price,
            "add_link": self.add_to_cart_link(),
        }
