"""Cart line item."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from shopcart.catalog.models import ProductItem
from shopcart.config import get_settings
from shopcart.links import build_link
from shopcart.services.money import DEFAULT_DECIMAL_PLACES, format_decimal, multiply


@dataclass
class CartItem:
    """Single item in the cart."""
    product: ProductItem
    quantity: int = 1

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def total_price(self) -> Decimal:
        """Total price for all units."""
        return multiply(self.product.price, self.quantity)

    def display_price(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
        return format_decimal(self.total_price, decimal_places)

    def increase_quantity(self, number: int) -> None:
        self.quantity += number

    def decrease_quantity(self, number: int) -> None:
        # No floor: quantity may go negative
        self.quantity -= number

    def remove_item_link(self, encode: bool = False, base_url: Optional[str] = None) -> str:
        if base_url is None:
            base_url = get_settings().base_remove_url
        return build_link(base_url, self.name, encode)
