"""Shopping cart keyed by product name."""
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Union

from shopcart.catalog.models import ProductItem
from shopcart.catalog.service import Products
from shopcart.config import get_settings
from shopcart.logging import get_logger, sanitize_string_for_logging
from shopcart.models import CartItemRow
from shopcart.services.money import DEFAULT_DECIMAL_PLACES, add, format_decimal
from .models import CartItem

logger = get_logger(__name__)


class TotalsMode(str, Enum):
    """How the cart-wide totals are maintained."""
    LEGACY = "legacy"  # Running aggregates, only advanced by catalog sync
    STRICT = "strict"  # Derived from current cart contents


class ShoppingCart:
    """
    In-memory shopping cart.

    In LEGACY mode total_price/total_quantity are running aggregates:
    every update_cart_items() call adds each catalog entry to them, and
    add_cart_item()/remove_cart_item() never touch them. STRICT mode
    reports the sums over the items actually in the cart.

    Usage:
        cart = ShoppingCart(products)
        cart.add_cart_item("Hacksaw", 18.45)
        cart.remove_cart_item("Hacksaw")
        cart.get_cart_items_list()
    """

    def __init__(
        self,
        products: Optional[Products] = None,
        mode: Union[TotalsMode, str, None] = None,
    ):
        self.mode = TotalsMode(mode or get_settings().totals_mode)
        self._cart_items: Dict[str, CartItem] = {}
        self._total_price = Decimal("0")
        self._total_quantity = 0
        if products is not None:
            self.update_cart_items(products)

    def __len__(self) -> int:
        return len(self._cart_items)

    @property
    def total_quantity(self) -> int:
        if self.mode is TotalsMode.STRICT:
            return sum(item.quantity for item in self._cart_items.values())
        return self._total_quantity

    @property
    def total_price(self) -> Decimal:
        if self.mode is TotalsMode.STRICT:
            return sum((item.total_price for item in self._cart_items.values()), Decimal("0"))
        return self._total_price

    def update_cart_items(self, products: Products) -> None:
        """Merge every catalog entry into the cart (called on page loads / refreshes)."""
        entries = products.get_product_list()
        for entry in entries:
            self._total_quantity += 1
            self._total_price = add(self._total_price, entry["price"])
            if self.has_cart_item(entry["name"]):
                self._cart_items[entry["name"]].increase_quantity(1)
            else:
                product = ProductItem(entry["name"], entry["price"])
                self._cart_items[entry["name"]] = CartItem(product, 1)

        logger.info(
            f"Cart synced with {len(entries)} catalog entries: "
            f"{len(self._cart_items)} items, total quantity {self.total_quantity}"
        )

    def get_cart_items_list(self) -> List[CartItemRow]:
        """Cart products listed as: product name, price, quantity, total, remove link."""
        total = self.total_quantity
        return [
            {
                "name": item.name,
                "price": item.display_price(),
                "quantity": item.quantity,
                "total": total,
                "remove_link": item.remove_item_link(),
            }
            for item in self._cart_items.values()
        ]

    def has_cart_item(self, name: str) -> bool:
        return name in self._cart_items

    def get_cart_item(self, name: str) -> Optional[CartItem]:
        return self._cart_items.get(name)

    def add_cart_item(self, name: str, price: Union[str, int, float, Decimal]) -> None:
        """
        Add a product to the cart.

        Adding an existing product only bumps its quantity; price is ignored.
        """
        if self.has_cart_item(name):
            self._cart_items[name].increase_quantity(1)
        else:
            self._cart_items[name] = CartItem(ProductItem(name, price), 1)
        logger.debug(f"Cart item added: {sanitize_string_for_logging(name)}")

    def remove_cart_item(self, name: str) -> None:
        """Remove a product from the cart; unknown names are ignored."""
        if self.has_cart_item(name):
            del self._cart_items[name]
            logger.debug(f"Cart item removed: {sanitize_string_for_logging(name)}")

    def get_total_price(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
        """All prices should be displayed to 2 decimal places."""
        return format_decimal(self.total_price, decimal_places)
