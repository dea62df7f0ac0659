"""Cart package: line item model and cart service."""
from .models import CartItem
from .service import ShoppingCart, TotalsMode

__all__ = [
    "CartItem",
    "ShoppingCart",
    "TotalsMode",
]
