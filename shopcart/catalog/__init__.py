"""Catalog package: product value and catalog service."""
from .models import ProductItem
from .service import Products

__all__ = [
    "ProductItem",
    "Products",
]
