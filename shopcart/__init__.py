"""
shopcart - in-memory product catalog and shopping cart

- catalog: ProductItem values and the Products catalog
- cart: CartItem lines and the ShoppingCart aggregate
- services.money: Decimal arithmetic and fixed-point formatting
- config: environment-driven link bases and totals mode
"""
from shopcart.catalog import ProductItem, Products
from shopcart.cart import CartItem, ShoppingCart, TotalsMode
from shopcart.errors import ValidationError

__all__ = [
    "ProductItem",
    "Products",
    "CartItem",
    "ShoppingCart",
    "TotalsMode",
    "ValidationError",
]
