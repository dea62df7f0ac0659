"""
Data Schemas

- ProductRecord: pydantic model for one catalog input record
- ProductListEntry / CartItemRow: row shapes handed to a rendering layer
"""
from decimal import Decimal, InvalidOperation
from typing import TypedDict

from pydantic import BaseModel, ConfigDict, field_validator

from shopcart.services.money import to_decimal as _to_decimal


class ProductRecord(BaseModel):
    """One {name, price} record of a catalog bulk load."""
    name: str
    price: Decimal

    model_config = ConfigDict(extra="ignore")  # Ignore unknown fields from callers

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        if isinstance(v, str):
            try:
                Decimal(v)
            except InvalidOperation:
                raise ValueError(f"price is not a number: {v!r}")
        if isinstance(v, (str, int, float, Decimal)) and not isinstance(v, bool):
            return _to_decimal(v)
        # Anything else (None, lists, ...) is rejected by the Decimal field
        return v


class ProductListEntry(TypedDict):
    """Catalog listing row: product name, raw price, link to add product."""
    name: str
    price: Decimal
    add_link: str


class CartItemRow(TypedDict):
    """Cart listing row: product name, price, quantity, total, remove link."""
    name: str
    price: str  # line total, fixed-point
    quantity: int
    total: int  # cart-wide total quantity, repeated on every row
    remove_link: str
