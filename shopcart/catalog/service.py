"""Product catalog keyed by product name."""
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from shopcart.errors import ERROR_INVALID_PRODUCT_LIST, ERROR_INVALID_PRODUCT_RECORD, ValidationError
from shopcart.logging import get_logger, sanitize_string_for_logging
from shopcart.models import ProductRecord, ProductListEntry
from .models import ProductItem

logger = get_logger(__name__)


class Products:
    """
    Catalog of products in insertion order.

    Usage:
        products = Products([{"name": "Axe", "price": 190.50}])
        products.add_product("Chisel", 12.9)
        products.get_product_list()
    """

    def __init__(self, products: Optional[List[Any]] = None):
        self._items: Dict[str, ProductItem] = {}
        if products:
            self.update_product_list(products)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def update_product_list(self, products: List[Any]) -> None:
        """
        Replace the catalog with the given records.

        Args:
            products: List of {"name": ..., "price": ...} records

        Raises:
            ValidationError: If products is not a non-empty list, the first
                record has no name, or any record fails to parse
        """
        if not isinstance(products, list) or not products:
            raise ValidationError(ERROR_INVALID_PRODUCT_LIST)
        first = products[0]
        if isinstance(first, ProductRecord):
            first = first.model_dump()
        if not isinstance(first, Mapping) or not first.get("name"):
            raise ValidationError(ERROR_INVALID_PRODUCT_LIST)

        records: List[ProductRecord] = []
        for index, item in enumerate(products):
            try:
                records.append(ProductRecord.model_validate(item))
            except PydanticValidationError as e:
                raise ValidationError(ERROR_INVALID_PRODUCT_RECORD.format(index=index)) from e

        # Later duplicates overwrite the value but keep the first position
        self._items = {}
        for record in records:
            self._items[record.name] = ProductItem(record.name, record.price)

        logger.info(f"Catalog loaded: {len(self._items)} products from {len(records)} records")

    def add_product(self, name: str, price: Union[str, int, float, Decimal]) -> None:
        """Add a product; an existing name is left unchanged."""
        if name in self._items:
            return
        self._items[name] = ProductItem(name, price)
        logger.debug(f"Product added: {sanitize_string_for_logging(name)}")

    def get_product(self, name: str) -> Optional[ProductItem]:
        return self._items.get(name)

    def get_product_list(self) -> List[ProductListEntry]:
        """Products listed as: product name, price, link to add product."""
        return [item.to_dict() for item in self._items.values()]
