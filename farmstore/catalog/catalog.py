"""
==============================================================================
Product Catalog Module
==============================================================================

In-memory product catalog owning every Product and the id counter.

Features:
---------
- Monotonic internal ids, never reused
- Case-insensitive unique item codes
- Insertion-ordered listing
- Fast lookup index by item code

The catalog performs no I/O. ``farmstore.storage`` loads and saves it, and
``farmstore.sales.SalesEngine`` is the only code that changes stock.

==============================================================================
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from farmstore.core import exceptions
from farmstore.utils.money import to_decimal
from farmstore.utils.validators import (
    ItemCodeValidator,
    PriceValidator,
    QuantityValidator,
)

from .models import Product


# Module logger
logger = logging.getLogger(__name__)

DEFAULT_TAX_RATE = Decimal("0.07")


class Catalog:
    """
    Product catalog with item code lookup.

    Attributes:
        next_id: Id the next created product receives
        tax_rate: Fraction applied to taxable sales (0.07 = 7%)

    Example:
        >>> catalog = Catalog()
        >>> product = catalog.add_product("F100", "Feed Bag", "Feed", Decimal("12.00"), True, 50)
        >>> catalog.find_by_item_code("f100").name
        'Feed Bag'
    """

    def __init__(self, tax_rate: Any = DEFAULT_TAX_RATE, next_id: int = 1) -> None:
        """
        Create an empty catalog.

        Args:
            tax_rate: Sales tax fraction
            next_id: First internal id to assign

        Raises:
            ValidationError: If tax_rate or next_id is invalid
        """
        if isinstance(next_id, bool) or not isinstance(next_id, int) or next_id < 1:
            raise exceptions.invalid_field("next_id", "must be a positive integer", next_id)

        self._tax_rate = self._check_tax_rate(tax_rate)
        self._next_id = next_id
        self._products: List[Product] = []
        self._by_code: Dict[str, Product] = {}

        self._code_validator = ItemCodeValidator()
        self._price_validator = PriceValidator()
        self._quantity_validator = QuantityValidator()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    @tax_rate.setter
    def tax_rate(self, value: Any) -> None:
        self._tax_rate = self._check_tax_rate(value)

    def __len__(self) -> int:
        return len(self._products)

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add_product(
        self,
        item_code: str,
        name: str,
        category: Optional[str],
        unit_price: Any,
        taxable: bool,
        initial_stock: int = 0,
    ) -> Product:
        """
        Create a product and append it to the catalog.

        Args:
            item_code: Operator item code, unique case-insensitively
            name: Display name
            category: Free-text category, None treated as empty
            unit_price: Non-negative price (Decimal preferred)
            taxable: Whether sales tax applies
            initial_stock: Units on hand, >= 0

        Returns:
            The created Product

        Raises:
            ValidationError: On any invalid field or duplicate item code.
                A failed add does not consume an id.
        """
        is_valid, code, error = self._code_validator.validate(item_code)
        if not is_valid:
            raise exceptions.field_required("Item code")

        if self._code_validator.key(code) in self._by_code:
            raise exceptions.duplicate_item_code(code)

        if not isinstance(name, str) or not name.strip():
            raise exceptions.field_required("Name")

        if category is None:
            category = ""
        elif not isinstance(category, str):
            raise exceptions.invalid_field("category", "must be text", category)

        is_valid, price, error = self._price_validator.validate(unit_price)
        if not is_valid:
            raise exceptions.invalid_field("price", error, unit_price)

        if not isinstance(taxable, bool):
            raise exceptions.invalid_field("taxable", "must be true or false", taxable)

        is_valid, error = self._quantity_validator.validate(initial_stock, allow_zero=True)
        if not is_valid:
            raise exceptions.invalid_field("stock", error, initial_stock)

        product = Product(
            internal_id=self._next_id,
            item_code=code,
            name=name.strip(),
            category=category.strip(),
            unit_price=price,
            taxable=taxable,
            stock_quantity=initial_stock,
        )
        logger.info(f"✅ Product added: {product}")

        self._next_id += 1
        self._append(product)
        return product

    def _append(self, product: Product) -> None:
        self._products.append(product)
        self._by_code[self._code_validator.key(product.item_code)] = product

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def find_by_item_code(self, code: Optional[str]) -> Optional[Product]:
        """
        Find product by item code (case-insensitive, trimmed).

        Blank or None input is treated as not found.

        Returns:
            Product or None
        """
        if not isinstance(code, str) or not code.strip():
            return None
        return self._by_code.get(self._code_validator.key(code))

    def list_all(self) -> List[Product]:
        """All products in insertion order."""
        return self._products.copy()

    # =========================================================================
    # RESTORE
    # =========================================================================

    @classmethod
    def restore(
        cls,
        next_id: int,
        tax_rate: Any,
        products: Iterable[Product],
    ) -> "Catalog":
        """
        Rebuild a catalog from stored state.

        Re-checks the invariants a stored record could violate: trimmed
        non-blank codes and names, representable prices, unique item codes,
        unique ids, and next_id above every stored id.

        Raises:
            ValidationError: If the stored state is inconsistent
        """
        catalog = cls(tax_rate=tax_rate, next_id=next_id)
        seen_ids = set()

        for product in products:
            catalog._check_stored(product)
            key = ItemCodeValidator.key(product.item_code)
            if key in catalog._by_code:
                raise exceptions.duplicate_item_code(product.item_code)
            if product.internal_id in seen_ids:
                raise exceptions.invalid_field(
                    "internal_id", "duplicate id", product.internal_id
                )
            if product.internal_id >= next_id:
                raise exceptions.invalid_field(
                    "next_id", "must exceed every stored id", next_id
                )
            seen_ids.add(product.internal_id)
            catalog._append(product)

        return catalog

    def _check_stored(self, product: Product) -> None:
        """Apply the add_product field rules to a stored product."""
        is_valid, code, error = self._code_validator.validate(product.item_code)
        if not is_valid:
            raise exceptions.field_required("Item code")
        if code != product.item_code:
            raise exceptions.invalid_field("item_code", "surrounding whitespace", product.item_code)

        if not product.name.strip():
            raise exceptions.field_required("Name")
        if product.name != product.name.strip():
            raise exceptions.invalid_field("name", "surrounding whitespace", product.name)

        is_valid, _, error = self._price_validator.validate(product.unit_price)
        if not is_valid:
            raise exceptions.invalid_field("price", error, product.unit_price)

    @staticmethod
    def _check_tax_rate(value: Any) -> Decimal:
        try:
            rate = to_decimal(value)
        except ValueError:
            raise exceptions.invalid_field("tax_rate", "must be a valid decimal", value) from None
        if rate < 0:
            raise exceptions.invalid_field("tax_rate", "cannot be negative", value)
        return rate

    def __repr__(self) -> str:
        return (
            f"Catalog(products={len(self._products)}, "
            f"next_id={self._next_id}, tax_rate={self._tax_rate})"
        )
