"""
==============================================================================
Store Service Module
==============================================================================

Service for the interactive shell: the single entry point for catalog and
sales operations.

This module implements:
- StoreService: Parses raw operator input, calls the catalog and sales
  engine, and saves after every successful mutation

Persistence Policy:
------------------
    add_product() / commit_sale()
             │
             ▼
    in-memory mutation  ──▶  repository.save()
                                   │
                    ok ◀───────────┴───────────▶ PersistenceError
                                                   │
                                   logged, kept in last_save_error,
                                   mutation NOT undone

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from farmstore.catalog import Catalog, Product
from farmstore.core import PersistenceError, exceptions
from farmstore.sales import PaymentMethod, SaleQuote, SaleResult, SalesEngine
from farmstore.schemas import ProductCreate
from farmstore.storage import CatalogRepository
from farmstore.utils.validators import QuantityValidator


# Module logger
logger = logging.getLogger(__name__)


class StoreService:
    """
    Shell-facing service for products and sales.

    Attributes:
        catalog: The catalog this service operates on
        last_save_error: Most recent save failure, None after a good save

    Example:
        >>> service = StoreService(catalog, repository)
        >>> service.add_product({"item_code": "F100", "name": "Feed Bag",
        ...                      "unit_price": "12.00", "taxable": "yes",
        ...                      "initial_stock": "50"})
        >>> quote = service.quote_sale("f100", "3")
        >>> result = service.commit_sale("f100", 3, quote, "card")
    """

    def __init__(
        self,
        catalog: Catalog,
        repository: CatalogRepository,
        engine: Optional[SalesEngine] = None,
        low_stock_threshold: int = 5,
    ) -> None:
        """
        Initialize the store service.

        Args:
            catalog: Catalog to operate on
            repository: Repository used to save after each mutation
            engine: Sales engine (built from catalog if None)
            low_stock_threshold: Default threshold for low_stock()
        """
        self._catalog = catalog
        self._repository = repository
        self._engine = engine or SalesEngine(catalog)
        self._low_stock_threshold = low_stock_threshold
        self._quantity_validator = QuantityValidator()
        self.last_save_error: Optional[PersistenceError] = None

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    # =========================================================================
    # PRODUCTS
    # =========================================================================

    def add_product(self, data: Union[ProductCreate, Mapping[str, Any]]) -> Product:
        """
        Create a product from operator input and save.

        Args:
            data: ProductCreate or a mapping of raw field values

        Returns:
            Created Product

        Raises:
            ValidationError: If a field is missing, unparsable or invalid,
                or the item code already exists
        """
        if not isinstance(data, ProductCreate):
            try:
                data = ProductCreate.model_validate(dict(data))
            except PydanticValidationError as e:
                raise self._input_error(e) from None

        product = self._catalog.add_product(
            item_code=data.item_code,
            name=data.name,
            category=data.category,
            unit_price=data.unit_price,
            taxable=data.taxable,
            initial_stock=data.initial_stock,
        )
        self.save()
        return product

    def find_product(self, code: Optional[str]) -> Product:
        """
        Get product by item code (case-insensitive).

        Raises:
            NotFoundError: If no product matches, including blank input
        """
        product = self._catalog.find_by_item_code(code)
        if product is None:
            raise exceptions.product_not_found(code.strip() if isinstance(code, str) else None)
        return product

    def list_products(self) -> List[Product]:
        """All products in insertion order."""
        return self._catalog.list_all()

    def low_stock(self, threshold: Optional[int] = None) -> List[Product]:
        """Products at or below the stock threshold, in insertion order."""
        if threshold is None:
            threshold = self._low_stock_threshold
        return [p for p in self._catalog.list_all() if p.stock_quantity <= threshold]

    # =========================================================================
    # SALES
    # =========================================================================

    def quote_sale(self, code: Optional[str], quantity: Any) -> SaleQuote:
        """
        Quote a sale by item code.

        Args:
            code: Item code as typed by the operator
            quantity: Quantity, int or raw string

        Raises:
            NotFoundError: Unknown item code
            InvalidQuantityError: Quantity unparsable or not positive
            InsufficientStockError: Quantity exceeds stock
        """
        product = self.find_product(code)
        return self._engine.quote_sale(product, self._parse_quantity(quantity))

    def commit_sale(
        self,
        code: Optional[str],
        quantity: Any,
        quote: SaleQuote,
        payment_method: Union[PaymentMethod, str] = PaymentMethod.CASH,
    ) -> SaleResult:
        """
        Commit a quoted sale and save.

        A failed save does not roll back the stock change; the result comes
        back with ``saved=False`` and the error is kept in last_save_error.

        Raises:
            NotFoundError: Unknown item code
            InvalidQuantityError: Quantity unparsable or not positive
            InsufficientStockError: Stock no longer covers the quantity
            ValidationError: Quote does not match, or unknown payment method
        """
        product = self.find_product(code)
        qty = self._parse_quantity(quantity)

        try:
            method = PaymentMethod(
                payment_method.lower().strip() if isinstance(payment_method, str) else payment_method
            )
        except ValueError:
            raise exceptions.invalid_field(
                "payment method",
                "must be one of " + ", ".join(m.value for m in PaymentMethod),
                payment_method,
            ) from None

        result = self._engine.commit_sale(product, qty, quote, method)

        if not self.save():
            result = result.model_copy(update={"saved": False})
        return result

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def save(self) -> bool:
        """
        Save the catalog.

        Returns:
            True on success, False if the save failed (error is logged and
            kept in last_save_error)
        """
        try:
            self._repository.save(self._catalog)
        except PersistenceError as e:
            logger.warning(f"⚠️ Changes kept in memory only: {e.message}")
            self.last_save_error = e
            return False

        self.last_save_error = None
        return True

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _parse_quantity(self, quantity: Any) -> int:
        is_valid, qty, _ = self._quantity_validator.parse(quantity)
        if not is_valid:
            raise exceptions.invalid_quantity(quantity)
        return qty

    @staticmethod
    def _input_error(error: PydanticValidationError) -> exceptions.ValidationError:
        """Map the first pydantic error onto a ValidationError."""
        first = error.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "input"
        if first.get("type") in ("missing", "string_too_short"):
            return exceptions.field_required(field)
        return exceptions.invalid_field(field, first.get("msg", "invalid value"), first.get("input"))
