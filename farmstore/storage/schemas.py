"""
==============================================================================
Storage Record Schemas
==============================================================================

Explicit, field-by-field record schema for the persisted catalog. The stored
layout is independent of the in-memory classes; every field is named here.

Record Layout:
-------------
    {
      "schema_version": 1,
      "next_id": 2,
      "tax_rate": "0.07",
      "products": [
        {
          "internal_id": 1,
          "item_code": "F100",
          "name": "Feed Bag",
          "category": "Feed",
          "unit_price": "12.00",
          "taxable": true,
          "stock_quantity": 50
        }
      ]
    }

Decimals are written as strings so amounts round-trip exactly.

==============================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from farmstore.catalog import Catalog, Product


SCHEMA_VERSION = 1


class ProductRecord(BaseModel):
    """Stored form of one product."""

    model_config = ConfigDict(extra="ignore")

    internal_id: int = Field(..., ge=1)
    item_code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: str = Field(default="")
    unit_price: Decimal = Field(..., ge=0)
    taxable: bool = Field(default=False)
    stock_quantity: int = Field(default=0, ge=0)

    @classmethod
    def from_product(cls, product: Product) -> "ProductRecord":
        return cls(
            internal_id=product.internal_id,
            item_code=product.item_code,
            name=product.name,
            category=product.category,
            unit_price=product.unit_price,
            taxable=product.taxable,
            stock_quantity=product.stock_quantity,
        )

    def to_product(self) -> Product:
        return Product(
            internal_id=self.internal_id,
            item_code=self.item_code,
            name=self.name,
            category=self.category,
            unit_price=self.unit_price,
            taxable=self.taxable,
            stock_quantity=self.stock_quantity,
        )


class CatalogRecord(BaseModel):
    """Stored form of the whole catalog."""

    model_config = ConfigDict(extra="ignore")

    schema_version: int = Field(default=SCHEMA_VERSION)
    next_id: int = Field(..., ge=1)
    tax_rate: Decimal = Field(..., ge=0)
    products: List[ProductRecord] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, value: int) -> int:
        # No migrations: anything else is treated as unreadable
        if value != SCHEMA_VERSION:
            raise ValueError(
                f"Unsupported schema version {value}, expected {SCHEMA_VERSION}"
            )
        return value

    @classmethod
    def from_catalog(cls, catalog: Catalog) -> "CatalogRecord":
        return cls(
            next_id=catalog.next_id,
            tax_rate=catalog.tax_rate,
            products=[ProductRecord.from_product(p) for p in catalog.list_all()],
        )

    def to_catalog(self) -> Catalog:
        """
        Rebuild the in-memory catalog.

        Raises:
            ValidationError: If the record breaks a catalog invariant
        """
        return Catalog.restore(
            next_id=self.next_id,
            tax_rate=self.tax_rate,
            products=[record.to_product() for record in self.products],
        )
