"""
==============================================================================
Product Input Schemas Module
==============================================================================

Parses raw operator input for product creation into typed values before it
reaches the catalog.

==============================================================================
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductCreate(BaseModel):
    """
    Product creation fields as collected by the shell.

    Strings are accepted for every field ("12.50", "yes", "40") and coerced;
    missing stock defaults to zero.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    item_code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: Optional[str] = Field(default="")
    unit_price: Decimal = Field(..., ge=0, allow_inf_nan=False)
    taxable: bool = Field(default=False)
    initial_stock: int = Field(default=0, ge=0)

    @field_validator("category")
    @classmethod
    def default_category(cls, v: Optional[str]) -> str:
        return v or ""
