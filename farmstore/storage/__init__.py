"""
==============================================================================
Storage Package
==============================================================================

Catalog persistence as a versioned JSON record.

Architecture:
------------
├── schemas.py     - CatalogRecord / ProductRecord stored layout
└── repository.py  - CatalogRepository load/save

==============================================================================
"""

from .schemas import CatalogRecord, ProductRecord, SCHEMA_VERSION
from .repository import CatalogRepository

__all__ = [
    "CatalogRecord",
    "ProductRecord",
    "SCHEMA_VERSION",
    "CatalogRepository",
]
