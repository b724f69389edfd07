"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes sitting between the interactive shell and the core.

Architecture Pattern: Service Layer
----------------------------------

    ┌─────────────────┐
    │  Shell (menus)  │  ← external collaborator
    └────────┬────────┘
             │ raw input
    ┌────────▼────────┐
    │  StoreService   │  ← parsing, save-after-mutation
    └───┬─────────┬───┘
        │         │
 ┌──────▼───┐ ┌───▼──────────┐
 │ Catalog  │ │ SalesEngine  │  ← typed values only, no I/O
 └──────────┘ └──────────────┘
             │
    ┌────────▼──────────┐
    │ CatalogRepository │  ← JSON file
    └───────────────────┘

Usage:
------
    from farmstore.services import StoreService

    service = StoreService(catalog, repository)
    quote = service.quote_sale("F100", "3")

==============================================================================
"""

from .store_service import StoreService

__all__ = [
    "StoreService",
]
