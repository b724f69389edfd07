"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides settings bound to a temporary data directory, repository, catalog,
sales engine and service fixtures.

==============================================================================
"""

from decimal import Decimal
from pathlib import Path

import pytest

from farmstore.catalog import Catalog, Product
from farmstore.config import Settings
from farmstore.core import exceptions
from farmstore.sales import SalesEngine
from farmstore.services import StoreService
from farmstore.storage import CatalogRepository


# ============================================================================
# SETTINGS / STORAGE FIXTURES
# ============================================================================

@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test data directory."""
    return Settings(
        data_directory=str(tmp_path / "data"),
        data_file_name="farm.json",
        _env_file=None,
    )


@pytest.fixture
def data_file(settings: Settings) -> Path:
    return settings.data_path


@pytest.fixture
def repository(data_file: Path) -> CatalogRepository:
    return CatalogRepository(data_file)


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> Catalog:
    """Empty catalog at the default 7% tax rate."""
    return Catalog(tax_rate=Decimal("0.07"))


@pytest.fixture
def feed_bag(catalog: Catalog) -> Product:
    """Taxable product F100 at 12.00 with 50 in stock."""
    return catalog.add_product(
        item_code="F100",
        name="Feed Bag",
        category="Feed",
        unit_price=Decimal("12.00"),
        taxable=True,
        initial_stock=50,
    )


@pytest.fixture
def chew_toy(catalog: Catalog) -> Product:
    """Untaxed product T200 at 3.49 with 4 in stock."""
    return catalog.add_product(
        item_code="T200",
        name="Chew Toy",
        category="Toys",
        unit_price=Decimal("3.49"),
        taxable=False,
        initial_stock=4,
    )


# ============================================================================
# SALES / SERVICE FIXTURES
# ============================================================================

@pytest.fixture
def engine(catalog: Catalog) -> SalesEngine:
    return SalesEngine(catalog)


@pytest.fixture
def service(catalog: Catalog, repository: CatalogRepository) -> StoreService:
    return StoreService(catalog, repository)


class FailingRepository(CatalogRepository):
    """Repository whose save always fails, for save-failure paths."""

    def save(self, catalog: Catalog) -> None:
        raise exceptions.persistence_failed(self.data_file, "disk full")


@pytest.fixture
def failing_service(catalog: Catalog, data_file: Path) -> StoreService:
    return StoreService(catalog, FailingRepository(data_file))
