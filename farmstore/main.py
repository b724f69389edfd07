"""
==============================================================================
Farm Store - Application Entry Point
==============================================================================

Composition root for the store core. An interactive shell builds one
Application and talks to ``application.service``; the catalog is owned by
that instance, never by a module-level global.

Usage:
------
    from farmstore.main import Application

    application = Application()
    service = application.service
    print(application.formatter.product_list(service.list_products()))
    ...
    application.shutdown()

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from farmstore.catalog import Catalog
from farmstore.config import Settings, get_settings
from farmstore.sales import SalesEngine
from farmstore.services import StoreService
from farmstore.storage import CatalogRepository
from farmstore.utils.receipt import ReceiptFormatter


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging, DEBUG when settings.debug is set."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
    )


class Application:
    """
    Wires settings, repository, catalog, sales engine and service.

    Startup loads the catalog (an unreadable store yields an empty one);
    shutdown saves it once more.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """
        Initialize the application.

        Args:
            settings: Settings to use (shared instance if None)
        """
        self._settings = settings or get_settings()
        configure_logging(self._settings)

        self._repository = CatalogRepository(
            self._settings.data_path,
            default_tax_rate=self._settings.default_tax_rate,
        )
        self._catalog = self._repository.load()
        self._engine = SalesEngine(self._catalog)
        self._service = StoreService(
            self._catalog,
            self._repository,
            engine=self._engine,
            low_stock_threshold=self._settings.low_stock_threshold,
        )
        self._formatter = ReceiptFormatter(self._settings.currency_symbol)

        logger.info(
            f"🚀 {self._settings.app_name} ready: {len(self._catalog)} products, "
            f"tax rate {self._catalog.tax_rate}"
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def service(self) -> StoreService:
        return self._service

    @property
    def formatter(self) -> ReceiptFormatter:
        return self._formatter

    def shutdown(self) -> bool:
        """Final save. Returns False if it failed."""
        logger.info("🛑 Shutting down...")
        return self._service.save()
