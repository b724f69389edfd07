"""
==============================================================================
Catalog Repository Module
==============================================================================

JSON file persistence for the catalog.

Behavior:
---------
- load() never raises: a missing, unreadable or invalid file yields a fresh
  catalog (next_id=1, no products, default tax rate) and a logged warning.
- save() writes the full record, creating the data directory on first use,
  and raises PersistenceError on failure. The in-memory catalog is left as is.

Writes go to a sibling temp file first and are moved into place, so a crash
mid-write leaves the previous file intact.

==============================================================================
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal
from pathlib import Path
from typing import Any, Union

from farmstore.catalog import Catalog, DEFAULT_TAX_RATE
from farmstore.core import AppException, exceptions
from farmstore.utils.money import to_decimal

from .schemas import CatalogRecord


# Module logger
logger = logging.getLogger(__name__)


class CatalogRepository:
    """
    Loads and saves a Catalog at a single well-known path.

    Attributes:
        data_file: Path of the JSON data file
        default_tax_rate: Tax rate given to a fresh catalog

    Example:
        >>> repository = CatalogRepository(Path("data/farm.json"))
        >>> catalog = repository.load()
        >>> repository.save(catalog)
    """

    def __init__(
        self,
        data_file: Union[str, Path],
        default_tax_rate: Any = DEFAULT_TAX_RATE,
    ) -> None:
        """
        Initialize the repository.

        Args:
            data_file: Path to the JSON data file
            default_tax_rate: Tax rate for a fresh catalog
        """
        self._data_file = Path(data_file)
        self._default_tax_rate = to_decimal(default_tax_rate)

    @property
    def data_file(self) -> Path:
        return self._data_file

    @property
    def default_tax_rate(self) -> Decimal:
        return self._default_tax_rate

    # =========================================================================
    # LOAD
    # =========================================================================

    def new_catalog(self) -> Catalog:
        """Fresh empty catalog with the default tax rate."""
        return Catalog(tax_rate=self._default_tax_rate)

    def load(self) -> Catalog:
        """
        Read the catalog from disk.

        Returns:
            Stored catalog, or a fresh one if the file is absent or invalid
        """
        if not self._data_file.exists():
            logger.info(f"No data file at {self._data_file}, starting with an empty catalog")
            return self.new_catalog()

        try:
            text = self._data_file.read_text(encoding="utf-8")
            record = CatalogRecord.model_validate_json(text)
            catalog = record.to_catalog()
        except (OSError, ValueError, AppException) as e:
            # pydantic's ValidationError and UnicodeDecodeError are ValueErrors
            logger.warning(
                f"⚠️ Could not read {self._data_file} ({e.__class__.__name__}: {e}), "
                "starting with an empty catalog"
            )
            return self.new_catalog()

        logger.info(f"✅ Loaded {len(catalog)} products from {self._data_file}")
        return catalog

    # =========================================================================
    # SAVE
    # =========================================================================

    def save(self, catalog: Catalog) -> None:
        """
        Write the full catalog to disk.

        Args:
            catalog: Catalog to persist

        Raises:
            PersistenceError: If the directory or file cannot be written.
                The temporary file is removed and the previous file is kept.
        """
        payload = CatalogRecord.from_catalog(catalog).model_dump_json(indent=2)
        temp_file = self._data_file.with_name(self._data_file.name + ".tmp")

        try:
            self._data_file.parent.mkdir(parents=True, exist_ok=True)
            temp_file.write_text(payload, encoding="utf-8")
            os.replace(temp_file, self._data_file)
        except OSError as e:
            logger.error(f"❌ Failed to save catalog to {self._data_file}: {e}")
            try:
                temp_file.unlink(missing_ok=True)
            except OSError as cleanup_error:
                logger.warning(f"⚠️ Could not remove {temp_file}: {cleanup_error}")
            raise exceptions.persistence_failed(self._data_file, str(e)) from e

        logger.debug(f"Saved {len(catalog)} products to {self._data_file}")
