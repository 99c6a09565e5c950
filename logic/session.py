"""
Advising session state.

Holds the loaded catalog and a separate "loaded" flag. A failed load
clears the flag but keeps whatever catalog was loaded before, so the two
are tracked independently.
"""

import logging

from logic import queries
from logic.catalog_builder import load_catalog_file
from models.data_models import CourseDetail, LoadResult

logger = logging.getLogger(__name__)


class CatalogNotLoadedError(RuntimeError):
    """Raised when a query runs before any successful load."""


class AdvisingSession:
    """Loads a course catalog and answers queries against it."""

    def __init__(self):
        self.catalog = {}
        self.loaded = False

    def load(self, path: str) -> LoadResult:
        """
        Load (or reload) the catalog from a file.

        Args:
            path: Path to the catalog file

        Returns:
            LoadResult: ok=False if the path is blank or the file cannot be
                        opened, otherwise ok=True with the load warnings
        """
        path = (path or "").strip()
        if not path:
            logger.error("Catalog file name cannot be empty")
            return LoadResult(ok=False)

        try:
            catalog, warnings = load_catalog_file(path)
        except OSError as e:
            logger.error(f"Could not open catalog file {path}: {e}")
            self.loaded = False
            return LoadResult(ok=False)

        self.catalog = catalog
        self.loaded = True
        return LoadResult(ok=True, warnings=warnings)

    def _require_loaded(self):
        if not self.loaded:
            raise CatalogNotLoadedError("No course catalog loaded")

    def list_sorted(self) -> list:
        """Sorted (course_id, title) listings of every defined course."""
        self._require_loaded()
        return queries.list_sorted(self.catalog)

    def describe(self, raw_query: str) -> CourseDetail:
        """Look up one course by ID, case-insensitively."""
        self._require_loaded()
        return queries.describe(self.catalog, raw_query)
