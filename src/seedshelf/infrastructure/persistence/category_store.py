"""In-memory category store.

Hey future me - this is the reference ICategoryStore adapter. It keeps the
name -> options table in a dict and takes its global paths from settings.
The download client's real category table implements the same port.
"""

import logging
from pathlib import Path

from seedshelf.config import CategorySettings, PathSettings
from seedshelf.domain.entities.category import CategoryOptions
from seedshelf.domain.ports.category_store import ICategoryStore
from seedshelf.domain.value_objects.category_name import (
    expand_category,
    is_valid_category_name,
)
from seedshelf.infrastructure.observability.log_messages import LogMessages

logger = logging.getLogger(__name__)


class InMemoryCategoryStore(ICategoryStore):
    """Dict-backed category table."""

    def __init__(
        self,
        paths: PathSettings | None = None,
        categories: CategorySettings | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            paths: Global save/download path defaults
            categories: Category behaviour (subcategory expansion)
        """
        self._paths = paths or PathSettings()
        self._settings = categories or CategorySettings()
        self._categories: dict[str, CategoryOptions] = {}

    def is_valid_category_name(self, name: str) -> bool:
        return is_valid_category_name(name)

    def categories(self) -> set[str]:
        return set(self._categories)

    def category_options(self, name: str) -> CategoryOptions | None:
        return self._categories.get(name)

    # Yo, with subcategories on, adding "Books/SciFi" also creates "Books" (with default
    # options) if it's missing - the category tree must never have holes!
    def add_category(self, name: str, options: CategoryOptions) -> bool:
        if not self.is_valid_category_name(name):
            logger.warning(LogMessages.store_write_ignored(name, "add", "invalid name"))
            return False
        if name in self._categories:
            logger.warning(LogMessages.store_write_ignored(name, "add", "already exists"))
            return False

        if self._settings.subcategories_enabled:
            for parent in expand_category(name)[:-1]:
                if parent not in self._categories:
                    self._categories[parent] = CategoryOptions()
                    logger.debug("Created parent category %s", parent)

        self._categories[name] = options
        return True

    def edit_category(self, name: str, options: CategoryOptions) -> bool:
        current = self._categories.get(name)
        if current is None:
            logger.warning(LogMessages.store_write_ignored(name, "edit", "not found"))
            return False
        if current == options:
            logger.debug("Category %s unchanged", name)
            return False

        self._categories[name] = options
        return True

    def save_path(self) -> Path:
        return self._paths.save_path

    def download_path(self) -> Path:
        return self._paths.download_path

    def is_download_path_enabled(self) -> bool:
        return self._paths.download_path_enabled
