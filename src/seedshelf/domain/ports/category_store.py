"""Category Store Port (Interface).

Following Hexagonal Architecture (Ports & Adapters), this is a PORT in the
domain layer. The real category table lives in the download client session;
the in-memory adapter in infrastructure/persistence is the reference
implementation used by tests and standalone runs.

The editor touches the store at most twice per submit: one existence check
and one insert/update.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from seedshelf.domain.entities.category import CategoryOptions


class ICategoryStore(ABC):
    """Interface for the category name -> options table.

    Write operations report failure through their return value (and the
    store's own logging). They never raise into the editor layer.
    """

    @abstractmethod
    def is_valid_category_name(self, name: str) -> bool:
        """Check a name against the syntax rules (plus any store-level rules)."""
        pass

    @abstractmethod
    def categories(self) -> set[str]:
        """Return the names of all existing categories."""
        pass

    @abstractmethod
    def category_options(self, name: str) -> CategoryOptions | None:
        """Return the options of ``name`` or None if it doesn't exist."""
        pass

    @abstractmethod
    def add_category(self, name: str, options: CategoryOptions) -> bool:
        """Insert a new category.

        Returns:
            True if the category was added
        """
        pass

    @abstractmethod
    def edit_category(self, name: str, options: CategoryOptions) -> bool:
        """Replace the options of an existing category.

        Returns:
            True if the stored options changed
        """
        pass

    @abstractmethod
    def save_path(self) -> Path:
        """Return the global save path."""
        pass

    @abstractmethod
    def download_path(self) -> Path:
        """Return the global download (incomplete) path."""
        pass

    @abstractmethod
    def is_download_path_enabled(self) -> bool:
        """Check whether the global download path is in use."""
        pass
