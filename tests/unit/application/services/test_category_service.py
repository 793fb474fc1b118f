"""Tests for CategoryService.

Tests the create/edit flows: default names, validation errors that keep the
session usable, duplicate detection and store submission.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from seedshelf.application.services.category_service import CategoryService
from seedshelf.config import CategorySettings, PathSettings
from seedshelf.domain.entities.category import (
    NO_RATIO_LIMIT,
    CategoryOptions,
    DownloadPathOption,
)
from seedshelf.domain.exceptions import (
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidCategoryNameException,
    ValidationException,
)
from seedshelf.domain.ports.category_store import ICategoryStore
from seedshelf.domain.value_objects.tri_state import OptionMode
from seedshelf.infrastructure.observability.logging import get_correlation_id
from seedshelf.infrastructure.persistence import InMemoryCategoryStore


@pytest.fixture
def store() -> InMemoryCategoryStore:
    """Create an in-memory store with fixed global paths."""
    return InMemoryCategoryStore(
        PathSettings(save_path=Path("/data"), download_path=Path("/data/tmp"))
    )


@pytest.fixture
def service(store: InMemoryCategoryStore) -> CategoryService:
    """Create a service on top of the in-memory store."""
    return CategoryService(store)


class TestNewCategorySession:
    """Test opening a create session."""

    def test_default_name_under_parent(self, service: CategoryService) -> None:
        """Creating under 'Books' proposes 'Books/New Category'."""
        session = service.new_category_session("Books")
        assert session.category_name == "Books/New Category"
        assert session.name_selection == (6, 12)
        assert session.name_editable is True

    def test_default_name_top_level(self, service: CategoryService) -> None:
        """Creating without parent proposes 'New Category'."""
        assert service.new_category_session().category_name == "New Category"

    def test_configured_default_name(self, store: InMemoryCategoryStore) -> None:
        """The proposed leaf name comes from settings."""
        service = CategoryService(store, CategorySettings(new_category_name="Untitled"))
        assert service.new_category_session("Books").category_name == "Books/Untitled"

    def test_default_options(self, service: CategoryService) -> None:
        """A new session starts with default options."""
        assert service.new_category_session().category_options() == CategoryOptions()

    def test_session_gets_correlation_id(self, service: CategoryService) -> None:
        """Each session opens a new correlation id for its logs."""
        service.new_category_session()
        first = get_correlation_id()
        service.new_category_session()
        assert first
        assert get_correlation_id() != first


class TestCreateCategory:
    """Test create_category."""

    def test_create_adds_to_store(
        self, service: CategoryService, store: InMemoryCategoryStore
    ) -> None:
        """A valid, new name is added with the session's options."""
        session = service.new_category_session()
        session.category_name = "Movies"
        session.ratio_limit.set_mode(OptionMode.DISABLED)

        assert service.create_category(session) == "Movies"
        assert store.category_options("Movies") == CategoryOptions(ratio_limit=NO_RATIO_LIMIT)

    @pytest.mark.parametrize("name", ["a//b", "/a", "a/", "a\\b"])
    def test_invalid_name_raises(self, service: CategoryService, name: str) -> None:
        """Invalid names raise InvalidCategoryNameException."""
        session = service.new_category_session()
        session.category_name = name

        with pytest.raises(InvalidCategoryNameException) as exc_info:
            service.create_category(session)

        assert exc_info.value.name == name
        assert exc_info.value.title == "Invalid category name"
        assert "'//'" in exc_info.value.message
        assert isinstance(exc_info.value, ValidationException)

    def test_duplicate_name_raises(
        self, service: CategoryService, store: InMemoryCategoryStore
    ) -> None:
        """An existing name raises DuplicateEntityException."""
        store.add_category("Books", CategoryOptions())
        session = service.new_category_session()
        session.category_name = "Books"

        with pytest.raises(DuplicateEntityException) as exc_info:
            service.create_category(session)

        assert exc_info.value.title == "Category creation error"
        assert "choose a different name" in exc_info.value.message

    def test_session_survives_rejection(
        self, service: CategoryService, store: InMemoryCategoryStore
    ) -> None:
        """After a rejected name the same session can be fixed and resubmitted."""
        session = service.new_category_session("Books")
        session.category_name = "Books//SciFi"
        session.seeding_time.set_mode(OptionMode.CUSTOM)
        session.seeding_time.set_value(30)

        with pytest.raises(InvalidCategoryNameException):
            service.create_category(session)
        assert store.categories() == set()

        session.category_name = "Books/SciFi"
        assert service.create_category(session) == "Books/SciFi"
        assert store.category_options("Books/SciFi").seeding_time == 30

    def test_store_is_not_touched_on_invalid_name(self) -> None:
        """The store only sees the validity check for a bad name."""
        store = MagicMock(spec=ICategoryStore)
        store.is_valid_category_name.return_value = False
        service = CategoryService(store)
        session = service.new_category_session()

        with pytest.raises(InvalidCategoryNameException):
            service.create_category(session)

        store.categories.assert_not_called()
        store.add_category.assert_not_called()


class TestEditCategory:
    """Test edit sessions and edit_category."""

    def test_edit_session_loads_options(
        self, service: CategoryService, store: InMemoryCategoryStore
    ) -> None:
        """Editing loads stored options into a read-only-name session."""
        options = CategoryOptions(
            download_path=DownloadPathOption(True, Path("/fast")), ratio_limit=1.0
        )
        store.add_category("Books", options)

        session = service.edit_category_session("Books")

        assert session.name_editable is False
        assert session.download_path == Path("/fast")
        assert session.category_options() == options

    def test_edit_unknown_category_raises(self, service: CategoryService) -> None:
        """Editing a missing category raises EntityNotFoundException."""
        with pytest.raises(EntityNotFoundException) as exc_info:
            service.edit_category_session("Nope")
        assert exc_info.value.entity_id == "Nope"

    def test_edit_submits_to_store(
        self, service: CategoryService, store: InMemoryCategoryStore
    ) -> None:
        """Confirming an edit replaces the stored options."""
        store.add_category("Books", CategoryOptions())
        session = service.edit_category_session("Books")
        session.seeding_time.set_mode(OptionMode.CUSTOM)
        session.seeding_time.set_value(600)

        service.edit_category(session)

        assert store.category_options("Books").seeding_time == 600

    def test_edit_calls_store_once(self) -> None:
        """Submitting an edit is a single store write."""
        store = MagicMock(spec=ICategoryStore)
        store.category_options.return_value = CategoryOptions()
        store.edit_category.return_value = True
        service = CategoryService(store)

        session = service.edit_category_session("Books")
        service.edit_category(session)

        store.edit_category.assert_called_once_with("Books", CategoryOptions())
