"""Application startup: settings, logging and service wiring.

Hey future me - this is the composition root. A GUI shell calls
create_category_service() once at startup and keeps the returned service
for the lifetime of the process.
"""

import logging

from pydantic import ValidationError

from seedshelf.application.services.category_service import CategoryService
from seedshelf.config import Settings, get_settings
from seedshelf.domain.exceptions import ConfigurationError
from seedshelf.domain.ports.category_store import ICategoryStore
from seedshelf.infrastructure.observability import configure_logging
from seedshelf.infrastructure.persistence import InMemoryCategoryStore

logger = logging.getLogger(__name__)


def load_settings() -> Settings:
    """Load settings, turning pydantic errors into a ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid SeedShelf configuration: {exc}. "
            "Check the SEEDSHELF_* environment variables."
        ) from exc


def create_category_service(
    settings: Settings | None = None,
    store: ICategoryStore | None = None,
) -> CategoryService:
    """Configure logging and build a CategoryService.

    Args:
        settings: Settings to use (defaults to the environment)
        store: Category store (defaults to an in-memory store)

    Returns:
        Ready-to-use category service
    """
    settings = settings or load_settings()

    configure_logging(
        log_level=settings.log_level,
        json_format=settings.observability.log_json_format,
        app_name=settings.app_name,
    )
    logger.info("Starting application: %s", settings.app_name)

    if store is None:
        store = InMemoryCategoryStore(settings.paths, settings.categories)

    return CategoryService(store, settings.categories)
