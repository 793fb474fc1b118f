"""Category service: create/edit flows against the category store."""

import logging

from seedshelf.application.services.category_editor import CategoryEditorSession
from seedshelf.config import CategorySettings
from seedshelf.domain.exceptions import (
    DuplicateEntityException,
    EntityNotFoundException,
    InvalidCategoryNameException,
)
from seedshelf.domain.ports.category_store import ICategoryStore
from seedshelf.domain.value_objects.category_name import default_category_name
from seedshelf.infrastructure.observability.log_messages import LogMessages
from seedshelf.infrastructure.observability.logging import set_correlation_id

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for creating and editing categories through editor sessions."""

    def __init__(
        self,
        store: ICategoryStore,
        settings: CategorySettings | None = None,
    ) -> None:
        """Initialize category service.

        Args:
            store: Category store the sessions submit to
            settings: Category editor settings (default new category name)
        """
        self.store = store
        self.settings = settings or CategorySettings()

    # Hey future me: the "create" dialog opens pre-filled with "<parent>/New Category" and
    # only the leaf pre-selected (see CategoryEditorSession.name_selection).
    def new_category_session(self, parent_category_name: str = "") -> CategoryEditorSession:
        """Open an editor session for a new category.

        Args:
            parent_category_name: Category the new one is created under ("" = top level)

        Returns:
            Session with the default name and default options
        """
        set_correlation_id()
        name = default_category_name(parent_category_name, self.settings.new_category_name)
        logger.debug("Opened editor for new category %s", name)
        return CategoryEditorSession(self.store, category_name=name)

    def edit_category_session(self, category_name: str) -> CategoryEditorSession:
        """Open an editor session on an existing category.

        Raises:
            EntityNotFoundException: If the category doesn't exist
        """
        set_correlation_id()
        options = self.store.category_options(category_name)
        if options is None:
            raise EntityNotFoundException("Category", category_name)

        session = CategoryEditorSession(
            self.store, category_name=category_name, name_editable=False
        )
        session.set_category_options(options)
        logger.debug("Opened editor for category %s", category_name)
        return session

    # Listen up: both errors are RECOVERABLE. The GUI shows exc.title + exc.message, keeps
    # the dialog open, and calls create_category() again after the user fixed the name.
    # The session itself is untouched by a failed submit.
    def create_category(self, session: CategoryEditorSession) -> str:
        """Validate the session's name and add the category to the store.

        Args:
            session: Accepted editor session

        Returns:
            Name of the created category

        Raises:
            InvalidCategoryNameException: If the name breaks the syntax rules
            DuplicateEntityException: If a category with that name exists
        """
        name = session.category_name

        if not self.store.is_valid_category_name(name):
            logger.warning(
                LogMessages.category_rejected(
                    name,
                    InvalidCategoryNameException.title,
                    hint="Pick a name without '\\', leading/trailing '/' or '//'",
                )
            )
            raise InvalidCategoryNameException(name)

        if name in self.store.categories():
            logger.warning(
                LogMessages.category_rejected(name, DuplicateEntityException.title)
            )
            raise DuplicateEntityException("Category", name)

        options = session.category_options()
        self.store.add_category(name, options)
        logger.info(
            LogMessages.category_saved(
                name,
                "Created",
                {"Ratio limit": options.ratio_limit, "Seeding time": options.seeding_time},
            )
        )
        return name

    def edit_category(self, session: CategoryEditorSession) -> None:
        """Submit the session's options for its existing category."""
        options = session.category_options()
        if self.store.edit_category(session.category_name, options):
            logger.info(
                LogMessages.category_saved(
                    session.category_name,
                    "Updated",
                    {"Ratio limit": options.ratio_limit, "Seeding time": options.seeding_time},
                )
            )
