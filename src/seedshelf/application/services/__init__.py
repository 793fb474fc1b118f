"""Application services."""

from seedshelf.application.services.category_editor import (
    CategoryEditorSession,
    TriStateField,
)
from seedshelf.application.services.category_service import CategoryService

__all__ = ["CategoryEditorSession", "CategoryService", "TriStateField"]
