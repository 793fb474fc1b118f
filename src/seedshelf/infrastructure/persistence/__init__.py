"""Category store adapters."""

from seedshelf.infrastructure.persistence.category_store import InMemoryCategoryStore

__all__ = ["InMemoryCategoryStore"]
