"""Domain ports (interfaces implemented by the infrastructure layer)."""

from seedshelf.domain.ports.category_store import ICategoryStore

__all__ = ["ICategoryStore"]
