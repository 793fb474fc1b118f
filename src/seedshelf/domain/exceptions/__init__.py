"""Domain exceptions."""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    # Hey future me, we store message as an attribute so the GUI can show it without parsing
    # str(exception). Don't raise this directly - use a specific subclass so callers can catch
    # precisely (invalid name vs duplicate name get different dialog captions!).
    def __init__(self, message: str, *args: Any) -> None:
        super().__init__(message, *args)
        self.message = message


class EntityNotFoundException(DomainException):
    """Raised when an entity is not found."""

    # Yo, this is for "open the editor on category X" when X isn't in the store anymore
    # (another session deleted it). entity_type/entity_id are kept separate for structured logs.
    def __init__(self, entity_type: str, entity_id: Any) -> None:
        super().__init__(f"{entity_type} with id {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


class ValidationException(DomainException):
    """Raised when entity validation fails.

    Used to signal that user input violates a business rule. Validation
    failures are recoverable: the editing session stays open and the
    user may correct the input and submit again.
    """

    title: str = "Validation error"


class InvalidCategoryNameException(ValidationException):
    """Raised when a category name breaks the category name syntax rules."""

    title = "Invalid category name"

    # Hey future me - these three lines ARE the user-facing explanation. Keep them in sync with
    # is_valid_category_name() in domain/value_objects/category_name.py!
    RULES: tuple[str, ...] = (
        "Category name cannot contain '\\'.",
        "Category name cannot start/end with '/'.",
        "Category name cannot contain '//' sequence.",
    )

    def __init__(self, name: str) -> None:
        super().__init__("\n".join(self.RULES))
        self.name = name


class DuplicateEntityException(DomainException):
    """Raised when trying to create a duplicate entity."""

    title = "Category creation error"

    # Listen, this is the "name already taken" case - the name is syntactically fine but the store
    # already has it. Callers should show the message and let the user pick another name,
    # NOT tear down the editing session!
    def __init__(self, entity_type: str, entity_id: Any) -> None:
        super().__init__(
            f"{entity_type} with the given name already exists.\n"
            "Please choose a different name and try again."
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class ConfigurationError(DomainException):
    """Application misconfiguration.

    Raised when required configuration is missing or invalid.

    Example:
        raise ConfigurationError("Unknown log level: LOUD")
    """

    pass


__all__ = [
    "ConfigurationError",
    "DomainException",
    "DuplicateEntityException",
    "EntityNotFoundException",
    "InvalidCategoryNameException",
    "ValidationException",
]
