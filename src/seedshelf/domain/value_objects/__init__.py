"""Domain value objects."""

from seedshelf.domain.value_objects.category_name import (
    CATEGORY_SEPARATOR,
    DEFAULT_NEW_CATEGORY_NAME,
    default_category_name,
    derived_path,
    expand_category,
    is_valid_category_name,
    parent_category_name,
    subcategory_span,
    to_valid_path,
)
from seedshelf.domain.value_objects.tri_state import (
    FIELD_ENABLEMENT,
    OptionMode,
    OptionWidget,
    TriStateResolver,
    enabled_widgets,
    numeric_resolver,
    project,
    resolve,
)

__all__ = [
    "CATEGORY_SEPARATOR",
    "DEFAULT_NEW_CATEGORY_NAME",
    "FIELD_ENABLEMENT",
    "OptionMode",
    "OptionWidget",
    "TriStateResolver",
    "default_category_name",
    "derived_path",
    "enabled_widgets",
    "expand_category",
    "is_valid_category_name",
    "numeric_resolver",
    "parent_category_name",
    "project",
    "resolve",
    "subcategory_span",
    "to_valid_path",
]
