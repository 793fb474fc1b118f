"""Category name rules: validation, subcategory selection and derived paths.

Hey future me - category names are PATH-LIKE! "Books/SciFi" is the subcategory
"SciFi" nested under "Books". This module is the single place that knows the
syntax rules and how a name turns into a relative folder.

The rules:
1. Non-empty
2. No backslash (would be a path separator on Windows)
3. No leading or trailing "/" (no empty top-level/leaf segment)
4. No "//" (no empty middle segment)

Usage:
    from seedshelf.domain.value_objects.category_name import (
        derived_path,
        is_valid_category_name,
        subcategory_span,
    )

    is_valid_category_name("Books/SciFi")   # True
    subcategory_span("Books/SciFi")         # (6, 5) -> "SciFi"
    derived_path("Books/SciFi", Path("/downloads"))  # /downloads/Books/SciFi
"""

import re
from collections.abc import Callable
from pathlib import Path

CATEGORY_SEPARATOR = "/"

DEFAULT_NEW_CATEGORY_NAME = "New Category"

# Characters that can't appear in a path segment on at least one supported OS.
# "/" is NOT in here - it's the category separator and maps to nested folders.
# Runs of illegal characters collapse into a single space.
INVALID_PATH_CHARS_PATTERN = re.compile(r'[:?"*<>|\\\x00-\x1f]+')


def is_valid_category_name(name: str) -> bool:
    """Check a category name against the category syntax rules.

    Args:
        name: Full (possibly hierarchical) category name

    Returns:
        True if the name may be used to create or rename a category
    """
    if not name:
        return False
    if "\\" in name:
        return False
    if name.startswith(CATEGORY_SEPARATOR) or name.endswith(CATEGORY_SEPARATOR):
        return False
    return CATEGORY_SEPARATOR * 2 not in name


def subcategory_span(name: str) -> tuple[int, int]:
    """Locate the leaf (subcategory) part of a category name.

    The GUI pre-selects this span so users editing "Books/New Category"
    only retype "New Category", not the whole path.

    Args:
        name: Full category name

    Returns:
        (start, length) of the text after the last separator. The whole
        string when there is no separator.

    Example:
        >>> subcategory_span("Books/SciFi")
        (6, 5)
    """
    start = name.rfind(CATEGORY_SEPARATOR) + 1
    return start, len(name) - start


def parent_category_name(name: str) -> str:
    """Return everything before the last separator ("" for top-level names)."""
    index = name.rfind(CATEGORY_SEPARATOR)
    return name[:index] if index >= 0 else ""


def expand_category(name: str) -> list[str]:
    """List every ancestor of a category followed by the category itself.

    Example:
        >>> expand_category("a/b/c")
        ['a', 'a/b', 'a/b/c']
    """
    if not name:
        return []

    expanded: list[str] = []
    index = name.find(CATEGORY_SEPARATOR)
    while index >= 0:
        expanded.append(name[:index])
        index = name.find(CATEGORY_SEPARATOR, index + 1)
    expanded.append(name)
    return expanded


def default_category_name(
    parent_category: str = "",
    new_name: str = DEFAULT_NEW_CATEGORY_NAME,
) -> str:
    """Build the initial name for a category created under ``parent_category``.

    Example:
        >>> default_category_name("Books")
        'Books/New Category'
    """
    if not parent_category:
        return new_name
    return f"{parent_category}{CATEGORY_SEPARATOR}{new_name}"


def to_valid_path(category_name: str) -> Path:
    """Turn a category name into a filesystem-safe relative path.

    Hey future me - this runs on EVERY keystroke (placeholders update live), so the
    name may well be invalid here. Leading separators are dropped so a half-typed
    "/foo" can't escape the base folder by becoming an absolute path.
    """
    sanitized = INVALID_PATH_CHARS_PATTERN.sub(" ", category_name)
    return Path(sanitized.lstrip(CATEGORY_SEPARATOR))


def derived_path(
    category_name: str,
    base: Path,
    sanitize: Callable[[str], Path] = to_valid_path,
) -> Path:
    """Compute the placeholder path suggested for a category.

    Args:
        category_name: Full category name (as currently typed)
        base: Global save path or global download path
        sanitize: Name -> relative path converter

    Returns:
        ``base`` joined with the sanitized category path
    """
    if not category_name:
        return base
    return base / sanitize(category_name)
