"""Category editor session: the working state behind a category dialog.

Hey future me - this is everything the dialog SHOWS, minus the pixels. The GUI
forwards raw field edits here (name typed, combo index changed, spin value
changed, path picked) and reads back values, placeholders and which widgets
are enabled. No widget toolkit is imported anywhere in this module.

Two kinds of state live here:
- What ends up in CategoryOptions (save path, resolved limits, download path)
- Transient session memory that is NEVER persisted:
  - pending numeric values of disabled limit inputs
  - the last download path typed before the user switched modes
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from seedshelf.domain.entities.category import (
    DOWNLOAD_PATH_RESOLVER,
    RATIO_LIMIT_RESOLVER,
    SEEDING_TIME_RESOLVER,
    CategoryOptions,
    clamp_ratio,
    clamp_seeding_time,
)
from seedshelf.domain.ports.category_store import ICategoryStore
from seedshelf.domain.value_objects.category_name import derived_path, subcategory_span
from seedshelf.domain.value_objects.tri_state import (
    OptionMode,
    OptionWidget,
    TriStateResolver,
    enabled_widgets,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)

RATIO_LIMIT = "ratio_limit"
SEEDING_TIME = "seeding_time"
DOWNLOAD_PATH = "download_path"


# Path("") is Path("."), so a cleared field must be spotted by its text
def _non_empty_path(path: Path | None) -> Path | None:
    if path is None or str(path) in ("", "."):
        return None
    return path


@dataclass
class TriStateField(Generic[T]):
    """Selector + numeric input pair of one limit option.

    ``pending`` is whatever the input currently holds. It survives mode
    changes, so INHERIT -> CUSTOM brings back the last typed value.
    """

    resolver: TriStateResolver[T, T]
    clamp: Callable[[T], T]
    mode: OptionMode = OptionMode.INHERIT
    pending: T = 0

    def set_mode(self, mode: OptionMode) -> None:
        """Handle a selector change."""
        self.mode = OptionMode(mode)

    def set_value(self, value: T) -> None:
        """Handle an input edit (clamped to the input range)."""
        self.pending = self.clamp(value)

    @property
    def value(self) -> T:
        """Resolved value to store."""
        return self.resolver.resolve(self.mode, self.pending)

    @property
    def enabled_fields(self) -> frozenset[OptionWidget]:
        return enabled_widgets(self.mode)

    def load(self, stored: T) -> None:
        """Show a stored value (selector + input)."""
        self.mode, self.pending = self.resolver.project(stored)


class CategoryEditorSession:
    """Working state of one create/edit category session."""

    def __init__(
        self,
        store: ICategoryStore,
        category_name: str = "",
        name_editable: bool = True,
    ) -> None:
        """Initialize an editor session.

        Args:
            store: Category store (global path defaults come from here)
            category_name: Initial name shown in the name field
            name_editable: False when editing an existing category
        """
        self._store = store
        self.name_editable = name_editable
        self._category_name = category_name

        self._save_path: Path | None = None

        self._download_path_mode = OptionMode.INHERIT
        self._download_path: Path | None = None
        self._last_entered_download_path: Path | None = None

        self.ratio_limit: TriStateField[float] = TriStateField(
            RATIO_LIMIT_RESOLVER, clamp_ratio, pending=0.0
        )
        self.seeding_time: TriStateField[int] = TriStateField(
            SEEDING_TIME_RESOLVER, clamp_seeding_time, pending=0
        )

    # === Name ===

    @property
    def category_name(self) -> str:
        return self._category_name

    @category_name.setter
    def category_name(self, name: str) -> None:
        self._category_name = name

    @property
    def name_selection(self) -> tuple[int, int]:
        """(start, length) of the name text to pre-select: the subcategory leaf."""
        return subcategory_span(self._category_name)

    @property
    def can_accept(self) -> bool:
        """Whether the confirm button is enabled."""
        return bool(self._category_name)

    # === Save path ===

    @property
    def save_path(self) -> Path | None:
        return self._save_path

    @save_path.setter
    def save_path(self, path: Path | None) -> None:
        self._save_path = path

    @property
    def save_path_placeholder(self) -> Path:
        """Greyed suggestion shown while the save path field is empty."""
        return derived_path(self._category_name, self._store.save_path())

    # === Download path ===

    @property
    def download_path_mode(self) -> OptionMode:
        return self._download_path_mode

    @property
    def download_path(self) -> Path | None:
        """Current content of the download path field."""
        return self._download_path

    def set_download_path(self, path: Path | None) -> None:
        """Handle a path typed/picked in the download path field (empty clears it)."""
        self._download_path = _non_empty_path(path)

    # Hey future me - the toggle dance! Whatever is in the field gets remembered BEFORE
    # switching, and CUSTOM always shows the remembered path. So typing "/x", switching to
    # INHERIT and back to CUSTOM shows "/x" again instead of an empty field.
    def set_download_path_mode(self, mode: OptionMode) -> None:
        """Handle a download path selector change."""
        if _non_empty_path(self._download_path) is not None:
            self._last_entered_download_path = self._download_path

        self._download_path_mode = OptionMode(mode)
        self._download_path = (
            self._last_entered_download_path
            if self._download_path_mode == OptionMode.CUSTOM
            else None
        )

    @property
    def download_path_placeholder(self) -> Path | None:
        """Greyed suggestion for the download path field (None = no suggestion)."""
        uses_download_path = self._download_path_mode == OptionMode.CUSTOM or (
            self._download_path_mode == OptionMode.INHERIT
            and self._store.is_download_path_enabled()
        )
        if not uses_download_path:
            return None
        return derived_path(self._category_name, self._store.download_path())

    # === Enablement ===

    def enabled_fields(self) -> dict[str, frozenset[OptionWidget]]:
        """Enabled label/input widgets per tri-state option."""
        return {
            DOWNLOAD_PATH: enabled_widgets(self._download_path_mode),
            RATIO_LIMIT: self.ratio_limit.enabled_fields,
            SEEDING_TIME: self.seeding_time.enabled_fields,
        }

    # === Options ===

    def category_options(self) -> CategoryOptions:
        """Build the options value object from the current state."""
        return CategoryOptions(
            save_path=self._save_path,
            download_path=DOWNLOAD_PATH_RESOLVER.resolve(
                self._download_path_mode, self._download_path
            ),
            ratio_limit=self.ratio_limit.value,
            seeding_time=self.seeding_time.value,
        )

    def set_category_options(self, options: CategoryOptions) -> None:
        """Load stored options into the editor fields."""
        self._save_path = options.save_path
        self._download_path_mode, self._download_path = DOWNLOAD_PATH_RESOLVER.project(
            options.download_path
        )
        self.ratio_limit.load(options.ratio_limit)
        self.seeding_time.load(options.seeding_time)
        logger.debug(
            "Loaded options for %s (download path: %s, ratio: %s, seeding time: %s)",
            self._category_name,
            self._download_path_mode.name,
            self.ratio_limit.mode.name,
            self.seeding_time.mode.name,
        )

    def result(self, accepted: bool) -> CategoryOptions | None:
        """Options to hand to the store on confirm, None on cancel."""
        if not accepted:
            return None
        return self.category_options()
