"""Category entities: per-category options and their sentinel encoding.

Key Design Principles:
1. Immutable value objects: CategoryOptions and DownloadPathOption are frozen
2. Sentinel encoding: limits store "use global"/"no limit" as reserved negatives
3. One resolver per option: ratio, seeding time and download path share TriStateResolver

The sentinel values MUST match what the category store expects - they're
part of the stored data, not an implementation detail of the editor.
"""

import math
from dataclasses import dataclass
from pathlib import Path

from seedshelf.domain.value_objects.tri_state import TriStateResolver, numeric_resolver

# Hey future me - same numbers the download client uses for per-item limits!
# -2 means "follow the global setting", -1 means "never stop seeding".
USE_GLOBAL_RATIO: float = -2.0
NO_RATIO_LIMIT: float = -1.0
USE_GLOBAL_SEEDING_TIME: int = -2
NO_SEEDING_TIME_LIMIT: int = -1

# Input widget ranges for custom values (values outside are clamped, not rejected)
MAX_RATIO: float = 9998.0
MAX_SEEDING_TIME: int = 525600  # one year in minutes


@dataclass(frozen=True)
class DownloadPathOption:
    """Explicit download path choice of a category.

    ``enabled=False`` means "explicitly no separate download path" and
    carries no path. ``enabled=True`` with ``path=None`` means "use the
    global download path + category subpath".
    """

    enabled: bool
    path: Path | None = None

    def __post_init__(self) -> None:
        # A disabled option never carries a path, so all disabled options compare equal
        if not self.enabled and self.path is not None:
            object.__setattr__(self, "path", None)


@dataclass(frozen=True)
class CategoryOptions:
    """Options stored for one category.

    Attributes:
        save_path: Where completed items go. None = global save path + category subpath
        download_path: None = inherit global, otherwise an explicit DownloadPathOption
        ratio_limit: USE_GLOBAL_RATIO, NO_RATIO_LIMIT or a custom value >= 0
        seeding_time: USE_GLOBAL_SEEDING_TIME, NO_SEEDING_TIME_LIMIT or custom minutes >= 0
    """

    save_path: Path | None = None
    download_path: DownloadPathOption | None = None
    ratio_limit: float = USE_GLOBAL_RATIO
    seeding_time: int = USE_GLOBAL_SEEDING_TIME


RATIO_LIMIT_RESOLVER: TriStateResolver[float, float] = numeric_resolver(
    USE_GLOBAL_RATIO, NO_RATIO_LIMIT, 0.0
)

SEEDING_TIME_RESOLVER: TriStateResolver[int, int] = numeric_resolver(
    USE_GLOBAL_SEEDING_TIME, NO_SEEDING_TIME_LIMIT, 0
)

# Yo, same resolver, different payload: the "custom" value is a path wrapped in an
# enabled DownloadPathOption, and there's no numeric range to worry about.
DOWNLOAD_PATH_RESOLVER: TriStateResolver[DownloadPathOption | None, Path | None] = (
    TriStateResolver(
        inherit=None,
        disabled=DownloadPathOption(enabled=False),
        is_custom=lambda stored: stored is not None and stored.enabled,
        wrap=lambda path: DownloadPathOption(enabled=True, path=path),
        unwrap=lambda stored: stored.path,
        display_default=None,
    )
)


def clamp_ratio(value: float) -> float:
    """Clamp a typed ratio into the custom ratio range (NaN becomes 0)."""
    value = float(value)
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), MAX_RATIO)


def clamp_seeding_time(value: int) -> int:
    """Clamp typed minutes into the custom seeding time range."""
    return min(max(int(value), 0), MAX_SEEDING_TIME)
