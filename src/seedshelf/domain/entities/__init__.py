"""Domain entities."""

from seedshelf.domain.entities.category import (
    DOWNLOAD_PATH_RESOLVER,
    MAX_RATIO,
    MAX_SEEDING_TIME,
    NO_RATIO_LIMIT,
    NO_SEEDING_TIME_LIMIT,
    RATIO_LIMIT_RESOLVER,
    SEEDING_TIME_RESOLVER,
    USE_GLOBAL_RATIO,
    USE_GLOBAL_SEEDING_TIME,
    CategoryOptions,
    DownloadPathOption,
    clamp_ratio,
    clamp_seeding_time,
)

__all__ = [
    "DOWNLOAD_PATH_RESOLVER",
    "MAX_RATIO",
    "MAX_SEEDING_TIME",
    "NO_RATIO_LIMIT",
    "NO_SEEDING_TIME_LIMIT",
    "RATIO_LIMIT_RESOLVER",
    "SEEDING_TIME_RESOLVER",
    "USE_GLOBAL_RATIO",
    "USE_GLOBAL_SEEDING_TIME",
    "CategoryOptions",
    "DownloadPathOption",
    "clamp_ratio",
    "clamp_seeding_time",
]
