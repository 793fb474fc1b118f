"""Tri-state option resolution (inherit / disabled / custom).

Hey future me - this is THE core of the category editor! Three category settings
(ratio limit, seeding time limit, download path override) all share one shape:

    selector:  [Use global] [Unlimited / No] [Custom...]
    input:     <number or path>  (only editable in Custom)

...but each one is PERSISTED as a single value:

    ratio_limit   -2.0 = use global, -1.0 = no limit, >= 0 = custom
    seeding_time  -2   = use global, -1   = no limit, >= 0 = custom minutes
    download_path None = use global, DownloadPathOption(False) = no, (True, p) = custom

TriStateResolver is ONE generic rule for both directions:
- resolve(): selector + pending input  -> stored value (on save)
- project(): stored value -> selector + display value (on open)

The round-trip law must hold for all three options:
    resolver.resolve(*resolver.project(x)) == x
for every marker and every valid custom value. Stored values below the reserved
sentinels (e.g. -7 from an old config) normalize to INHERIT - never an error.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Generic, TypeVar

# S = stored representation, V = value shown in the input widget
S = TypeVar("S")
V = TypeVar("V")
N = TypeVar("N", int, float)


class OptionMode(IntEnum):
    """Selector position of a tri-state option.

    Values match the selector (combo box) index so a GUI can bind
    ``OptionMode(combo.currentIndex())`` directly.
    """

    INHERIT = 0
    DISABLED = 1  # "Unlimited" for limits, "No" for the download path
    CUSTOM = 2


class OptionWidget(str, Enum):
    """Widgets paired with a tri-state selector."""

    LABEL = "label"
    INPUT = "input"


# Yo, enablement is a pure function of the mode - no imperative setEnabled() juggling!
# Only CUSTOM unlocks the value label + input. Disabling never clears the pending
# value, so flipping back to CUSTOM shows what the user typed before.
FIELD_ENABLEMENT: Mapping[OptionMode, frozenset[OptionWidget]] = MappingProxyType(
    {
        OptionMode.INHERIT: frozenset(),
        OptionMode.DISABLED: frozenset(),
        OptionMode.CUSTOM: frozenset({OptionWidget.LABEL, OptionWidget.INPUT}),
    }
)


def enabled_widgets(mode: OptionMode) -> frozenset[OptionWidget]:
    """Return the widgets that are enabled for ``mode``."""
    return FIELD_ENABLEMENT[mode]


def _identity(value: S) -> S:
    return value


@dataclass(frozen=True)
class TriStateResolver(Generic[S, V]):
    """Generic two-way mapping between a tri-state selector and a stored value.

    Attributes:
        inherit: Stored marker for "use global default"
        disabled: Stored marker for "explicitly unlimited/disabled"
        is_custom: Predicate telling whether a stored value is a custom value
        wrap: Pending input value -> stored custom value
        unwrap: Stored custom value -> input display value
        display_default: Display value shown while the mode isn't CUSTOM
    """

    inherit: S
    disabled: S
    is_custom: Callable[[S], bool]
    wrap: Callable[[V], S]
    unwrap: Callable[[S], V]
    display_default: V

    def resolve(self, mode: OptionMode, pending: V) -> S:
        """Collapse selector + pending input into the stored value."""
        if mode == OptionMode.INHERIT:
            return self.inherit
        if mode == OptionMode.DISABLED:
            return self.disabled
        return self.wrap(pending)

    def project(self, stored: S) -> tuple[OptionMode, V]:
        """Split a stored value into selector mode + input display value.

        Anything that is neither custom nor the disabled marker is treated
        as INHERIT (covers the inherit marker and out-of-range negatives).
        """
        if self.is_custom(stored):
            return OptionMode.CUSTOM, self.unwrap(stored)
        if stored == self.disabled:
            return OptionMode.DISABLED, self.display_default
        return OptionMode.INHERIT, self.display_default


def numeric_resolver(
    inherit: N,
    unlimited: N,
    display_default: N,
) -> TriStateResolver[N, N]:
    """Build a resolver for a sentinel-encoded number (custom iff >= 0)."""
    return TriStateResolver(
        inherit=inherit,
        disabled=unlimited,
        is_custom=lambda stored: stored >= 0,
        wrap=_identity,
        unwrap=_identity,
        display_default=display_default,
    )


# Hey future me - these two are the "plain function" spelling of the numeric case,
# handy when you only have the sentinel pair and no resolver instance around.
def resolve(mode: OptionMode, pending: N, inherit: N, unlimited: N) -> N:
    """Resolve a numeric tri-state option (see TriStateResolver.resolve)."""
    return numeric_resolver(inherit, unlimited, type(inherit)(0)).resolve(mode, pending)


def project(stored: N, inherit: N, unlimited: N) -> tuple[OptionMode, N]:
    """Project a numeric stored value (see TriStateResolver.project)."""
    return numeric_resolver(inherit, unlimited, type(inherit)(0)).project(stored)
