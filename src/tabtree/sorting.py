"""Stable, type-checked sorting driven by comparator matchers."""

from __future__ import annotations

import datetime
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any

from tabtree.errors import HeterogeneousColumnError, NoComparatorError

# A "less than" function for two values of the same type.
Comparator = Callable[[Any, Any], bool]

# Inspects a sample value and returns a comparator able to order values of
# its type, or None to let the next matcher try.
ComparatorMatcher = Callable[[Any], Comparator | None]


def _less(a: Any, b: Any) -> bool:
    return a < b


def _as_aware(value: datetime.datetime) -> datetime.datetime:
    # Naive timestamps are taken as UTC.
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value


def _timestamp_less(a: datetime.datetime, b: datetime.datetime) -> bool:
    return _as_aware(a) < _as_aware(b)


def match_comparator(value: Any) -> Comparator | None:
    """Built-in matcher for text, integers and dates/timestamps.

    Always consulted last, after any caller supplied matchers.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime.datetime):
        return _timestamp_less
    if isinstance(value, (str, int, datetime.date)):
        return _less
    return None


def ensure_identical_type(values: Sequence[Any], column: int | None = None) -> type | None:
    """Check that all values share one exact runtime type.

    Returns:
        The shared type, or None for an empty sequence.

    Raises:
        HeterogeneousColumnError: If two values differ in type.
    """
    if not values:
        return None
    first = type(values[0])
    types = [type(v) for v in values]
    if any(t is not first for t in types):
        raise HeterogeneousColumnError(column, types)
    return first


class _SortKey:
    """Adapts a comparator to the ``<`` protocol used by ``sorted``."""

    __slots__ = ("value", "less")

    def __init__(self, value: Any, less: Comparator) -> None:
        self.value = value
        self.less = less

    def __lt__(self, other: _SortKey) -> bool:
        return bool(self.less(self.value, other.value))


class Sorting:
    """Sorting options and algorithm.

    Args:
        descending: Invert the comparator. Equal values keep their order.
        matchers: Extra comparator matchers, tried in order before the
            built-in ``match_comparator``.
    """

    def __init__(
        self,
        *,
        descending: bool = False,
        matchers: Iterable[ComparatorMatcher] = (),
    ) -> None:
        self.descending = descending
        self.chain: list[ComparatorMatcher] = [*matchers, match_comparator]

    def resolve(self, sample: Any) -> Comparator:
        """Find the first comparator in the chain that handles ``sample``.

        Raises:
            NoComparatorError: If every matcher declines.
        """
        for matcher in self.chain:
            cmp = matcher(sample)
            if cmp is not None:
                return cmp
        raise NoComparatorError(type(sample))

    def run(
        self,
        items: MutableSequence[Any],
        key: Callable[[Any], Any] | None = None,
        *,
        column: int | None = None,
    ) -> None:
        """Stable sort ``items`` in place.

        Args:
            items: Sequence to reorder.
            key: Extracts the value to compare from each item. Defaults to
                the item itself.
            column: Column index reported in errors.

        Raises:
            HeterogeneousColumnError: If the compared values differ in type.
            NoComparatorError: If no matcher can order the values.
        """
        if not items:
            return

        values = [key(item) for item in items] if key else list(items)
        ensure_identical_type(values, column)
        less = self.resolve(values[0])

        order = sorted(
            range(len(values)),
            key=lambda i: _SortKey(values[i], less),
            reverse=self.descending,
        )
        items[:] = [items[i] for i in order]
