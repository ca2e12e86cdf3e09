"""Replacement specifications: a single write or a batch of writes."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


class _Unset:
    """Sentinel type for an omitted ``value`` argument."""

    def __repr__(self) -> str:
        return "<unset>"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class Single:
    """Overwrite one position."""

    index: Any
    value: Any

    def items(self) -> Iterator[tuple[Any, Any]]:
        yield self.index, self.value


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class Batch:
    """Overwrite several positions, applied in the mapping's iteration order.

    Unhashable, since the mapping it holds is.
    """

    mapping: Mapping[Any, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def items(self) -> Iterator[tuple[Any, Any]]:
        yield from self.mapping.items()


Replacement = Single | Batch


def to_replacement(index_or_mapping: Any, value: Any = UNSET) -> Replacement:
    """Normalize the ``(index_or_mapping, value)`` call shape.

    Single and Batch pass through and a Mapping becomes a Batch; ``value`` is
    ignored for both. Anything else is taken as an index, in which case
    ``value`` is required.

    Raises:
        TypeError: If an index is given without a value.
    """
    if isinstance(index_or_mapping, (Single, Batch)):
        return index_or_mapping
    if isinstance(index_or_mapping, Mapping):
        # snapshot so later changes to the caller's mapping don't leak in
        return Batch(dict(index_or_mapping))
    if value is UNSET:
        raise TypeError(f"value is required when replacing a single index ({index_or_mapping!r})")
    return Single(index_or_mapping, value)
