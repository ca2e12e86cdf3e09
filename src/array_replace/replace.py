"""Copy-on-write positional replacement for sequences."""

import copy
import warnings
from collections.abc import Sequence
from typing import Any

from array_replace.replacement import UNSET, Replacement, to_replacement
from array_replace.settings import DEFAULT_SETTINGS, OutOfRange, ReplaceSettings
from array_replace.utils import ReplaceIndexError, ReplaceIndexWarning, coerce_index


def _reject(index: Any, length: int, reason: str, settings: ReplaceSettings, stacklevel: int) -> None:
    """Raise or warn about an index that cannot be written."""
    if settings.out_of_range == OutOfRange.RAISE:
        raise ReplaceIndexError(index, length, reason)
    if settings.warn:
        warnings.warn(
            f"Skipped replacement at index {index!r} of sequence with length {length}: {reason}",
            ReplaceIndexWarning,
            stacklevel=stacklevel + 1,
        )


def apply_replacement(
    sequence: Sequence[Any],
    replacement: Replacement,
    *,
    settings: ReplaceSettings | None = None,
    stacklevel: int = 1,
) -> list[Any]:
    """Return a copy of ``sequence`` with a Single or Batch replacement applied.

    See replace_at for the semantics. ``stacklevel`` works like the argument
    of ``warnings.warn``: 1 attributes skipped-write warnings to the caller of
    this function, 2 to the caller's caller.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS

    result = list(sequence)  # shallow copy, the input is never written to

    for key, value in replacement.items():
        index = coerce_index(key)
        if index is None:
            _reject(key, len(result), "not an integer index", settings, stacklevel + 1)
            continue
        if index < 0:
            _reject(key, len(result), "negative indices are not supported", settings, stacklevel + 1)
            continue

        if index < len(result):
            result[index] = value
        elif settings.out_of_range == OutOfRange.EXTEND:
            # each gap slot gets its own copy of the fill value
            result.extend(copy.copy(settings.fill_value) for _ in range(index - len(result)))
            result.append(value)
        else:
            _reject(key, len(result), "index out of range", settings, stacklevel + 1)

    return result


def replace_at(
    sequence: Sequence[Any],
    index_or_mapping: Any,
    value: Any = UNSET,
    *,
    settings: ReplaceSettings | None = None,
) -> list[Any]:
    """Return a shallow copy of ``sequence`` with one or more positions overwritten.

    ``replace_at(seq, 1, "x")`` writes a single position, and
    ``replace_at(seq, {0: "a", 2: "b"})`` writes a batch of positions in the
    mapping's iteration order. A Single or Batch may also be passed directly.
    The input sequence is never mutated.

    Indices past the end, negative indices and keys that are not integers are
    handled according to ``settings.out_of_range`` (see ReplaceSettings).
    Negative indices never wrap around.

    Args:
        sequence: The sequence to copy. Left untouched.
        index_or_mapping: An index, a mapping of index to value, or a Single/Batch.
        value: The new value. Required for a single index, ignored otherwise.
        settings: Out-of-range handling. Defaults to ReplaceSettings().

    Returns:
        A new list.

    Raises:
        TypeError: If a single index is given without a value.
        ReplaceIndexError: If an index is rejected and out_of_range is "raise".
    """
    return apply_replacement(sequence, to_replacement(index_or_mapping, value), settings=settings, stacklevel=2)
