"""Utility functions for index handling and errors."""

import operator
import re
from typing import Any


class ArrayReplaceError(Exception):
    """Replacement error with standard prefix."""

    def __init__(self, message: str) -> None:
        super().__init__(f"[Array Replace] {message}")


class ReplaceIndexError(ArrayReplaceError, IndexError):
    """An index was rejected while applying a replacement."""

    def __init__(self, index: Any, length: int, reason: str) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Cannot replace at index {index!r} of sequence with length {length}: {reason}")


class ReplaceIndexWarning(UserWarning):
    """A write was skipped because its index could not be used."""


_INDEX_RE = re.compile(r"0|[1-9][0-9]*")


def coerce_index(key: Any) -> int | None:
    """Coerce a replacement key to an integer index.

    - ``int`` and objects implementing ``__index__`` → themselves
    - canonical decimal strings (``"0"``, ``"12"``) → parsed
    - ``bool``, other strings (``"01"``, ``" 2"``, ``"-1"``) and everything else → None

    The result may be negative; range checks belong to the caller.
    """
    if isinstance(key, bool):
        return None
    if isinstance(key, str):
        if _INDEX_RE.fullmatch(key):
            return int(key)
        return None
    try:
        return operator.index(key)
    except TypeError:
        return None


def coerce_boolean(value: Any) -> bool:
    """Coerce a value to boolean.

    "true", "1", 1, True → True; everything else → False.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    if isinstance(value, str):
        return value.lower().strip() in ("true", "1")
    return False
