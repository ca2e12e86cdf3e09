"""Method-call syntax for replace_at on caller-owned sequence types."""

import sys
from collections.abc import Sequence
from typing import Any, TypeVar

from array_replace.replace import apply_replacement
from array_replace.replacement import UNSET, to_replacement
from array_replace.settings import ReplaceSettings
from array_replace.utils import ArrayReplaceError

T = TypeVar("T", bound=type)


def _replace_method(
    self: Sequence[Any],
    index_or_mapping: Any,
    value: Any = UNSET,
    *,
    settings: ReplaceSettings | None = None,
) -> list[Any]:
    """Return a copy of this sequence with one or more positions overwritten.

    Equivalent to ``replace_at(self, index_or_mapping, value)``.
    """
    return apply_replacement(self, to_replacement(index_or_mapping, value), settings=settings, stacklevel=2)


def _is_shared_type(cls: type) -> bool:
    """True for built-in and standard library classes."""
    return cls.__module__.partition(".")[0] in sys.stdlib_module_names


def install_replace(cls: T) -> T:
    """Add a ``replace`` method to a caller-owned sequence class.

    Usable as a class decorator. Installing twice is a no-op. Built-in and
    standard library types (``list``, ``collections.UserList``, ...) are never
    patched, and an existing unrelated ``replace`` attribute is left alone.

    Raises:
        ArrayReplaceError: If cls is a built-in, standard library or otherwise
            immutable type, or already defines an unrelated ``replace``.
    """
    if _is_shared_type(cls):
        raise ArrayReplaceError(
            f"Refusing to patch built-in or standard library type {cls.__qualname__!r} from {cls.__module__!r}, "
            "subclass it or use replace_at"
        )

    existing = getattr(cls, "replace", None)
    if existing is _replace_method:
        return cls
    if existing is not None:
        raise ArrayReplaceError(f"{cls.__name__!r} already has a 'replace' attribute")

    try:
        cls.replace = _replace_method  # type: ignore[attr-defined]
    except TypeError as exc:
        raise ArrayReplaceError(f"Cannot add 'replace' to {cls.__name__!r}: {exc}") from exc
    return cls


class ReplaceableList(list):
    """A list whose ``replace`` returns a new ReplaceableList.

    >>> ReplaceableList([1, 2, 3]).replace(1, 9)
    [1, 9, 3]
    """

    def replace(
        self,
        index_or_mapping: Any,
        value: Any = UNSET,
        *,
        settings: ReplaceSettings | None = None,
    ) -> "ReplaceableList":
        replacement = to_replacement(index_or_mapping, value)
        return ReplaceableList(apply_replacement(self, replacement, settings=settings, stacklevel=2))
