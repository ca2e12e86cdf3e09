"""Array Replace - copy-on-write positional replacement for Python sequences."""

from array_replace.replace import apply_replacement, replace_at
from array_replace.replacement import Batch, Single, to_replacement
from array_replace.settings import OutOfRange, ReplaceSettings, load_settings
from array_replace.utils import (
    ArrayReplaceError,
    ReplaceIndexError,
    ReplaceIndexWarning,
    coerce_boolean,
    coerce_index,
)
from array_replace.wrapper import ReplaceableList, install_replace

__all__ = [
    "ArrayReplaceError",
    "Batch",
    "OutOfRange",
    "ReplaceIndexError",
    "ReplaceIndexWarning",
    "ReplaceSettings",
    "ReplaceableList",
    "Single",
    "apply_replacement",
    "coerce_boolean",
    "coerce_index",
    "install_replace",
    "load_settings",
    "replace_at",
    "to_replacement",
]
