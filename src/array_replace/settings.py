"""Replacement settings and environment variable loading."""

import json
import os
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

from array_replace.utils import ArrayReplaceError, coerce_boolean


class OutOfRange(StrEnum):
    """What to do with an index outside ``[0, len(sequence))``."""

    EXTEND = "extend"
    IGNORE = "ignore"
    RAISE = "raise"


class ReplaceSettings(BaseModel):
    """Controls how replace_at treats indices it cannot write to directly.

    - ``extend``: an index past the end grows the copy, padding the gap with
      ``fill_value``. Negative and malformed indices are skipped.
    - ``ignore``: every out-of-range or malformed index is skipped.
    - ``raise``: every out-of-range or malformed index raises ReplaceIndexError.

    Skipped writes emit a ReplaceIndexWarning unless ``warn`` is False.

    ``extend`` allocates the whole gap, so a single huge key such as
    ``"9999999999"`` builds a list of that length. Use ``ignore`` or ``raise``
    when keys come from untrusted input.
    """

    model_config = ConfigDict(frozen=True)

    out_of_range: OutOfRange = OutOfRange.EXTEND
    fill_value: Any = None
    warn: bool = True


DEFAULT_SETTINGS = ReplaceSettings()


def load_settings(
    prefix: str = "ARRAY_REPLACE_",
    env: dict[str, str] | None = None,
) -> ReplaceSettings:
    """Build ReplaceSettings from environment variables.

    Reads ``{prefix}OUT_OF_RANGE``, ``{prefix}FILL_VALUE`` (JSON, falling
    through to the raw string) and ``{prefix}WARN`` (boolean). Unset
    variables keep the model defaults.

    Args:
        prefix: Prefix of the variable names.
        env: Environment variable dict. If None, uses os.environ.

    Raises:
        ArrayReplaceError: If OUT_OF_RANGE is not a known mode.
    """
    if env is None:
        env = dict(os.environ)

    values: dict[str, Any] = {}

    mode = env.get(f"{prefix}OUT_OF_RANGE")
    if mode is not None:
        try:
            values["out_of_range"] = OutOfRange(mode.lower().strip())
        except ValueError:
            choices = ", ".join(m.value for m in OutOfRange)
            raise ArrayReplaceError(f"Unknown {prefix}OUT_OF_RANGE value {mode!r}, expected one of: {choices}") from None

    fill_value = env.get(f"{prefix}FILL_VALUE")
    if fill_value is not None:
        try:
            values["fill_value"] = json.loads(fill_value)
        except (json.JSONDecodeError, TypeError):
            values["fill_value"] = fill_value  # fall through to string

    warn = env.get(f"{prefix}WARN")
    if warn is not None:
        values["warn"] = coerce_boolean(warn)

    return ReplaceSettings(**values)
