"""Text normalisation helpers."""

from typing import Any


def trim_or_null(value: Any) -> str | None:
    """Trim a possibly missing string, mapping blank to None.

    None is the one canonical "absent" value for optional text fields.
    """
    if value is None:
        return None
    trimmed = str(value).strip()
    return trimmed or None
