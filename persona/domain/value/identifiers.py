"""Strongly typed identifiers for Persona domain entities.

Identifiers are UUIDs. On the wire they travel as canonical UUID strings
(lower-case, hyphenated), and anything else is rejected before a lookup.
"""

from typing import Any, NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ProfileId = NewType("ProfileId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)


def parse_id(value: Any) -> UUID | None:
    """Parse a canonical identifier string.

    Args:
        value: Arbitrary input (usually a path, query or body value)

    Returns:
        The UUID if value is its canonical string form, otherwise None
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = UUID(value)
    except ValueError:
        return None
    # Reject braces, urn: prefixes, upper case and unhyphenated forms
    if str(parsed) != value:
        return None
    return parsed


def is_valid_id(value: Any) -> bool:
    """Check that value has the shape of a record identifier."""
    return parse_id(value) is not None
