from typing import Any
from uuid import UUID

from domain.exceptions import InvalidIdentifierError


def parse_user_id(raw_id: Any) -> str:
    """
    Validate a caller-supplied user reference.

    Returns the canonical lowercase hyphenated UUID. Raises
    InvalidIdentifierError for anything that is not a UUID.
    """
    if not isinstance(raw_id, str) or not raw_id.strip():
        raise InvalidIdentifierError(raw_id)
    try:
        return str(UUID(raw_id.strip()))
    except ValueError as e:
        raise InvalidIdentifierError(raw_id) from e
