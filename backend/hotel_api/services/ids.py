import uuid
from typing import Optional


def parse_id(raw) -> Optional[uuid.UUID]:
    """
    Parse a path id into a UUID.

    Returns None for anything that is not a UUID, so callers can answer
    "not found" instead of failing validation on a malformed id.
    """
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw))
    except (ValueError, TypeError):
        return None
