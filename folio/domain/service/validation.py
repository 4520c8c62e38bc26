"""Input checks shared by domain services.

These run before any repository call so malformed input never reaches the
store.
"""

from folio.domain.error import ValidationError

# Largest page any listing returns
MAX_PAGE_SIZE = 100


def ensure_id(name: str, value: int) -> int:
    """Reject identifiers that cannot exist (non-integers, zero, negatives)."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"{name} must be a positive integer, got {value!r}")
    return value


def ensure_limit(limit: int, maximum: int) -> int:
    """Reject page sizes outside 1..maximum."""
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValidationError(f"limit must be an integer, got {limit!r}")
    if limit < 1 or limit > maximum:
        raise ValidationError(f"limit must be between 1 and {maximum}, got {limit}")
    return limit


def ensure_offset(offset: int) -> int:
    """Reject negative or non-integer offsets."""
    if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
        raise ValidationError(f"offset must be a non-negative integer, got {offset!r}")
    return offset
