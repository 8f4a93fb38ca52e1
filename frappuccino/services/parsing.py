"""Coercion of path/query string values before they reach a repository."""
import logging
from typing import Optional

from frappuccino.core.errors import InvalidIDError, InvalidPaginationError, NoRecordError

logger = logging.getLogger(__name__)

# sqlite INTEGER is a signed 64-bit value; no row can carry an id outside it.
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def parse_id(raw: str) -> int:
    """Parse a record identifier.

    Raises InvalidIDError when it is not an integer and NoRecordError when it
    cannot be a sqlite row id.
    """
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("Rejected non-integer id=%r", raw)
        raise InvalidIDError(f"Identifier '{raw}' is not an integer") from None
    if not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        logger.warning("Rejected out-of-range id=%r", raw)
        raise NoRecordError(f"No record with id={raw}")
    return value


def parse_positive_int(raw: Optional[str], name: str, default: int) -> int:
    """Parse a pagination parameter; missing values fall back to ``default``."""
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        value = 0
    if value < 1:
        logger.warning("Rejected %s=%r", name, raw)
        raise InvalidPaginationError(f"{name} must be a positive integer, got '{raw}'")
    return value
