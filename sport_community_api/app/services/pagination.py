"""
Page arithmetic shared by the list endpoints.

The list queries read every row; ``page`` and ``limit`` only decide the
``nextPage`` hint returned to the client.  Query values are read by
their leading integer, so ``"2abc"`` and ``"2.5"`` both mean 2.
"""

import re
from typing import Optional, Sequence, Tuple

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _as_int(value: Optional[str], default: int) -> int:
    match = _LEADING_INT.match(value or "")
    if not match:
        return default
    return int(match.group(1)) or default


def parse_page_params(page: Optional[str], limit: Optional[str]) -> Tuple[int, int, int]:
    """Return ``(page, limit, offset)`` with defaults for absent or unusable values."""
    page_number = _as_int(page, DEFAULT_PAGE)
    page_size = _as_int(limit, DEFAULT_LIMIT)
    return page_number, page_size, (page_number - 1) * page_size


def next_page(rows: Sequence, page: int, limit: int) -> Optional[int]:
    """``page + 1`` when the result holds exactly ``limit`` rows, else ``None``."""
    return page + 1 if len(rows) == limit else None
