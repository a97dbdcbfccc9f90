import math
from typing import Any, Sequence


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit > 0 else 0


def paginate(
    *,
    items: Sequence[Any],
    page: int = 1,
    limit: int = 5,
):
    """
    Slice an in-memory list into a 1-based page.

    A page past the end gives an empty `results` list; it is not clamped.
    """
    if page < 1:
        page = 1

    if limit < 1:
        limit = 5

    offset = (page - 1) * limit
    total = len(items)

    return {
        "total_items": total,
        "total_pages": total_pages(total, limit),
        "current_page": page,
        "limit": limit,
        "results": list(items[offset:offset + limit]),
    }
