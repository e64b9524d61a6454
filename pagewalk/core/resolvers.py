"""Reusable next-page policies.

Each factory returns a ``get_next_page(result, page)`` callable for
``SequenceOptions``. The returned callables keep no state between calls, so
one resolver can be shared by any number of sequences.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Mapping

from pagewalk.utils.types import read_field


def _field(name: str) -> Callable[[Any], Any]:
    return lambda result: read_field(result, name)


def _optional_field(name: str) -> Callable[[Any], Any]:
    def read(result: Any) -> Any:
        if isinstance(result, Mapping):
            return result.get(name)
        return getattr(result, name, None)

    return read


def next_page_number(
    per_page: int,
    count: Callable[[Any], int] | None = None,
) -> Callable[[Any, int], int | None]:
    """Resolver for 1-based page numbers over a source that reports its total.

    Continues while the pages seen so far cover fewer than ``count(result)``
    items, so a source of N items produces ceil(N / per_page) pages.

    Args:
        per_page: Page size requested from the source
        count: Reads the total item count from a page result. Defaults to
            the ``count`` key or attribute.
    """
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    get_count = count or _field("count")

    def get_next_page(result: Any, page: int) -> int | None:
        if page * per_page < get_count(result):
            return page + 1
        return None

    return get_next_page


def next_offset(
    limit: int,
    total: Callable[[Any], int] | None = None,
) -> Callable[[Any, int], int | None]:
    """Resolver for 0-based item offsets.

    Args:
        limit: Number of items requested per page
        total: Reads the total item count from a page result. Defaults to
            the ``count`` key or attribute.
    """
    if limit < 1:
        raise ValueError("limit must be >= 1")
    get_total = total or _field("count")

    def get_next_page(result: Any, offset: int) -> int | None:
        following = offset + limit
        if following < get_total(result):
            return following
        return None

    return get_next_page


def next_cursor(
    cursor: Callable[[Any], Any] | None = None,
) -> Callable[[Any, Any], Any | None]:
    """Resolver for opaque continuation cursors.

    Stops when the source returns an empty or missing cursor.

    Args:
        cursor: Reads the next cursor from a page result. Defaults to the
            ``next_cursor`` key or attribute.
    """
    get_cursor = cursor or _optional_field("next_cursor")

    def get_next_page(result: Any, page: Any) -> Any | None:
        value = get_cursor(result)
        return value if value else None

    return get_next_page


def expected_pages(total: int, per_page: int) -> int:
    """Number of pages ``next_page_number`` walks for a source of ``total`` items.

    A source with no items still answers the first request.
    """
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    return max(1, math.ceil(total / per_page))
