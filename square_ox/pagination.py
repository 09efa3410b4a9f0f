"""
Cursor pagination over Square list and search endpoints.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from square_ox.errors import SquareError
from square_ox.response import SquareResponse

logger = logging.getLogger(__name__)


def iter_pages(
    fetch: Callable[[str | None], SquareResponse],
    max_pages: int | None = None,
) -> Iterator[SquareResponse]:
    """
    Yield pages by calling fetch(cursor), starting with None and following
    each response's cursor until Square stops returning one.

    Raises:
        SquareError: If Square hands back a cursor it already returned
    """
    seen: set[str] = set()
    cursor: str | None = None
    pages = 0
    while True:
        page = fetch(cursor)
        pages += 1
        yield page
        cursor = page.cursor
        if not cursor:
            return
        if max_pages is not None and pages >= max_pages:
            logger.debug("Stopping pagination after %d pages", pages)
            return
        if cursor in seen:
            raise SquareError(f"Pagination cursor repeated after {pages} pages")
        seen.add(cursor)


def iter_items(
    fetch: Callable[[str | None], SquareResponse],
    key: str,
    max_pages: int | None = None,
) -> Iterator[Any]:
    """Yield every entry of body[key] across all pages."""
    for page in iter_pages(fetch, max_pages=max_pages):
        yield from page.get(key) or []
