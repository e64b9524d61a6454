from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import AsyncIterator, Callable, Generic, Iterable

from pagewalk.lifecycle.observability import track_fetch
from pagewalk.utils.exceptions import SequenceBusyError
from pagewalk.utils.types import FetchPage, GetNextPage, P, R, T

logger = logging.getLogger(__name__)


class SequenceState(str, Enum):
    """Lifecycle of a single PageSequence instance."""

    IDLE = "idle"
    FETCHING = "fetching"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SequenceOptions(Generic[P, R]):
    """Where a sequence starts and how it advances.

    Attributes:
        initial_page: Token passed to the first fetch
        get_next_page: Called as ``get_next_page(result, page_used)`` after
            every fetch. Returns the next token, or None when no pages remain.
        name: Label used in log records and trace events
    """

    initial_page: P
    get_next_page: GetNextPage[R, P]
    name: str = "pages"

    def __post_init__(self) -> None:
        if not callable(self.get_next_page):
            raise TypeError("get_next_page must be callable")


class PageSequence(Generic[P, R]):
    """Lazy, single-pass async sequence of page results.

    Nothing is fetched until the first element is requested. Every element
    costs exactly one ``fetch_page`` call followed by one ``get_next_page``
    call, and the next fetch is only issued when the consumer asks for the
    next element. A sequence cannot be rewound; build a new one with
    ``paginate()`` to start again from the initial page.
    """

    def __init__(
        self,
        fetch_page: FetchPage[P, R],
        options: SequenceOptions[P, R],
    ) -> None:
        self._fetch_page = fetch_page
        self._get_next_page = options.get_next_page
        self._name = options.name
        self._current_page: P = options.initial_page
        self._state = SequenceState.IDLE
        self._closed = False
        self._pages_fetched = 0

    @property
    def state(self) -> SequenceState:
        return self._state

    @property
    def current_page(self) -> P:
        """Token the next fetch will use."""
        return self._current_page

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    def __repr__(self) -> str:
        return (
            f"<PageSequence {self._name!r} state={self._state.value} "
            f"page={self._current_page!r} fetched={self._pages_fetched}>"
        )

    # --- Async iteration ---

    def __aiter__(self) -> PageSequence[P, R]:
        return self

    async def __anext__(self) -> R:
        if self._state is SequenceState.EXHAUSTED:
            raise StopAsyncIteration
        if self._state is SequenceState.FETCHING:
            raise SequenceBusyError(
                f"Sequence '{self._name}' is already fetching page {self._current_page!r}"
            )

        page = self._current_page
        self._state = SequenceState.FETCHING
        async with track_fetch(self._name, page, self._pages_fetched + 1) as ctx:
            try:
                result = await self._fetch_page(page)
                self._pages_fetched += 1
                next_page = self._get_next_page(result, page)
            except BaseException:
                # A failed step aborts the sequence
                self._state = SequenceState.EXHAUSTED
                raise

            # State settles before the trace event is emitted on exit
            ctx["exhausted"] = next_page is None
            if next_page is None or self._closed:
                logger.debug(f"Sequence '{self._name}' exhausted after page {page!r}")
                self._state = SequenceState.EXHAUSTED
            else:
                logger.debug(f"Sequence '{self._name}' fetched page {page!r}, next is {next_page!r}")
                self._current_page = next_page
                self._state = SequenceState.IDLE
        return result

    # --- Consumption helpers ---

    async def all(self) -> list[R]:
        """Drain the remaining pages and return their results in order."""
        return [result async for result in self]

    async def items(self, extract: Callable[[R], Iterable[T]]) -> AsyncIterator[T]:
        """Yield the items of each remaining page, fetching one page at a time.

        Args:
            extract: Maps a page result to the items it carries
        """
        async for result in self:
            for item in extract(result):
                yield item

    async def aclose(self) -> None:
        """Abandon the sequence. No further fetches are issued."""
        self._closed = True
        if self._state is not SequenceState.FETCHING:
            self._state = SequenceState.EXHAUSTED


def paginate(
    fetch_page: FetchPage[P, R],
    options: SequenceOptions[P, R],
) -> PageSequence[P, R]:
    """Build a lazy sequence over every page reachable from ``options.initial_page``.

    Args:
        fetch_page: Async callable returning the result for one page token
        options: Initial token and next-page policy

    Returns:
        A PageSequence; iterate it with ``async for``

    Raises:
        TypeError: If fetch_page is not callable

    Example:
        pages = paginate(
            lambda page: client.list_items(page=page),
            SequenceOptions(initial_page=1, get_next_page=next_page_number(per_page=5)),
        )
        async for page in pages:
            ...
    """
    if not callable(fetch_page):
        raise TypeError("fetch_page must be callable")
    return PageSequence(fetch_page, options)
