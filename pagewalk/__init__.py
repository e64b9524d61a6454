from pagewalk.core import (
    PageSequence,
    SequenceOptions,
    SequenceState,
    paginate,
    next_page_number,
    next_offset,
    next_cursor,
    expected_pages,
)
from pagewalk.lifecycle import (
    enable_tracing,
    disable_tracing,
    PageEvent,
    add_listener,
)
from pagewalk.integrations import HttpFetcherConfig, http_fetcher
from pagewalk.utils import (
    PagewalkError,
    SequenceBusyError,
    FetchError,
    ItemsPage,
    CursorPage,
)

__all__ = [
    # Core
    "PageSequence",
    "SequenceOptions",
    "SequenceState",
    "paginate",
    "next_page_number",
    "next_offset",
    "next_cursor",
    "expected_pages",
    # Lifecycle
    "enable_tracing",
    "disable_tracing",
    "PageEvent",
    "add_listener",
    # Integrations
    "HttpFetcherConfig",
    "http_fetcher",
    # Utils
    "PagewalkError",
    "SequenceBusyError",
    "FetchError",
    "ItemsPage",
    "CursorPage",
]
