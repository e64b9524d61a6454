from pagewalk.lifecycle.observability import (
    enable_tracing,
    disable_tracing,
    PageEvent,
    add_listener,
    remove_listener,
    get_events,
    clear_events,
    track_fetch,
)

__all__ = [
    "enable_tracing",
    "disable_tracing",
    "PageEvent",
    "add_listener",
    "remove_listener",
    "get_events",
    "clear_events",
    "track_fetch",
]
