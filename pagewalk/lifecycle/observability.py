from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger("pagewalk")


@dataclass(frozen=True)
class PageEvent:
    """Represents a single completed page step for tracing."""

    sequence: str
    page: str
    step: int
    duration_ms: float = 0.0
    exhausted: bool = False


class _ObservabilityState:
    """Global mutable state for observability."""

    def __init__(self) -> None:
        self.enabled: bool = False
        self.slow_fetch_threshold_ms: float = 100.0
        self.listeners: list[Callable[[PageEvent], Any]] = []
        self.events: list[PageEvent] = []
        self.capture_events: bool = False


_state = _ObservabilityState()


def enable_tracing(slow_fetch_ms: float = 100.0, capture_events: bool = False) -> None:
    """Enable page fetch tracing and observability."""
    _state.enabled = True
    _state.slow_fetch_threshold_ms = slow_fetch_ms
    _state.capture_events = capture_events


def disable_tracing() -> None:
    """Disable tracing and clear all state."""
    _state.enabled = False
    _state.slow_fetch_threshold_ms = 100.0
    _state.listeners.clear()
    _state.events.clear()
    _state.capture_events = False


def get_events() -> list[PageEvent]:
    """Return captured events."""
    return list(_state.events)


def clear_events() -> None:
    """Clear captured events."""
    _state.events.clear()


def add_listener(callback: Callable[[PageEvent], Any]) -> None:
    """Register a listener that receives a PageEvent for each completed step."""
    _state.listeners.append(callback)


def remove_listener(callback: Callable[[PageEvent], Any]) -> None:
    """Remove a previously registered listener."""
    _state.listeners.remove(callback)


def emit_event(event: PageEvent) -> None:
    """Emit a page event: store, log slow fetches, notify listeners."""
    if not _state.enabled:
        return

    if _state.capture_events:
        _state.events.append(event)

    if event.duration_ms > _state.slow_fetch_threshold_ms:
        logger.warning(
            "Slow page fetch: %s page %s took %.1fms (threshold: %.1fms)",
            event.sequence,
            event.page,
            event.duration_ms,
            _state.slow_fetch_threshold_ms,
        )

    for listener in list(_state.listeners):
        try:
            listener(event)
        except Exception:
            # Listener failures never cost the consumer a page
            logger.exception("Page event listener %r failed", listener)

    _try_emit_otel_span(event)


def _try_emit_otel_span(event: PageEvent) -> None:
    """Attempt to emit an OpenTelemetry span if the library is available."""
    try:
        from opentelemetry import trace

        tracer = trace.get_tracer("pagewalk")
        with tracer.start_as_current_span("pagewalk.fetch_page") as span:
            span.set_attribute("pagewalk.sequence", event.sequence)
            span.set_attribute("pagewalk.page", event.page)
            span.set_attribute("pagewalk.step", event.step)
            span.set_attribute("pagewalk.exhausted", event.exhausted)
            if event.duration_ms:
                span.set_attribute("pagewalk.duration_ms", event.duration_ms)
    except ImportError:
        pass


@asynccontextmanager
async def track_fetch(sequence: str, page: Any, step: int):
    """Time one page step and emit a PageEvent once it completes.

    Steps that raise are not reported; the failure belongs to the consumer.
    """
    ctx: dict[str, Any] = {"exhausted": False}
    if not _state.enabled:
        yield ctx
        return

    start = time.perf_counter()
    yield ctx
    duration_ms = (time.perf_counter() - start) * 1000
    emit_event(
        PageEvent(
            sequence=sequence,
            page=repr(page),
            step=step,
            duration_ms=duration_ms,
            exhausted=ctx["exhausted"],
        )
    )
