class PagewalkError(Exception):
    """Base exception for all Pagewalk errors."""


class SequenceBusyError(PagewalkError):
    """Raised when a page sequence is advanced while a fetch is still in flight."""


class FetchError(PagewalkError):
    """Raised by the bundled fetchers when the remote source rejects a page request."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
