import math
from typing import Annotated, Any, Generic, Sequence, TypeVar

from fastapi import Query
from pydantic import BaseModel

from pagewalk.utils.exceptions import FetchError, PagewalkError

T = TypeVar("T")

MAX_PER_PAGE = 100


def register_exception_handlers(app: Any) -> None:
    """Register pagewalk exception handlers on a FastAPI app."""
    from starlette.responses import JSONResponse

    @app.exception_handler(FetchError)
    async def fetch_error_handler(request: Any, exc: FetchError):
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.exception_handler(PagewalkError)
    async def pagewalk_error_handler(request: Any, exc: PagewalkError):
        return JSONResponse(status_code=500, content={"detail": str(exc)})


class PaginationParams:
    """FastAPI dependency for page-number pagination parameters.

    Through FastAPI ``page=0`` is answered with 422; built directly, ``page``
    is clamped to 1. ``per_page`` is clamped into 1..MAX_PER_PAGE.
    """

    def __init__(
        self,
        page: Annotated[int, Query(ge=1)] = 1,
        per_page: int = 20,
    ):
        self.page = max(1, page)
        self.per_page = min(max(1, per_page), MAX_PER_PAGE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated response model for API endpoints.

    Its ``items`` and ``count`` fields are what ItemsPage and
    ``next_page_number`` read on the client side.
    """

    items: list[T]
    count: int
    page: int
    per_page: int
    total_pages: int
    has_next: bool

    @classmethod
    def from_list(cls, items: Sequence[T], params: PaginationParams) -> "PaginatedResponse[T]":
        """Slice one page out of an in-memory sequence."""
        count = len(items)
        total_pages = math.ceil(count / params.per_page) if count > 0 else 0
        window = items[params.offset : params.offset + params.per_page]
        return cls(
            items=list(window),
            count=count,
            page=params.page,
            per_page=params.per_page,
            total_pages=total_pages,
            has_next=params.page < total_pages,
        )
