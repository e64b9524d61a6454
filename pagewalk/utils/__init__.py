from pagewalk.utils.exceptions import (
    PagewalkError,
    SequenceBusyError,
    FetchError,
)
from pagewalk.utils.pagination import ItemsPage, CursorPage
from pagewalk.utils.types import (
    FetchPage,
    GetNextPage,
    read_field,
)

__all__ = [
    "PagewalkError",
    "SequenceBusyError",
    "FetchError",
    "ItemsPage",
    "CursorPage",
    "FetchPage",
    "GetNextPage",
    "read_field",
]
