from pagewalk.core.sequence import (
    PageSequence,
    SequenceOptions,
    SequenceState,
    paginate,
)
from pagewalk.core.resolvers import (
    next_page_number,
    next_offset,
    next_cursor,
    expected_pages,
)

__all__ = [
    "PageSequence",
    "SequenceOptions",
    "SequenceState",
    "paginate",
    "next_page_number",
    "next_offset",
    "next_cursor",
    "expected_pages",
]
