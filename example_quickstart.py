"""
Pagewalk Quick Start Example

A simple example to get you started with Pagewalk in 5 minutes.

Features covered:
- Serve a paginated endpoint with FastAPI
- Fetch pages over httpx
- Walk every page lazily with paginate()
- Flatten pages into items
- Trace page fetches

Run with: python example_quickstart.py
"""

import asyncio
from typing import Annotated

import httpx
from fastapi import Depends, FastAPI, Query

from pagewalk import (
    HttpFetcherConfig,
    PageEvent,
    SequenceOptions,
    add_listener,
    enable_tracing,
    http_fetcher,
    next_page_number,
    paginate,
)
from pagewalk.integrations.fastapi import PaginatedResponse, PaginationParams


# ============================================================================
# 1. A PAGINATED API
# ============================================================================

app = FastAPI()


@app.get("/items", response_model=PaginatedResponse[int])
async def list_items(
    total: Annotated[int, Query(ge=0)],
    params: Annotated[PaginationParams, Depends()],
):
    """Serve the numbers 1..total, one page at a time."""
    return PaginatedResponse[int].from_list(range(1, total + 1), params)


# ============================================================================
# 2. ASYNC MAIN FUNCTION
# ============================================================================


async def main():
    """Run the quickstart example."""

    total, per_page = 20, 5
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://example") as client:
        fetch = http_fetcher(
            client,
            HttpFetcherConfig(path="/items", params={"total": total, "per_page": per_page}),
        )

        # ====================================================================
        # WALK EVERY PAGE
        # ====================================================================
        print("📄 Walking pages...")
        pages = paginate(
            fetch,
            SequenceOptions(initial_page=1, get_next_page=next_page_number(per_page)),
        )
        async for page in pages:
            print(f"  Page {pages.pages_fetched}: {page.items}")
        print(f"  Sequence is now {pages.state.value}\n")

        # ====================================================================
        # FLATTEN INTO ITEMS
        # ====================================================================
        print("🔢 Flattening items...")
        pages = paginate(
            fetch,
            SequenceOptions(initial_page=1, get_next_page=next_page_number(per_page)),
        )
        items = [item async for item in pages.items(lambda page: page.items)]
        print(f"  Got {len(items)} items, first={items[0]}, last={items[-1]}\n")

        # ====================================================================
        # STOP EARLY
        # ====================================================================
        print("✋ Stopping after the first page...")
        pages = paginate(
            fetch,
            SequenceOptions(initial_page=1, get_next_page=next_page_number(per_page)),
        )
        async for page in pages:
            break
        print(f"  Fetched {pages.pages_fetched} page(s)\n")

        # ====================================================================
        # TRACING
        # ====================================================================
        print("⏱️  Tracing page fetches...")

        def on_page(event: PageEvent):
            print(f"  {event.sequence} step {event.step}: {event.duration_ms:.2f}ms")

        enable_tracing(slow_fetch_ms=1000.0)
        add_listener(on_page)
        await paginate(
            fetch,
            SequenceOptions(initial_page=1, get_next_page=next_page_number(per_page), name="items"),
        ).all()

    print("\n✅ Done")


if __name__ == "__main__":
    asyncio.run(main())
