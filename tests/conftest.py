from typing import Annotated

import httpx
import pytest
import pytest_asyncio
from fastapi import Depends, FastAPI, Query

from pagewalk.integrations.fastapi import (
    PaginatedResponse,
    PaginationParams,
    register_exception_handlers,
)
from pagewalk.lifecycle.observability import disable_tracing

BASE_URL = "http://testserver"


def build_items_app() -> FastAPI:
    """Remote paginated API serving the numbers 1..total."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/items", response_model=PaginatedResponse[int])
    async def list_items(
        total: Annotated[int, Query(ge=0)],
        params: Annotated[PaginationParams, Depends()],
    ):
        return PaginatedResponse[int].from_list(range(1, total + 1), params)

    return app


@pytest.fixture(autouse=True)
def reset_tracing():
    """Reset observability state between tests."""
    yield
    disable_tracing()


@pytest.fixture
def items_app() -> FastAPI:
    return build_items_app()


@pytest_asyncio.fixture
async def http_client(items_app):
    """httpx client wired straight into the items app, no network involved."""
    transport = httpx.ASGITransport(app=items_app)
    async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as client:
        yield client
