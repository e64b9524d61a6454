from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

import httpx
from pydantic import BaseModel, Field

from pagewalk.utils.exceptions import FetchError
from pagewalk.utils.pagination import ItemsPage

logger = logging.getLogger(__name__)


class HttpFetcherConfig(BaseModel):
    """How a page token is turned into an HTTP request.

    Attributes:
        path: Request path, relative to the client's base_url
        page_param: Query parameter that carries the page token
        params: Fixed query parameters sent with every request
    """

    model_config = {"frozen": True}

    path: str = "/"
    page_param: str = "page"
    params: dict[str, Any] = Field(default_factory=dict)


def http_fetcher(
    client: httpx.AsyncClient,
    config: HttpFetcherConfig | None = None,
    *,
    model: type[BaseModel] = ItemsPage,
) -> Callable[[Any], Awaitable[Any]]:
    """Build a page fetcher that GETs one page per call over an httpx client.

    The client is owned by the caller; the fetcher never opens or closes it.

    Args:
        client: Configured httpx.AsyncClient
        config: Request shape. Defaults to ``GET /?page=<token>``.
        model: Pydantic model the JSON body is validated into

    Returns:
        Async callable suitable as the ``fetch_page`` argument of paginate()

    Raises (from the returned callable):
        FetchError: If the server answers with a non-success status
        pydantic.ValidationError: If the body does not match ``model``
    """
    cfg = config or HttpFetcherConfig()

    async def fetch_page(page: Any) -> Any:
        params = {**cfg.params, cfg.page_param: page}
        logger.debug(f"GET {cfg.path} with {params}")
        response = await client.get(cfg.path, params=params)
        if not response.is_success:
            raise FetchError(
                f"Failed with msg: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        return model.model_validate(response.json())

    return fetch_page
