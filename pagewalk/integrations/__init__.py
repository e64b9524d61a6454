from pagewalk.integrations.http import HttpFetcherConfig, http_fetcher

__all__ = [
    "HttpFetcherConfig",
    "http_fetcher",
]
