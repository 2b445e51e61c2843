import logging
from typing import Callable

import requests

from mapcrawl.domain.fetched_page import FetchedPage
from mapcrawl.exceptions import HttpFetchError

logger = logging.getLogger(__name__)


class HttpService:
    """Single GET per call, no retries; `LinkFetcher` owns the retry policy.

    Status codes are passed through untouched. Only transport-level
    failures (DNS, refused connection, timeout) raise `HttpFetchError`.
    """

    def __init__(self, user_agent: str, http_client: Callable[..., requests.Response], timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def get(self, url: str) -> FetchedPage:
        try:
            resp = self.http_client(url, headers={"User-Agent": self.user_agent}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        logger.debug("GET %s -> %s", url, resp.status_code)
        return FetchedPage(url, resp.status_code, resp.text, resp.headers.get("Content-Type"))
