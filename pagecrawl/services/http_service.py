import requests
from typing import Callable

from pagecrawl.domain.http_response import HttpResponse
from pagecrawl.exceptions import HttpFetchError


class HttpService:
    """
    `Fetcher` backed by a `requests.get`-compatible callable.

    The callable is injected so tests can pass a mock instead of patching
    `requests`. Any status is returned as-is; only transport failures raise.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e
        return HttpResponse(resp.status_code, resp.text)
