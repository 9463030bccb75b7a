from __future__ import annotations

from typing import Protocol

from pagecrawl.domain.http_response import HttpResponse


class Fetcher(Protocol):
    """Fetch a URL and return its status and body.

    Implementations raise `HttpFetchError` on transport failure and return
    the response (whatever its status) otherwise. `HttpService` is the
    production implementation.
    """

    def fetch(self, url: str) -> HttpResponse: ...
