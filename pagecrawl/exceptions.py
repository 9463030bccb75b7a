"""Custom exceptions for PageCrawl."""


class CrawlError(Exception):
    """Base class for all PageCrawl errors."""


class ConfigError(CrawlError):
    """Raised when the crawler is missing configuration or it is invalid."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class InvalidInputError(CrawlError):
    """Raised when a crawl step receives an empty URL."""

    def __init__(self, reason: str = "url is required"):
        self.reason = reason
        super().__init__(reason)


class HttpFetchError(CrawlError):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class NonSuccessStatusError(CrawlError):
    """Raised when a fetch completes with a status outside 2xx."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Can't load {url}: status {status_code}")


class StorageError(CrawlError):
    """Raised when page content cannot be written to storage."""

    def __init__(self, path: str, original: Exception):
        self.path = path
        self.original = original
        super().__init__(f"Failed to write {path}: {original}")


class UrlResolutionError(CrawlError):
    """Raised when a relative link cannot be resolved against its page URL."""

    def __init__(self, base_url: str, link: str, original: Exception):
        self.base_url = base_url
        self.link = link
        self.original = original
        super().__init__(f"Cannot resolve {link!r} against {base_url}: {original}")
