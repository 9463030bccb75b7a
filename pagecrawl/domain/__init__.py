"""Domain objects for PageCrawl - explicit re-exports to satisfy linters."""
from .config import CrawlConfig as CrawlConfig
from .crawl_context import CrawlContext as CrawlContext
from .crawl_request import CrawlRequest as CrawlRequest
from .crawl_result import CrawlResult as CrawlResult
from .http_response import HttpResponse as HttpResponse
from .visited_tracker import VisitedTracker as VisitedTracker

__all__ = ["CrawlConfig", "CrawlContext", "CrawlRequest", "CrawlResult", "HttpResponse", "VisitedTracker"]
