"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from pagecrawl import config as env
from pagecrawl.services.crawl_policy import CrawlPolicy
from pagecrawl.services.crawl_request_loader import CrawlRequestLoader
from pagecrawl.services.crawler import Crawler
from pagecrawl.services.http_service import HttpService
from pagecrawl.services.link_extractor import LinkExtractor
from pagecrawl.services.link_processor import LinkProcessor
from pagecrawl.services.page_storage import FilePageStorage


# Environment variables used by the container (read via `pagecrawl.config` helpers).
#
# USER_AGENT (str, default: "PageCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for outbound HTTP requests.
#
# The CLI defaults (PAGECRAWL_SEED_URL, PAGECRAWL_DEPTH, PAGECRAWL_MAX_LINKS,
# PAGECRAWL_OUTPUT_DIR, LOG_LEVEL) are read by `run.py` directly.
ENV = {
    "USER_AGENT": env.USER_AGENT,
    "HTTP_TIMEOUT": env.HTTP_TIMEOUT,
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for PageCrawl."""

    config = providers.Configuration(default=ENV)

    page_fetcher = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    page_storage = providers.Singleton(
        FilePageStorage
    )

    link_extractor = providers.Singleton(
        LinkExtractor
    )

    link_processor = providers.Singleton(
        LinkProcessor,
        link_extractor=link_extractor,
    )

    crawl_policy = providers.Singleton(
        CrawlPolicy
    )

    crawl_request_loader = providers.Singleton(
        CrawlRequestLoader
    )

    # Factory: each crawler carries its own configuration.
    crawler = providers.Factory(
        Crawler,
        fetcher=page_fetcher,
        storage=page_storage,
        link_processor=link_processor,
        crawl_policy=crawl_policy,
    )
