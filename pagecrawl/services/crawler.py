import logging
from typing import Optional

from pagecrawl.domain.config import CrawlConfig
from pagecrawl.domain.crawl_context import CrawlContext
from pagecrawl.domain.crawl_result import CrawlResult
from pagecrawl.exceptions import ConfigError, HttpFetchError, InvalidInputError, NonSuccessStatusError
from pagecrawl.services.crawl_policy import CrawlPolicy
from pagecrawl.services.fetcher import Fetcher
from pagecrawl.services.link_processor import LinkProcessor
from pagecrawl.services.page_storage import PageStorage, page_filename

logger = logging.getLogger(__name__)


class Crawler:
    """Fetches a page, saves it, and recursively follows its links depth-first.

    The crawler owns the traversal: depth budget, per-page link cap and the
    visited set. Network and disk access go through the injected `fetcher`
    and `storage`. Every recursive step returns a `CrawlResult`; failures
    inside a branch are logged and counted, never raised past the link loop
    that started the branch.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        storage: PageStorage,
        link_processor: Optional[LinkProcessor] = None,
        crawl_policy: Optional[CrawlPolicy] = None,
        config: Optional[CrawlConfig] = None,
    ):
        self.fetcher = fetcher
        self.storage = storage
        self.link_processor = link_processor or LinkProcessor()
        self.crawl_policy = crawl_policy or CrawlPolicy()
        self.config = config

    def configure(self, output_destination: str, max_links_per_page: int) -> CrawlConfig:
        """Set where pages are written and how many links per page are followed."""
        self.config = CrawlConfig(
            output_destination=output_destination,
            max_links_per_page=max_links_per_page,
        )
        return self.config

    def _require_config(self, context: Optional[CrawlContext] = None) -> CrawlConfig:
        config = context.config if context is not None else self.config
        if config is None:
            raise ConfigError("crawler is not configured; call configure() first")
        return config

    def crawl(self, seed_url: str, max_depth: int) -> CrawlResult:
        """Run one crawl from `seed_url`, following links `max_depth` levels deep.

        Each call starts with an empty visited set. Raises `ConfigError` if the
        crawler was never configured and `InvalidInputError` for an empty seed;
        everything that goes wrong below the seed is logged and counted.
        """
        if self.crawl_policy.should_skip_due_to_depth(max_depth):
            return CrawlResult()
        config = self._require_config()
        if not seed_url:
            raise InvalidInputError("seed_url is required")

        context = CrawlContext(config)
        logger.info(
            "Starting crawl from %s (depth=%s, max_links_per_page=%s, out=%s)",
            seed_url,
            max_depth,
            config.max_links_per_page,
            config.output_destination,
        )
        result = self.crawl_from(seed_url, max_depth, context)
        logger.info(
            "Crawl from %s done: fetched=%s saved=%s failed=%s",
            seed_url,
            result.pages_fetched,
            result.pages_saved,
            result.pages_failed,
        )
        return result

    def crawl_from(self, url: str, depth: int, context: CrawlContext) -> CrawlResult:
        if self.crawl_policy.should_skip_due_to_depth(depth):
            return CrawlResult()
        config = self._require_config(context)
        if not url:
            raise InvalidInputError("url is required")
        # Marked before fetching so a failed URL is not retried in this run.
        if self.crawl_policy.should_skip_due_to_visited(url, context):
            return CrawlResult()

        try:
            body = self.fetch_page(url)
        except (HttpFetchError, NonSuccessStatusError) as e:
            logger.warning("%s", e)
            return CrawlResult(pages_failed=1)
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            return CrawlResult(pages_failed=1)

        saved = self.store_page(url, body, config)
        result = CrawlResult(pages_fetched=1, pages_saved=1 if saved else 0)
        return result.combine(self.process_links(url, body, depth, context))

    def fetch_page(self, url: str) -> str:
        """Fetch `url` and return its body; raises on transport failure or non-2xx status."""
        response = self.fetcher.fetch(url)
        if not response.ok:
            raise NonSuccessStatusError(url, response.status_code)
        logger.info("Fetched %s -> status %s", url, response.status_code)
        return response.text or ""

    def store_page(self, url: str, body: str, config: CrawlConfig) -> bool:
        """Persist `body` under the file name derived from `url`; False if the write failed."""
        try:
            path = self.storage.write_blob(config.output_destination, page_filename(url), body)
        except Exception as e:
            logger.error("Storage error while saving %s: %s", url, e)
            return False
        logger.info("Saved %s -> %s", url, path)
        return True

    def process_links(self, url: str, body: str, depth: int, context: CrawlContext) -> CrawlResult:
        """Descend into the links of a fetched page, one subtree at a time."""
        result = CrawlResult()

        def cb(link_url):
            nonlocal result
            try:
                child = self.crawl_from(link_url, depth - 1, context)
            except Exception as e:
                logger.error("Failed to crawl %s: %s", link_url, e)
                child = CrawlResult(pages_failed=1)
            result = result.combine(child)

        self.link_processor.process(url, body, context.config.max_links_per_page, crawl_callback=cb)
        return result
