import logging
from typing import Callable, Optional
from urllib.parse import urljoin, urlparse

from pagecrawl.exceptions import UrlResolutionError
from pagecrawl.services.link_extractor import LinkExtractor

logger = logging.getLogger(__name__)

CRAWLABLE_SCHEMES = ("http", "https")


class LinkProcessor:
    """Turns a page body into the links the crawler should descend into.

    Resolves relative links against the page URL, drops anything that is not
    http(s), and stops after `max_links` candidates. Links that fail
    resolution or the scheme filter do not count against the cap.
    """

    def __init__(self, link_extractor: Optional[LinkExtractor] = None):
        self.link_extractor = link_extractor or LinkExtractor()

    def resolve_link(self, base_url: str, link: str) -> str:
        """Return `link` as an absolute URL, resolving it against `base_url` when relative."""
        if link.lower().startswith("http"):
            return link
        try:
            return urljoin(base_url, link)
        except ValueError as e:
            raise UrlResolutionError(base_url, link, e) from e

    def is_crawlable(self, url: str) -> bool:
        try:
            return urlparse(url).scheme.lower() in CRAWLABLE_SCHEMES
        except ValueError:
            return False

    def process(self, base_url: str, html: str, max_links: int, crawl_callback: Callable[[str], None]) -> int:
        """Call `crawl_callback(url)` for up to `max_links` crawlable links found in `html`.

        Returns the number of links handed to the callback.
        """
        count = 0
        for link in self.link_extractor.extract_links(html):
            try:
                absolute = self.resolve_link(base_url, link)
            except UrlResolutionError as e:
                logger.debug("Skipping (unresolvable) %s", e)
                continue

            if not self.is_crawlable(absolute):
                logger.debug("Skipping (scheme) %s", absolute)
                continue

            count += 1
            if count > max_links:
                logger.debug("Link limit %s reached on %s", max_links, base_url)
                return max_links

            crawl_callback(absolute)
        return count
