import logging

from pagecrawl.domain.crawl_context import CrawlContext

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl decision rules: depth limits and single visits per run.

    Separates policy decisions from crawl orchestration logic.
    """

    def should_skip_due_to_depth(self, depth: int) -> bool:
        """Check if a branch ends here because the depth budget is used up."""
        if depth <= 0:
            logger.debug("Skipping (max depth reached) at depth %s", depth)
            return True
        return False

    def should_skip_due_to_visited(self, url: str, context: CrawlContext) -> bool:
        """Claim `url` for this run; return True if it was already claimed."""
        if not context.mark_if_new(url):
            logger.debug("Skipping (visited) %s", url)
            return True
        return False
