"""Crawl result data model."""
from typing import NamedTuple


class CrawlResult(NamedTuple):
    """Outcome of one crawl branch, or of a whole run once combined.

    Each recursive step returns one of these and its caller folds them
    together, so a failed branch is reported rather than unwound.
    """
    pages_fetched: int = 0
    """Number of pages fetched with a success status"""

    pages_saved: int = 0
    """Number of fetched pages written to storage"""

    pages_failed: int = 0
    """Number of pages whose fetch or traversal failed"""

    def combine(self, other: "CrawlResult") -> "CrawlResult":
        return CrawlResult(
            pages_fetched=self.pages_fetched + other.pages_fetched,
            pages_saved=self.pages_saved + other.pages_saved,
            pages_failed=self.pages_failed + other.pages_failed,
        )
