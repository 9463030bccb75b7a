from typing import Optional

from pagecrawl.domain.config import CrawlConfig
from pagecrawl.domain.visited_tracker import VisitedTracker


class CrawlContext:
    """State owned by one crawl run and passed through every recursive step."""

    def __init__(self, config: CrawlConfig, visited_tracker: Optional[VisitedTracker] = None):
        self.config = config
        self.visited_tracker = visited_tracker or VisitedTracker()

    def mark_if_new(self, url: str) -> bool:
        return self.visited_tracker.mark_if_new(url)
