from __future__ import annotations

from dataclasses import dataclass

from pagecrawl.exceptions import ConfigError


@dataclass(frozen=True)
class CrawlConfig:
    """Settings shared read-only by every step of a crawl run."""

    output_destination: str
    max_links_per_page: int

    def __post_init__(self):
        if not self.output_destination:
            raise ConfigError("output_destination is required")
        # bool is an int subclass; reject it explicitly
        if isinstance(self.max_links_per_page, bool) or not isinstance(self.max_links_per_page, int):
            raise ConfigError(f"max_links_per_page must be an integer, got {self.max_links_per_page!r}")
        if self.max_links_per_page < 1:
            raise ConfigError(f"max_links_per_page must be >= 1, got {self.max_links_per_page}")
