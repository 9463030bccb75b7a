from typing import NamedTuple


class CrawlRequest(NamedTuple):
    """Everything needed to start one run, as given on the command line or in YAML."""
    seed_url: str
    max_depth: int
    max_links_per_page: int
    output_destination: str
