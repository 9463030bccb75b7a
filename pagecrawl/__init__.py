"""PageCrawl: depth-limited recursive page downloader."""

__version__ = "0.1.0"
