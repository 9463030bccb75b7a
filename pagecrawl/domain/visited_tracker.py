import threading


class VisitedTracker:
    """
    Tracks which URLs have been visited during a single crawl run.

    URLs compare case-insensitively. `mark_if_new` checks and records a URL
    under one lock, so two callers can never both claim the same URL even if
    sibling branches are ever fetched from several threads.
    """

    def __init__(self):
        self._visited: set[str] = set()
        self._lock = threading.Lock()

    @staticmethod
    def _key(url: str) -> str:
        return url.casefold()

    def mark_if_new(self, url: str) -> bool:
        """Mark `url` as visited; return False if it already was."""
        key = self._key(url)
        with self._lock:
            if key in self._visited:
                return False
            self._visited.add(key)
            return True
