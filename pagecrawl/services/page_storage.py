from __future__ import annotations

import logging
import os
import re
from typing import Protocol

from pagecrawl.exceptions import StorageError

logger = logging.getLogger(__name__)

# Anything but word characters, hyphen and period becomes "_".
_UNSAFE_FILENAME_CHARS = re.compile(r"[^\w\-.]")


def page_filename(url: str) -> str:
    """Return the file name a page fetched from `url` is stored under.

    Distinct URLs that differ only in replaced characters share a name;
    the later write wins.
    """
    return _UNSAFE_FILENAME_CHARS.sub("_", url) + ".html"


class PageStorage(Protocol):
    def write_blob(self, destination_dir: str, filename: str, content: str) -> str: ...


class FilePageStorage:
    """Writes page bodies as UTF-8 text files, creating the directory on demand."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def write_blob(self, destination_dir: str, filename: str, content: str) -> str:
        """Write `content` to `destination_dir/filename` and return the full path."""
        full_path = os.path.join(destination_dir, filename)
        try:
            os.makedirs(destination_dir, exist_ok=True)
            with open(full_path, "w", encoding=self.encoding) as f:
                f.write(content or "")
        except OSError as e:
            raise StorageError(full_path, e) from e
        logger.debug("Wrote %d chars to %s", len(content or ""), full_path)
        return full_path
