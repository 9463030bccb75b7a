import argparse
import logging
import sys
from typing import Optional

from pagecrawl import config
from pagecrawl.container import Container
from pagecrawl.domain import CrawlRequest
from pagecrawl.exceptions import ConfigError, InvalidInputError

logger = logging.getLogger(__name__)


def _to_int(raw: Optional[str], default: int, minimum: int) -> int:
    """Parse a positional number leniently: bad input keeps the default, low values are clamped."""
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric argument %r; using %s", raw, default)
        return default
    return max(minimum, value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagecrawl",
        description="Download a page and the pages it links to, up to a given depth.",
    )
    parser.add_argument("seed_url", nargs="?", help=f"Start URL (default: {config.DEFAULT_SEED_URL})")
    parser.add_argument("depth", nargs="?", help=f"Levels to follow (default: {config.DEFAULT_DEPTH})")
    parser.add_argument("max_links", nargs="?", help=f"Links followed per page (default: {config.DEFAULT_MAX_LINKS})")
    parser.add_argument("output", nargs="?", help=f"Folder for saved pages (default: {config.DEFAULT_OUTPUT_DIR})")
    parser.add_argument("--config", dest="config_path", help="YAML file with seed_url/depth/max_links_per_page/output_dir")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help=f"Logging level (default: {config.LOG_LEVEL})")
    return parser


def resolve_request(args: argparse.Namespace, container: Container) -> CrawlRequest:
    """Combine environment defaults, an optional YAML file and positional arguments, in that order."""
    request = CrawlRequest(
        seed_url=config.DEFAULT_SEED_URL,
        max_depth=max(0, config.DEFAULT_DEPTH),
        max_links_per_page=max(1, config.DEFAULT_MAX_LINKS),
        output_destination=config.DEFAULT_OUTPUT_DIR,
    )
    if args.config_path:
        request = container.crawl_request_loader().load(args.config_path, request)
    return CrawlRequest(
        seed_url=args.seed_url if args.seed_url is not None else request.seed_url,
        max_depth=_to_int(args.depth, request.max_depth, 0),
        max_links_per_page=_to_int(args.max_links, request.max_links_per_page, 1),
        output_destination=args.output if args.output is not None else request.output_destination,
    )


def main(argv=None, container: Optional[Container] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.getLevelName(str(args.log_level).upper())
    known_level = isinstance(level, int)
    logging.basicConfig(
        level=level if known_level else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not known_level:
        logger.warning("Unknown log level %r; using INFO", args.log_level)
    container = container or Container()

    try:
        request = resolve_request(args, container)
        crawler = container.crawler()
        crawler.configure(request.output_destination, request.max_links_per_page)
        print(
            f"Starting crawl: {request.seed_url} (depth={request.max_depth}, "
            f"maxLinksPerPage={request.max_links_per_page}, out={request.output_destination})"
        )
        result = crawler.crawl(request.seed_url, request.max_depth)
    except (ConfigError, InvalidInputError) as e:
        logger.error("Cannot start crawl: %s", e)
        return 2

    print(f"Pages fetched: {result.pages_fetched}, saved: {result.pages_saved}, failed: {result.pages_failed}")
    print("Crawl finished.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
