import os
import logging
from pathlib import Path

from dotenv import load_dotenv

loaded = load_dotenv()
if not loaded and Path(".env").exists():
	raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except ValueError:
		logging.exception("Invalid %s: %r", name, raw)
		return default


USER_AGENT = get_str_env("USER_AGENT", "PageCrawl/0.1")
HTTP_TIMEOUT = get_int_env("HTTP_TIMEOUT", 10)
DEFAULT_SEED_URL = get_str_env("PAGECRAWL_SEED_URL", "https://dandadan.net/")
DEFAULT_DEPTH = get_int_env("PAGECRAWL_DEPTH", 2)
DEFAULT_MAX_LINKS = get_int_env("PAGECRAWL_MAX_LINKS", 5)
DEFAULT_OUTPUT_DIR = get_str_env("PAGECRAWL_OUTPUT_DIR", ".")
LOG_LEVEL = get_str_env("LOG_LEVEL", "INFO")
