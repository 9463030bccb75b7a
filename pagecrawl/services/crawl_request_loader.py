import os

import yaml

from pagecrawl.domain.crawl_request import CrawlRequest
from pagecrawl.exceptions import ConfigError


class CrawlRequestLoader:
    """Reads a crawl request from a YAML file.

    Recognised keys are `seed_url`, `depth`, `max_links_per_page` and
    `output_dir`; any key left out keeps the value from `defaults`.
    """

    # Lowest accepted value for numeric keys; smaller values are raised to it.
    MINIMUMS = {"max_depth": 0, "max_links_per_page": 1}

    KEYS = {
        "seed_url": "seed_url",
        "depth": "max_depth",
        "max_links_per_page": "max_links_per_page",
        "output_dir": "output_destination",
    }

    def load_yaml_dict(self, path: str) -> dict:
        if not os.path.isfile(path):
            raise ConfigError(f"config file {path!r} not found")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML in {path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"top level of {path} must be a mapping, got {type(data).__name__}")
        return data

    def parse(self, data: dict, defaults: CrawlRequest) -> CrawlRequest:
        unknown = set(data) - set(self.KEYS)
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(sorted(unknown))}")
        overrides = {}
        for key, field in self.KEYS.items():
            if key not in data or data[key] is None:
                continue
            value = data[key]
            if field in self.MINIMUMS:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ConfigError(f"{key} must be an integer, got {value!r}")
                value = max(self.MINIMUMS[field], value)
            else:
                value = str(value)
            overrides[field] = value
        return defaults._replace(**overrides)

    def load(self, path: str, defaults: CrawlRequest) -> CrawlRequest:
        return self.parse(self.load_yaml_dict(path), defaults)
