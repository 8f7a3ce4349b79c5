# sitemap_crawl/config.py
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

from sitemap_crawl.fetch import DEFAULT_HEADERS

DEFAULT_URL = "https://golang.org"
# repo root / config / crawler.yaml
BUNDLED_CONFIG = Path(__file__).resolve().parents[1] / "config" / "crawler.yaml"


@dataclass
class CrawlConfig:
    url: str = DEFAULT_URL
    headers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    timeout: Optional[float] = None
    verbose: bool = False

    @classmethod
    def from_dict(cls, data):
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"config must be a mapping, got {type(data).__name__}")

        cfg = cls()
        if data.get("url"):
            cfg.url = str(data["url"])

        headers = data.get("headers") or {}
        if not isinstance(headers, dict):
            raise ValueError("headers must be a mapping")
        # yaml headers override the built-in ones key by key
        cfg.headers.update({str(k): str(v) for k, v in headers.items()})

        if data.get("timeout") is not None:
            cfg.timeout = float(data["timeout"])
        cfg.verbose = bool(data.get("verbose", False))
        return cfg

    @classmethod
    def from_yaml(cls, path):
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"{path}: {e}") from e
        return cls.from_dict(data)


def load_config(path=None) -> CrawlConfig:
    """Resolve settings: YAML file, then environment on top.

    The file is *path*, else $SITEMAP_CONFIG, else the bundled
    config/crawler.yaml when it exists. $SITEMAP_ROOT_URL beats the
    file's url. CLI flags are applied by the caller.
    """
    path = path or os.getenv("SITEMAP_CONFIG")
    if path:
        cfg = CrawlConfig.from_yaml(path)
    elif BUNDLED_CONFIG.exists():
        cfg = CrawlConfig.from_yaml(BUNDLED_CONFIG)
    else:
        cfg = CrawlConfig()

    env_url = os.getenv("SITEMAP_ROOT_URL")
    if env_url:
        cfg.url = env_url
    return cfg
