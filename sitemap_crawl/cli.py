# sitemap_crawl/cli.py
import argparse
import sys

from sitemap_crawl.config import load_config
from sitemap_crawl.crawl import crawl, eprint
from sitemap_crawl.fetch import Fetcher
from sitemap_crawl.links import HTMLParseError
from sitemap_crawl.urls import URLParseError


def main(argv=None):
    ap = argparse.ArgumentParser("sitemap-crawl")

    ap.add_argument("-url", "--url", default=None,
                    help="URL of the root web page to build sitemap from "
                         "(default: https://golang.org).")
    ap.add_argument("--config", default=None,
                    help="YAML file with request headers / timeout.")
    ap.add_argument("--verbose", action="store_true",
                    help="Print diagnostics (discarded hrefs, link counts) to stderr.")

    args = ap.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError) as e:
        ap.error(f"bad config: {e}")

    if args.url:
        cfg.url = args.url
    if args.verbose:
        cfg.verbose = True

    log = eprint if cfg.verbose else (lambda *_, **__: None)
    log(f"timeout={cfg.timeout} headers={sorted(cfg.headers)}")

    with Fetcher(headers=cfg.headers, timeout=cfg.timeout) as fetcher:
        try:
            crawl(cfg.url, fetcher=fetcher, log=log)
        except (URLParseError, HTMLParseError) as e:
            eprint(f"fatal: {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
