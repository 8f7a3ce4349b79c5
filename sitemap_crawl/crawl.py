# sitemap_crawl/crawl.py
import sys
from collections import deque

from sitemap_crawl.fetch import Fetcher, FetchError
from sitemap_crawl.links import extract_links, parse_document
from sitemap_crawl.urls import URLParseError, canonicalize, parse_url, should_follow


def eprint(*a, **k):
    print(*a, file=sys.stderr, **k)


class CrawlSession:
    """State of one crawl: the root, the visited set and the work queue.

    Dedupe is by exact URL string, and a URL is only marked visited after
    its own links were fetched and queued.
    """

    def __init__(self, root_url, fetcher, out=print, warn=eprint,
                 log=lambda *a, **k: None):
        self.root_url = root_url
        self.root = parse_url(root_url)  # bad root is fatal, nothing fetched yet
        self.fetcher = fetcher
        self.out, self.warn, self.log = out, warn, log
        self.visited = {root_url}
        self.queue = deque()
        self.pages = []

    def links_from(self, url):
        try:
            resp = self.fetcher.get(url)
        except FetchError as e:
            self.warn(f"Unsuccessful GET for: {url}")
            self.log(str(e))
            return []

        found = []
        with resp:
            # An unparseable page aborts the whole crawl, unlike a failed GET.
            # Could be downgraded to skipping just this page.
            doc = parse_document(resp.content)
            for link in extract_links(doc):
                try:
                    cand = parse_url(link.href)
                except URLParseError as e:
                    self.log(f"discard href on {url}: {e}")
                    continue
                if should_follow(cand, self.root):
                    found.append(canonicalize(cand, self.root))
        self.log(f"{url}: {len(found)} links")
        return found

    def run(self):
        self.out(f"Starting with root page: {self.root_url}")
        self.queue.extend(self.links_from(self.root_url))

        while self.queue:
            u = self.queue[0]
            if u not in self.visited:
                self.out(f"Visiting URL: {u}")
                self.queue.extend(self.links_from(u))
                self.visited.add(u)
                self.pages.append(u)
            self.queue.popleft()
        return self.pages


def crawl(root_url, fetcher=None, out=print, warn=eprint, log=lambda *a, **k: None):
    """Crawl same-domain pages reachable from *root_url*.

    Returns the visited URLs in the order they were visited (root excluded).
    Raises URLParseError for a bad root and HTMLParseError for a page that
    will not parse; failed GETs are reported through *warn* and skipped.
    """
    own = fetcher is None
    if own:
        fetcher = Fetcher()
    try:
        return CrawlSession(root_url, fetcher, out=out, warn=warn, log=log).run()
    finally:
        if own:
            fetcher.close()
