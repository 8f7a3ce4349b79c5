# sitemap_crawl/fetch.py
import requests

# Pretend to be Chrome so we don't get weird placeholder content
DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


class FetchError(RuntimeError):
    def __init__(self, url, reason):
        super().__init__(f"GET {url} failed: {reason}")
        self.url = url


class Fetcher:
    """One requests.Session shared by every GET of a crawl.

    Only transport failures raise; a 404 or 500 comes back as a normal
    response and gets parsed like any other page.
    """

    def __init__(self, headers=None, timeout=None, session=None):
        self.session = session or requests.Session()
        self.session.headers.update(DEFAULT_HEADERS if headers is None else headers)
        self.timeout = timeout

    def get(self, url: str) -> requests.Response:
        try:
            return self.session.get(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            raise FetchError(url, e) from e

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
