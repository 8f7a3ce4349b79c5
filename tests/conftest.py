import pytest

from sitemap_crawl.fetch import FetchError


class FakeResponse:
    def __init__(self, content, status_code=200):
        self.content = content
        self.status_code = status_code
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


class FakeFetcher:
    """pages: url -> html string, or an exception to simulate a failed GET."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []
        self.responses = []
        self.closed = False

    def get(self, url):
        self.calls.append(url)
        body = self.pages.get(url, "")
        if isinstance(body, Exception):
            raise FetchError(url, body)
        resp = FakeResponse(body.encode("utf-8"))
        self.responses.append(resp)
        return resp

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


@pytest.fixture
def make_fetcher():
    return FakeFetcher
