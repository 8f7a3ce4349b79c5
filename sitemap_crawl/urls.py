# sitemap_crawl/urls.py
import re
import string
import urllib.parse

_CTL = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_PORT = re.compile(r"[0-9]*")
# ASCII allowed in a host; anything >= 0x80 passes
_HOST_CHARS = set(string.ascii_letters + string.digits + "-._~!$&'()*+,;=:[]<>\"%")
# a path made only of these is already escaped and is kept byte for byte
_ESCAPED_PATH = re.compile(r"[A-Za-z0-9\-._~!$&'()*+,;=:@\[\]%/]*")
_PATH_SAFE = "$&+,/:;=@"


class URLParseError(ValueError):
    pass


def parse_url(href: str) -> urllib.parse.SplitResult:
    """Parse *href* into scheme/netloc/path/query/fragment.

    Stricter than urlsplit on its own. Rejects control characters, broken
    percent-escapes outside the query, invalid host characters, ports that
    are not all digits (no range check), and a colon in the first segment
    of a scheme-less relative path.
    """
    if _CTL.search(href):
        raise URLParseError(f"control character in {href!r}")
    try:
        p = urllib.parse.urlsplit(href)
    except ValueError as e:
        raise URLParseError(f"{href!r}: {e}") from e
    for part in (p.netloc, p.path, p.fragment):
        if _BAD_ESCAPE.search(part):
            raise URLParseError(f"invalid escape in {href!r}")

    host = host_of(p)
    if any(c < "\x80" and c not in _HOST_CHARS for c in host):
        raise URLParseError(f"invalid character in host name {host!r}")
    _, colon, port = host.rpartition("]")[2].rpartition(":")
    if colon and not _PORT.fullmatch(port):
        raise URLParseError(f"invalid port {port!r} in {href!r}")

    # older urlsplit accepts "1a:b" as scheme "1a"
    if p.scheme and p.scheme[0] not in string.ascii_letters:
        raise URLParseError(f"first path segment in {href!r} cannot contain colon")
    if not p.scheme and not p.netloc and not p.path.startswith("/"):
        if ":" in p.path.partition("/")[0]:
            raise URLParseError(f"first path segment in {href!r} cannot contain colon")
    return p


def host_of(p: urllib.parse.SplitResult) -> str:
    # netloc minus any user-info; port stays
    return p.netloc.rpartition("@")[2]


def is_opaque(p) -> bool:
    # "mailto:x@y", "javascript:void(0)": a scheme but no "//" and no rooted path
    return bool(p.scheme) and not p.netloc and p.path != "" and not p.path.startswith("/")


def escaped_path(path: str) -> str:
    if _ESCAPED_PATH.fullmatch(path):
        return path
    return urllib.parse.quote(urllib.parse.unquote(path), safe=_PATH_SAFE)


def without_www(host: str) -> str:
    # drops 4 chars whenever the host starts with "www", dot or not:
    # "wwwsite.com" -> "site.com"
    if host.startswith("www"):
        return host[4:]
    return host


def domains_match(a: str, b: str) -> bool:
    return without_www(a) == without_www(b)


def should_follow(candidate, root) -> bool:
    # same-page references, even with a path attached
    if candidate.fragment != "":
        return False
    # relative / path-only reference
    if host_of(candidate) == "":
        return True
    return domains_match(host_of(root), host_of(candidate))


def canonicalize(candidate, root) -> str:
    """Put an accepted candidate on the root's scheme and host.

    Opaque references only get the scheme swapped ("mailto:a@b" ->
    "https:a@b"); the host has nowhere to go, so the later GET fails.
    Paths are percent-escaped unless already validly escaped.
    """
    query = "?" + candidate.query if candidate.query else ""
    if is_opaque(candidate):
        return f"{root.scheme}:{candidate.path}{query}"

    userinfo, at, _ = candidate.netloc.rpartition("@")
    netloc = userinfo + at + host_of(root)
    return urllib.parse.urlunsplit(
        (root.scheme, netloc, escaped_path(candidate.path), candidate.query, "")
    )
