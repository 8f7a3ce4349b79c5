from unittest.mock import patch

import pytest

from sitemap_crawl.links import HTMLParseError, Link, extract_links, parse_document


def _links(html):
    return list(extract_links(parse_document(html)))


def test_document_order():
    html = """
    <div><a href="/1">One</a>
      <p>text <a href="/2">Two</a></p>
    </div>
    <a href="https://example.com/3">Three</a>
    """
    assert [l.href for l in _links(html)] == ["/1", "/2", "https://example.com/3"]


def test_text_is_whitespace_collapsed():
    html = '<a href="/a">  Hello \n\t <b>big</b>   world </a>'
    assert _links(html) == [Link("/a", "Hello big world")]


def test_text_across_nodes_has_no_added_space():
    assert _links('<a href="/a">Hello<b>World</b></a>')[0].text == "HelloWorld"


def test_comments_are_not_text():
    assert _links('<a href="/c">A<!-- hidden -->B</a>')[0].text == "AB"


def test_anchor_without_href_is_skipped():
    html = '<a name="top">Top</a><a href="/x">X</a><link href="/style.css">'
    assert _links(html) == [Link("/x", "X")]


def test_href_kept_raw():
    links = _links('<a href="  ../up?q=1#frag ">Up</a><a href="">Empty</a>')
    assert links[0].href == "  ../up?q=1#frag "
    assert links[1] == Link("", "Empty")


def test_uppercase_tag_names():
    assert _links('<A HREF="/shout">Loud</A>') == [Link("/shout", "Loud")]


def test_extraction_is_lazy_and_single_use():
    gen = extract_links(parse_document('<a href="/1">1</a><a href="/2">2</a>'))
    assert iter(gen) is gen
    assert next(gen).href == "/1"
    assert [l.href for l in gen] == ["/2"]
    assert list(gen) == []


def test_anchor_node_itself_is_included():
    doc = parse_document('<a href="/self"><span>Me</span></a>')
    assert list(extract_links(doc.a)) == [Link("/self", "Me")]


def test_malformed_markup_yields_what_parses():
    links = _links('<p><a href="/ok">ok</a><div><a href="/unclosed">open')
    assert [l.href for l in links] == ["/ok", "/unclosed"]


def test_parse_document_accepts_bytes():
    doc = parse_document(b'<html><body><a href="/b">Bytes</a></body></html>')
    assert list(extract_links(doc)) == [Link("/b", "Bytes")]


def test_parse_failure_raises_html_parse_error():
    with patch("sitemap_crawl.links.BeautifulSoup", side_effect=RuntimeError("boom")):
        with pytest.raises(HTMLParseError):
            parse_document(b"<html>")


def test_first_duplicate_href_wins():
    assert _links('<a href="/first" href="/second">Dup</a>') == [Link("/first", "Dup")]


def test_nested_anchors_stay_nested():
    links = _links('<a href="/o">one<a href="/t">two</a></a>')
    assert links == [Link("/o", "onetwo"), Link("/t", "two")]
