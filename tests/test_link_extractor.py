from mapcrawl.services.link_extractor import LinkExtractor


def test_extract_hrefs_basic():
    html = '<html><body><a href="/foo">Foo</a><a href="http://bar.com">Bar</a></body></html>'
    extractor = LinkExtractor()
    assert extractor.extract_hrefs(html) == ['/foo', 'http://bar.com']


def test_extract_hrefs_keeps_duplicates_and_raw_values():
    html = '<a href="/a/">A</a><a href="#top">Top</a><a href="/a/">A again</a><a href="">Empty</a>'
    assert LinkExtractor().extract_hrefs(html) == ['/a/', '#top', '/a/', '']


def test_extract_hrefs_ignores_anchors_without_href_and_other_tags():
    html = '<a name="x">no target</a><link href="/style.css"><img src="/i.png"><a href="/ok">ok</a>'
    assert LinkExtractor().extract_hrefs(html) == ['/ok']


def test_extract_hrefs_tolerates_broken_markup():
    html = "<div><a href='/one'>one<div><a href='/two'>two</p> /body>"
    assert LinkExtractor().extract_hrefs(html) == ['/one', '/two']


def test_extract_hrefs_empty_document():
    assert LinkExtractor().extract_hrefs('') == []
