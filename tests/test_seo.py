"""Unit tests for meta_links."""

from pagemeta import calculate, meta_links


def test_prev_then_next():
    result = calculate(page=2, limit=10, total_items=50)
    links = meta_links("https://x/y", result)
    assert [(link.relation, link.url) for link in links] == [
        ("prev", "https://x/y?page=1"),
        ("next", "https://x/y?page=3"),
    ]


def test_first_page_only_next():
    links = meta_links("/items", calculate(page=1, limit=10, total_items=50))
    assert [(link.relation, link.url) for link in links] == [("next", "/items?page=2")]


def test_last_page_only_prev():
    links = meta_links("/items", calculate(page=5, limit=10, total_items=50))
    assert [(link.relation, link.url) for link in links] == [("prev", "/items?page=4")]


def test_single_page_no_links():
    assert meta_links("/items", calculate(total_items=3)) == []


def test_base_url_used_verbatim():
    links = meta_links("/items?sort=name", calculate(page=2, limit=10, total_items=30))
    assert links[0].url == "/items?sort=name?page=1"
