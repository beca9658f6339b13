import pytest

from gnews_decoder.identifier import extract_article_id


def test_rss_url_with_query_string():
    assert extract_article_id("https://news.google.com/rss/articles/ABCDEF?oc=5") == "ABCDEF"


def test_articles_url():
    assert extract_article_id("https://news.google.com/articles/CBMiXkFV?hl=en-US&gl=US") == "CBMiXkFV"


def test_read_url_not_accepted():
    assert extract_article_id("https://news.google.com/read/CBMiXkFV") is None


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/rss/articles/ABCDEF",
        "https://news.google.co.uk/rss/articles/ABCDEF",
        "https://news.google.com/topics/ABCDEF",
        "https://news.google.com/ABCDEF",
        "https://news.google.com/rss/articles/",
        "not a url",
        "",
    ],
)
def test_rejects_non_article_urls(url):
    assert extract_article_id(url) is None
