"""Extraction of the article identifier from a Google News URL."""

from urllib.parse import urlparse

GOOGLE_NEWS_HOST = "news.google.com"
ARTICLE_PATH_PARENTS = ("articles", "rss")


def extract_article_id(url: str) -> str | None:
    """
    Return the opaque article identifier from a Google News URL.

    ``https://news.google.com/rss/articles/<id>?oc=5`` yields ``<id>``.

    Args:
        url: Google News article or RSS URL

    Returns:
        The last path segment, or None if the URL is not a Google News article URL
    """
    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except (ValueError, TypeError, AttributeError):
        return None

    if host != GOOGLE_NEWS_HOST:
        return None

    path = parsed.path.split("/")
    if len(path) > 1 and path[-2] in ARTICLE_PATH_PARENTS:
        return path[-1] or None
    return None
