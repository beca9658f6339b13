"""Fetching the per-article signing parameters from the Google News article page."""

import requests
from bs4 import BeautifulSoup

from .exceptions import DecoderError, MissingDataAttributesError, UnexpectedFetchError
from .logger import get_logger
from .models import DecodeFailure, DecodingParams, Diagnostic

logger = get_logger(__name__)

ARTICLE_URL = "https://news.google.com/articles/{article_id}"

# Tied to the current markup of the article page.
SIGNING_ELEMENT_SELECTOR = "c-wiz > div[jscontroller]"
SIGNATURE_ATTR = "data-n-a-sg"
TIMESTAMP_ATTR = "data-n-a-ts"


def build_article_url(article_id: str) -> str:
    """
    Build the article page URL that carries the signing attributes.

    Args:
        article_id: Identifier taken from the Google News URL

    Returns:
        Article page URL
    """
    return ARTICLE_URL.format(article_id=article_id)


def find_signing_attributes(html: str) -> tuple[str, str]:
    """
    Locate the signing element in an article page and read its attributes.

    Missing attributes come back as empty strings.

    Args:
        html: Article page HTML

    Returns:
        Tuple of (signature, timestamp)

    Raises:
        MissingDataAttributesError: If the page has no signing element
    """
    soup = BeautifulSoup(html, "html.parser")
    element = soup.select_one(SIGNING_ELEMENT_SELECTOR)
    if element is None:
        raise MissingDataAttributesError(
            "Failed to fetch data attributes from Google News with the articles URL"
        )
    return element.get(SIGNATURE_ATTR, ""), element.get(TIMESTAMP_ATTR, "")


def fetch_decoding_params(
    session: requests.Session, article_id: str, timeout: float
) -> DecodingParams | DecodeFailure:
    """
    Fetch the article page and extract signature and timestamp.

    Args:
        session: Shared HTTP session
        article_id: Identifier taken from the Google News URL
        timeout: Request timeout in seconds

    Returns:
        DecodingParams on success, DecodeFailure otherwise
    """
    url = build_article_url(article_id)
    try:
        response = session.get(url, timeout=timeout)
        if not response.ok:
            raise UnexpectedFetchError(
                f"Unexpected error in get_decoding_params: HTTP code {response.status_code}",
                diagnostic=Diagnostic(http_status=response.status_code, response_body=response.text),
            )
        signature, timestamp = find_signing_attributes(response.text)
    except DecoderError as e:
        logger.warning("Signing parameters unavailable", extra={"url": url, "error": e.message})
        return DecodeFailure.from_error(e)
    except (requests.RequestException, ValueError, TypeError) as e:
        logger.warning("Article page fetch failed", extra={"url": url, "error": str(e)})
        return DecodeFailure.from_error(UnexpectedFetchError(f"Unexpected error in get_decoding_params: {e}"))

    if not signature or not timestamp:
        logger.warning(
            "Signing attributes missing, forwarding empty values",
            extra={"url": url, "has_signature": bool(signature), "has_timestamp": bool(timestamp)},
        )
    logger.debug("Signing parameters fetched", extra={"article_id": article_id})
    return DecodingParams(signature=signature, timestamp=timestamp, article_id=article_id)
