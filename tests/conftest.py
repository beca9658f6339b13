"""Shared fixtures for decoder tests."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from gnews_decoder import ClientConfig, GoogleNewsDecoder

ARTICLE_ID = "CBMiXkFVX3lxTE1qRWRxaFBYVFJvX0pMMWpWOThkVDVSS1cwZ0Q4Tl96VkZIdFBTUnlTMHd4bkF3eDRhRGtFMkhaa2hfbzE3UU5Ba0ZxdTYxWGJpeGhoNFpQRDNkbFdaNGc"
RSS_URL = f"https://news.google.com/rss/articles/{ARTICLE_ID}?oc=5"
DECODED_URL = "https://example.com/news/real-article"

ARTICLE_PAGE = """
<html>
  <body>
    <c-wiz jsrenderer="abc">
      <div jscontroller="aLI87" data-n-a-sg="SIG1" data-n-a-ts="12345" data-n-a-id="x"></div>
    </c-wiz>
  </body>
</html>
"""


def make_response(status_code: int, text: str) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


def batchexecute_body(decoded_url: str = DECODED_URL) -> str:
    envelope = [
        ["wrb.fr", "Fbv4je", json.dumps(["garturlres", decoded_url, 1]), None, None, None, "generic"],
        ["di", 12],
        ["af.httprm", 12, "-5817399946290487245", 25],
    ]
    return ")]}'\n\n" + json.dumps(envelope)


@pytest.fixture
def session():
    mock_session = MagicMock(spec=requests.Session)
    mock_session.get.return_value = make_response(200, ARTICLE_PAGE)
    mock_session.post.return_value = make_response(200, batchexecute_body())
    return mock_session


@pytest.fixture
def decoder(session):
    return GoogleNewsDecoder(ClientConfig(timeout=5), session=session)
