import json
from urllib.parse import parse_qs

import pytest

from gnews_decoder.exceptions import InvalidParameterFormatError
from gnews_decoder.models import DecodingParams
from gnews_decoder.payload import CONTENT_TYPE, build_headers, build_payload, build_request_body

PARAMS = DecodingParams(signature="SIG1", timestamp="12345", article_id="ABC")

EXPECTED_INNER = (
    '["garturlreq",[["X","X",["X","X"],null,null,1,1,"US:en",null,1,null,null,null,null,null,0,1],'
    '"X","X",1,[1,1,1],1,1,null,0,0,null,0],"ABC",12345,"SIG1"]'
)


def test_payload_embeds_escaped_request():
    payload = build_payload(PARAMS)

    assert payload == '["Fbv4je", "' + EXPECTED_INNER.replace('"', '\\"') + '"]'
    method, inner = json.loads(payload)
    assert method == "Fbv4je"
    assert inner == EXPECTED_INNER
    assert json.loads(inner)[2:] == ["ABC", 12345, "SIG1"]


def test_payload_is_deterministic():
    same = DecodingParams(signature="SIG1", timestamp="12345", article_id="ABC")
    assert build_payload(PARAMS) == build_payload(same)
    assert build_request_body(build_payload(PARAMS)) == build_request_body(build_payload(same))


def test_request_body_is_form_encoded():
    payload = build_payload(PARAMS)
    body = build_request_body(payload)

    assert body.startswith("f.req=")
    assert " " not in body and '"' not in body
    assert parse_qs(body)["f.req"] == [f"[[{payload}]]"]


def test_empty_signing_values_are_forwarded():
    payload = build_payload(DecodingParams(signature="", timestamp="", article_id="ABC"))
    assert '\\"ABC\\",,\\"\\"]' in payload


def test_rejects_non_string_fields():
    with pytest.raises(InvalidParameterFormatError):
        build_payload(DecodingParams(signature="SIG1", timestamp=12345, article_id="ABC"))


def test_headers():
    headers = build_headers("Mozilla/5.0 test")
    assert headers == {"Content-Type": CONTENT_TYPE, "User-Agent": "Mozilla/5.0 test"}
