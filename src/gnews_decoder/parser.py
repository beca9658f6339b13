"""Parsing of batchexecute responses.

The response is an anti-hijacking prefix and a JSON envelope whose payload
entry holds a second, JSON-encoded array::

    )]}'

    [["wrb.fr","Fbv4je","[\\"garturlres\\",\\"https://...\\",1]",...],["di",42],["af.httprm",42,...]]
"""

import json

from .exceptions import (
    DecoderError,
    MissingResponseDataArrayError,
    ParsingFailedError,
    ResponseArrayTooShortError,
    ResponseTooShortError,
)
from .logger import get_logger
from .models import DecodeFailure, DecodeResult, DecodeSuccess

logger = get_logger(__name__)

ANTI_HIJACKING_PREFIX = ")]}'"
ENVELOPE_TRAILER_LENGTH = 2


def _strip_envelope(body: str) -> str:
    parts = body.split("\n\n", 1)
    if len(parts) < 2:
        raise ResponseTooShortError("Response too short")
    return parts[1].removeprefix(ANTI_HIJACKING_PREFIX).strip()


def _extract_decoded_url(body: str) -> str:
    main_array = json.loads(_strip_envelope(body))
    if not isinstance(main_array, list):
        raise ParsingFailedError("Parsing failed: response is not a JSON array")

    entries = main_array[:-ENVELOPE_TRAILER_LENGTH]
    response_data = entries[0] if entries else None
    if not isinstance(response_data, list):
        raise MissingResponseDataArrayError("Missing response data array")
    if len(response_data) < 3:
        raise ResponseArrayTooShortError("Response array too short")

    inner_json = response_data[2]
    if not isinstance(inner_json, str):
        raise ParsingFailedError("Parsing failed: payload entry is not a string")
    url_array = json.loads(inner_json)
    if not isinstance(url_array, list):
        raise ParsingFailedError("Parsing failed: payload is not a JSON array")
    if len(url_array) < 2:
        raise ResponseArrayTooShortError("URL array too short")

    decoded_url = url_array[1]
    if not isinstance(decoded_url, str):
        raise ParsingFailedError("Parsing failed: decoded URL is not a string")
    return decoded_url


def parse_response(body: str) -> DecodeResult:
    """
    Recover the publisher URL from a batchexecute response body.

    Args:
        body: Raw response text

    Returns:
        DecodeSuccess with the URL, or DecodeFailure describing the malformed stage
    """
    try:
        return DecodeSuccess(decoded_url=_extract_decoded_url(body))
    except DecoderError as e:
        logger.warning("Malformed batchexecute response", extra={"error": e.message})
        return DecodeFailure.from_error(e)
    except (json.JSONDecodeError, ValueError, TypeError, AttributeError, RecursionError) as e:
        logger.warning("Batchexecute response parsing failed", extra={"error": str(e)})
        return DecodeFailure.from_error(ParsingFailedError(f"Parsing failed: {e}"))
