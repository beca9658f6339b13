import pytest

from gnews_decoder import exceptions
from gnews_decoder.exceptions import DecoderError
from gnews_decoder.models import DecodeFailure, ErrorKind

ERROR_CLASSES = [
    (exceptions.InvalidUrlFormatError, ErrorKind.INVALID_URL_FORMAT),
    (exceptions.MissingDataAttributesError, ErrorKind.MISSING_DATA_ATTRIBUTES),
    (exceptions.UnexpectedFetchError, ErrorKind.UNEXPECTED_FETCH_ERROR),
    (exceptions.HttpError, ErrorKind.HTTP_ERROR),
    (exceptions.RequestFailedError, ErrorKind.REQUEST_FAILED),
    (exceptions.ResponseTooShortError, ErrorKind.RESPONSE_TOO_SHORT),
    (exceptions.MissingResponseDataArrayError, ErrorKind.MISSING_RESPONSE_DATA_ARRAY),
    (exceptions.ResponseArrayTooShortError, ErrorKind.RESPONSE_ARRAY_TOO_SHORT),
    (exceptions.ParsingFailedError, ErrorKind.PARSING_FAILED),
    (exceptions.InvalidParameterFormatError, ErrorKind.INVALID_PARAMETER_FORMAT),
]


def test_base_error_has_no_kind():
    assert not hasattr(DecoderError, "kind")


@pytest.mark.parametrize("error_cls, kind", ERROR_CLASSES)
def test_each_error_maps_to_its_kind(error_cls, kind):
    failure = DecodeFailure.from_error(error_cls("boom"))

    assert failure.kind is kind
    assert failure.message == "boom"
