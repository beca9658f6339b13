"""Exceptions raised inside the decode pipeline.

They never reach callers of ``GoogleNewsDecoder.decode``; each one is turned
into a ``DecodeFailure`` at the component boundary.
"""

from .models import Diagnostic, ErrorKind


class DecoderError(Exception):
    """Base class for decode pipeline errors; subclasses set ``kind``."""

    kind: ErrorKind

    def __init__(self, message: str, diagnostic: Diagnostic | None = None):
        super().__init__(message)
        self.message = message
        self.diagnostic = diagnostic


class InvalidUrlFormatError(DecoderError):
    """Input is not a Google News article or RSS URL."""

    kind = ErrorKind.INVALID_URL_FORMAT


class MissingDataAttributesError(DecoderError):
    """Article page lacks the element carrying the signing attributes."""

    kind = ErrorKind.MISSING_DATA_ATTRIBUTES


class UnexpectedFetchError(DecoderError):
    """Network or parse failure while fetching the signing parameters."""

    kind = ErrorKind.UNEXPECTED_FETCH_ERROR


class HttpError(DecoderError):
    """Batch RPC endpoint answered with a non-2xx status."""

    kind = ErrorKind.HTTP_ERROR


class RequestFailedError(DecoderError):
    """Batch RPC request could not be sent or completed."""

    kind = ErrorKind.REQUEST_FAILED


class ResponseTooShortError(DecoderError):
    kind = ErrorKind.RESPONSE_TOO_SHORT


class MissingResponseDataArrayError(DecoderError):
    kind = ErrorKind.MISSING_RESPONSE_DATA_ARRAY


class ResponseArrayTooShortError(DecoderError):
    kind = ErrorKind.RESPONSE_ARRAY_TOO_SHORT


class ParsingFailedError(DecoderError):
    kind = ErrorKind.PARSING_FAILED


class InvalidParameterFormatError(DecoderError):
    """Signing parameters handed to the request builder are malformed."""

    kind = ErrorKind.INVALID_PARAMETER_FORMAT
