"""Data models for the Google News URL decoder."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from .exceptions import DecoderError


class ErrorKind(str, Enum):
    """Failure categories reported by the decode pipeline."""

    INVALID_URL_FORMAT = "InvalidUrlFormat"
    MISSING_DATA_ATTRIBUTES = "MissingDataAttributes"
    UNEXPECTED_FETCH_ERROR = "UnexpectedFetchError"
    HTTP_ERROR = "HttpError"
    REQUEST_FAILED = "RequestFailed"
    RESPONSE_TOO_SHORT = "ResponseTooShort"
    MISSING_RESPONSE_DATA_ARRAY = "MissingResponseDataArray"
    RESPONSE_ARRAY_TOO_SHORT = "ResponseArrayTooShort"
    PARSING_FAILED = "ParsingFailed"
    INVALID_PARAMETER_FORMAT = "InvalidParameterFormat"


@dataclass(frozen=True)
class DecodingParams:
    """Per-article signing parameters scraped from the article page."""

    signature: str
    timestamp: str
    article_id: str


@dataclass(frozen=True)
class Diagnostic:
    """Debugging details attached to a failed HTTP exchange."""

    http_status: int | None = None
    response_body: str | None = None
    request_payload: str | None = None


@dataclass(frozen=True)
class DecodeSuccess:
    """A decoded publisher URL."""

    decoded_url: str
    ok: Literal[True] = field(default=True, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"ok": True, "decoded_url": self.decoded_url}


@dataclass(frozen=True)
class DecodeFailure:
    """A failed decode with a human-readable message."""

    message: str
    kind: ErrorKind
    diagnostic: Diagnostic | None = None
    ok: Literal[False] = field(default=False, init=False)

    @classmethod
    def from_error(cls, error: "DecoderError") -> "DecodeFailure":
        """
        Build a failure result from an internal decoder exception.

        Args:
            error: Raised pipeline error

        Returns:
            DecodeFailure carrying the error's kind, message and diagnostic
        """
        return cls(message=error.message, kind=error.kind, diagnostic=error.diagnostic)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"ok": False, "message": self.message, "kind": self.kind.value}
        if self.diagnostic is not None:
            result["diagnostic"] = asdict(self.diagnostic)
        return result


DecodeResult = DecodeSuccess | DecodeFailure
