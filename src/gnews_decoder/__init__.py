"""Google News Decoder - Resolve Google News RSS links to the original publisher URLs."""

__version__ = "0.1.0"
__license__ = "MIT"

from .config import BatchConfig, ClientConfig
from .decoder import GoogleNewsDecoder
from .models import DecodeFailure, DecodeResult, DecodeSuccess, DecodingParams, Diagnostic, ErrorKind

__all__ = [
    "BatchConfig",
    "ClientConfig",
    "DecodeFailure",
    "DecodeResult",
    "DecodeSuccess",
    "DecodingParams",
    "Diagnostic",
    "ErrorKind",
    "GoogleNewsDecoder",
]
