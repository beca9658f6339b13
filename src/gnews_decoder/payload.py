"""Construction of the batchexecute request that resolves an article URL."""

from urllib.parse import quote_plus

from .exceptions import InvalidParameterFormatError
from .models import DecodingParams

BATCH_EXECUTE_URL = "https://news.google.com/_/DotsSplashUi/data/batchexecute"
RPC_METHOD_ID = "Fbv4je"
CONTENT_TYPE = "application/x-www-form-urlencoded;charset=UTF-8"

# Fixed request template the endpoint validates against; do not reformat.
_GARTURLREQ_TEMPLATE = (
    '["garturlreq",[["X","X",["X","X"],null,null,1,1,"US:en",null,1,null,null,null,null,null,0,1],'
    '"X","X",1,[1,1,1],1,1,null,0,0,null,0],"{article_id}",{timestamp},"{signature}"]'
)


def validate_params(params: DecodingParams) -> None:
    """Raise InvalidParameterFormatError unless every field is a string."""
    if not isinstance(params, DecodingParams):
        raise InvalidParameterFormatError("Invalid parameters format")
    for name in ("signature", "timestamp", "article_id"):
        if not isinstance(getattr(params, name), str):
            raise InvalidParameterFormatError(f"Invalid parameters format: {name} is not a string")


def build_payload(params: DecodingParams) -> str:
    """
    Build the ``["Fbv4je", "<escaped garturlreq>"]`` RPC entry.

    Values are substituted verbatim; empty signature or timestamp are
    forwarded and left for the endpoint to reject.

    Args:
        params: Signing parameters for one article

    Returns:
        Outer RPC array as text
    """
    validate_params(params)
    inner = _GARTURLREQ_TEMPLATE.format(
        article_id=params.article_id, timestamp=params.timestamp, signature=params.signature
    )
    escaped = inner.replace('"', '\\"')
    return f'["{RPC_METHOD_ID}", "{escaped}"]'


def build_request_body(payload: str) -> str:
    """Wrap the RPC entry as ``[[...]]`` and form-encode it as ``f.req``."""
    return "f.req=" + quote_plus(f"[[{payload}]]")


def build_headers(user_agent: str) -> dict[str, str]:
    """
    Build the batchexecute request headers.

    Args:
        user_agent: Browser User-Agent string

    Returns:
        Header mapping with form content type and User-Agent
    """
    return {"Content-Type": CONTENT_TYPE, "User-Agent": user_agent}
