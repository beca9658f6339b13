"""Configuration for the decoder client and CSV batch mode."""

from dataclasses import dataclass, field

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/129.0.0.0 Safari/537.36"
)
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """HTTP client settings shared by every decode call."""

    proxy_host: str | None = None
    proxy_port: int | None = None
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        if (self.proxy_host is None) != (self.proxy_port is None):
            raise ValueError("proxy_host and proxy_port must be set together")
        if self.proxy_port is not None and not 0 < self.proxy_port < 65536:
            raise ValueError(f"Invalid proxy port: {self.proxy_port}")
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")

    @property
    def proxy_url(self) -> str | None:
        """
        HTTP proxy URL built from host and port.

        Returns:
            ``http://host:port``, or None when no proxy is configured
        """
        if self.proxy_host is None:
            return None
        return f"http://{self.proxy_host}:{self.proxy_port}"


@dataclass(frozen=True)
class BatchConfig:
    """Column mapping for decoding URLs stored in a CSV file."""

    id_column: str
    url_columns: list[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.url_columns:
            raise ValueError("At least one URL column is required")
