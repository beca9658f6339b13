"""HTTP session construction."""

import requests

from .config import ClientConfig


def create_session(config: ClientConfig) -> requests.Session:
    """
    Create the requests session shared by all decode calls.

    Args:
        config: Client configuration with optional proxy

    Returns:
        Session with the browser User-Agent and proxy applied
    """
    session = requests.Session()
    session.headers.update({"User-Agent": config.user_agent})
    if config.proxy_url:
        session.proxies.update({"http": config.proxy_url, "https": config.proxy_url})
    return session
