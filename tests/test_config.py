import pytest

from gnews_decoder.config import BatchConfig, ClientConfig


def test_defaults():
    config = ClientConfig()
    assert config.proxy_url is None
    assert config.timeout == 30.0
    assert "Mozilla/5.0" in config.user_agent


def test_proxy_url():
    assert ClientConfig(proxy_host="proxy.local", proxy_port=3128).proxy_url == "http://proxy.local:3128"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"proxy_host": "proxy.local"},
        {"proxy_port": 3128},
        {"proxy_host": "proxy.local", "proxy_port": 0},
        {"timeout": 0},
    ],
)
def test_invalid_client_config(kwargs):
    with pytest.raises(ValueError):
        ClientConfig(**kwargs)


def test_batch_config_requires_url_column():
    with pytest.raises(ValueError):
        BatchConfig(id_column="id")
