"""Test cluster_config.py"""

import pytest
from pydantic import ValidationError

from clean_resources.cluster_config import ClusterConfig


class TestClusterConfig:
    """Test ClusterConfig"""

    def test_defaults(self) -> None:
        """Test TLS is verified and listings are paginated by default"""
        conf = ClusterConfig(server="https://api.example.com:6443", token="t0k3n")
        assert conf.verify_ssl
        assert conf.page_size == 500

    def test_token_not_in_repr(self) -> None:
        """Test the token does not leak into output"""
        conf = ClusterConfig(server="https://api.example.com:6443", token="t0k3n")
        assert "t0k3n" not in repr(conf)

    def test_frozen(self) -> None:
        """Test the configuration cannot change once created"""
        conf = ClusterConfig(server="https://api.example.com:6443", token="t0k3n")
        with pytest.raises(ValidationError):
            conf.server = "https://other.example.com"  # type: ignore

    @pytest.mark.parametrize(
        "kwargs",
        [
            pytest.param({"server": "", "token": "t0k3n"}, id="empty server"),
            pytest.param({"server": "https://api", "token": ""}, id="empty token"),
            pytest.param({"token": "t0k3n"}, id="missing server"),
            pytest.param(
                {"server": "https://api", "token": "t0k3n", "page_size": 0},
                id="zero page size",
            ),
        ],
    )
    def test_invalid(self, kwargs: dict) -> None:
        """Test invalid configurations are refused"""
        with pytest.raises(ValidationError):
            ClusterConfig(**kwargs)
