"""Tests for trusted proxy config parsing."""

from dataclasses import FrozenInstanceError
from ipaddress import ip_address, ip_network

import pytest

from realip import RealIPConfig, parse_trusted_proxies


class TestParseTrustedProxies:
    def test_single_ip_is_host_network(self):
        """A single IP like '10.0.0.1' is parsed as /32."""
        assert parse_trusted_proxies(["10.0.0.1"]) == (ip_network("10.0.0.1/32"),)

    def test_single_ipv6_is_host_network(self):
        assert parse_trusted_proxies(["::1"]) == (ip_network("::1/128"),)

    def test_cidrs_keep_order(self):
        result = parse_trusted_proxies(["172.18.0.0/16", "10.0.0.0/8"])
        assert result == (ip_network("172.18.0.0/16"), ip_network("10.0.0.0/8"))

    def test_host_bits_allowed(self):
        assert parse_trusted_proxies(["10.0.0.5/8"]) == (ip_network("10.0.0.0/8"),)

    def test_strips_whitespace(self):
        assert parse_trusted_proxies([" 10.0.0.0/8 "]) == (ip_network("10.0.0.0/8"),)

    def test_accepts_ipaddress_objects(self):
        result = parse_trusted_proxies([ip_address("10.0.0.1"), ip_network("fd00::/8")])
        assert result == (ip_network("10.0.0.1/32"), ip_network("fd00::/8"))

    def test_single_string(self):
        assert parse_trusted_proxies("10.0.0.0/8") == (ip_network("10.0.0.0/8"),)

    def test_empty(self):
        assert parse_trusted_proxies([]) == ()

    @pytest.mark.parametrize("value", ["not-an-ip", "10.0.0.0/33", "", "300.1.1.1"])
    def test_invalid_raises(self, value):
        with pytest.raises(ValueError, match="Invalid IP/CIDR"):
            parse_trusted_proxies([value])

    def test_invalid_type_raises(self):
        with pytest.raises(ValueError, match="Invalid IP/CIDR"):
            parse_trusted_proxies([None])


class TestRealIPConfig:
    def test_parses_strings(self):
        config = RealIPConfig(trusted_proxy_networks=("10.0.0.0/8",))
        assert config.trusted_proxy_networks == (ip_network("10.0.0.0/8"),)

    def test_default_empty(self):
        assert RealIPConfig().trusted_proxy_networks == ()

    def test_frozen(self):
        config = RealIPConfig()
        with pytest.raises(FrozenInstanceError):
            config.trusted_proxy_networks = (ip_network("10.0.0.0/8"),)
