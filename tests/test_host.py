import pytest

from hoptrace.host import HostResolutionError, numeric_host, resolve_host, reverse_host


def test_resolve_numeric_address_returns_itself():
    assert resolve_host("127.0.0.1") == "127.0.0.1"


def test_resolve_unknown_host_raises():
    with pytest.raises(HostResolutionError, match="getaddrinfo"):
        resolve_host("no-such-host.invalid")


def test_numeric_host_round_trip():
    address = resolve_host("127.0.0.1")
    assert numeric_host(address) == address


def test_numeric_host_rejects_non_address():
    with pytest.raises(HostResolutionError, match="getnameinfo"):
        numeric_host("not-an-address")


def test_reverse_host_rejects_non_address():
    with pytest.raises(HostResolutionError):
        reverse_host("not-an-address")


def test_reverse_host_returns_non_empty_name():
    name = reverse_host("127.0.0.1")
    assert len(name) > 0
    assert " " not in name