import pytest

from socks5_dialer.core.endpoint import Endpoint, join_host_port, parse_port, resolve
from socks5_dialer.core.exceptions import InvalidAddress, InvalidPort, ProxyError


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        ("example.com:443", Endpoint("example.com", 443)),
        ("127.0.0.1:1080", Endpoint("127.0.0.1", 1080)),
        ("[::1]:9050", Endpoint("::1", 9050)),
        ("[2001:db8::1]:0", Endpoint("2001:db8::1", 0)),
        ("localhost:65535", Endpoint("localhost", 65535)),
        ("host:0080", Endpoint("host", 80)),
    ],
)
def test_resolve_valid(address, expected):
    assert resolve(address) == expected


def test_resolve_unpacks_as_pair():
    host, port = resolve("example.com:80")
    assert (host, port) == ("example.com", 80)


@pytest.mark.parametrize(
    "address",
    [
        "example.com",
        ":80",
        "[]:80",
        "::1:80",
        "[::1]",
        "[::1]80",
        "[::1:80",
        "a]b:80",
        "",
    ],
)
def test_resolve_invalid_address(address):
    with pytest.raises(InvalidAddress) as excinfo:
        resolve(address)
    assert excinfo.value.address == address


@pytest.mark.parametrize("port", ["", "http", "65536", "-1", "+80", " 80", "8 0", "1e3", "²"])
def test_resolve_invalid_port(port):
    with pytest.raises(InvalidPort) as excinfo:
        resolve(f"example.com:{port}")
    assert excinfo.value.port == port
    assert repr(port) in str(excinfo.value)


def test_address_errors_are_value_errors():
    with pytest.raises(ValueError):
        resolve("nope")
    with pytest.raises(ProxyError):
        parse_port("99999")


def test_join_host_port_brackets_ipv6():
    assert join_host_port("::1", 1080) == "[::1]:1080"
    assert join_host_port("example.com", 443) == "example.com:443"
    assert resolve(join_host_port("fe80::1", 22)) == ("fe80::1", 22)
