"""Shared fixtures: a scripted SOCKS5 proxy running in a background thread."""

import socket
import threading

import pytest
from loguru import logger

GREETING = b"\x05\x01\x00"
METHOD_OK = b"\x05\x00"
REPLY_IPV4_OK = b"\x05\x00\x00\x01" + bytes([127, 0, 0, 1]) + b"\x1f\x90"
REPLY_IPV6_OK = b"\x05\x00\x00\x04" + bytes(15) + b"\x01" + b"\x1f\x90"


def connect_request(host: bytes, port: int) -> bytes:
    return b"\x05\x01\x00\x03" + bytes([len(host)]) + host + port.to_bytes(2, "big")


class MockProxy:
    """Accept one connection and play a script against it.

    Script steps:
        ("recv", n): read exactly n bytes from the client
        ("send", data): write data to the client
        ("stall", seconds): wait without reading or writing
        ("echo",): echo everything until the client closes
        ("close",): hang up immediately

    Every byte received from the client is appended to ``received``,
    including whatever arrives after the script ends.
    """

    def __init__(self, script):
        self.script = script
        self.received = bytearray()
        self.errors = []
        self._stop = threading.Event()
        self._listener = socket.create_server(("127.0.0.1", 0))
        self._listener.settimeout(5)
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    @property
    def address(self) -> str:
        host, port = self._listener.getsockname()
        return f"{host}:{port}"

    def _recv_exact(self, conn, size):
        buf = bytearray()
        while len(buf) < size:
            chunk = conn.recv(size - len(buf))
            if not chunk:
                break
            buf += chunk
        self.received += buf

    def _drain(self, conn, echo=False):
        while not self._stop.is_set():
            try:
                chunk = conn.recv(4096)
            except TimeoutError:
                continue
            except OSError:
                return
            if not chunk:
                return
            self.received += chunk
            if echo:
                conn.sendall(chunk)

    def _serve(self):
        try:
            conn, _ = self._listener.accept()
        except OSError as exc:
            self.errors.append(exc)
            return
        with conn:
            conn.settimeout(0.2)
            try:
                for step in self.script:
                    if step[0] == "recv":
                        conn.settimeout(5)
                        self._recv_exact(conn, step[1])
                        conn.settimeout(0.2)
                    elif step[0] == "send":
                        conn.sendall(step[1])
                    elif step[0] == "stall":
                        self._stop.wait(step[1])
                    elif step[0] == "echo":
                        self._drain(conn, echo=True)
                        return
                    elif step[0] == "close":
                        return
                self._drain(conn)
            except OSError as exc:
                self.errors.append(exc)

    def close(self):
        self._stop.set()
        self._thread.join(timeout=5)
        self._listener.close()


@pytest.fixture
def mock_proxy():
    proxies = []

    def factory(script):
        proxy = MockProxy(script)
        proxies.append(proxy)
        return proxy

    yield factory
    for proxy in proxies:
        proxy.close()


@pytest.fixture
def happy_script():
    def build(host: bytes = b"example.com", port: int = 443, reply: bytes = REPLY_IPV4_OK):
        return [
            ("recv", len(GREETING)),
            ("send", METHOD_OK),
            ("recv", len(connect_request(host, port))),
            ("send", reply),
        ]

    return build


@pytest.fixture
def unused_address():
    """An address nothing listens on."""
    with socket.create_server(("127.0.0.1", 0)) as sock:
        host, port = sock.getsockname()
    return f"{host}:{port}"


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.remove()
    logger.disable("socks5_dialer")
