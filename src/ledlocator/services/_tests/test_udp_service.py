"""UDP transport tests against a loopback socket."""

from __future__ import annotations

import socket
import threading

import pytest

from ledlocator.exceptions.custom_exceptions import InvalidArgumentError, TransportError
from ledlocator.services import udp_service
from ledlocator.services.udp_service import UdpTransport


@pytest.fixture
def receiver():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    yield sock
    sock.close()


class FakeSocket:
    instances: list["FakeSocket"] = []

    def __init__(self, *args) -> None:
        self.options: list[tuple[int, int, int]] = []
        self.sent: list[tuple[bytes, tuple[str, int]]] = []
        FakeSocket.instances.append(self)

    def __enter__(self) -> "FakeSocket":
        return self

    def __exit__(self, *exc) -> None:
        pass

    def setsockopt(self, level: int, option: int, value: int) -> None:
        self.options.append((level, option, value))

    def sendto(self, data: bytes, endpoint) -> None:
        self.sent.append((data, endpoint))


def test_send_delivers_one_datagram(receiver) -> None:
    transport = UdpTransport()
    frame = bytes(range(64))

    transport.send(receiver.getsockname(), frame)

    data, _ = receiver.recvfrom(1024)
    assert data == frame
    assert transport.frames_sent == 1


def test_send_rejects_short_frame(receiver) -> None:
    transport = UdpTransport()

    with pytest.raises(InvalidArgumentError):
        transport.send(receiver.getsockname(), b"\x17\x40")
    assert transport.frames_sent == 0


def test_send_failure_raises_transport_error() -> None:
    transport = UdpTransport()

    with pytest.raises(TransportError):
        transport.send(("127.0.0.1", 70000), b"\x00" * 64)


def test_unusable_host_raises_transport_error() -> None:
    transport = UdpTransport()

    with pytest.raises(TransportError):
        transport.send(("bad\x00host", 60000), b"\x00" * 64)
    assert transport.frames_sent == 0


def test_broadcast_enabled_for_every_destination(monkeypatch) -> None:
    FakeSocket.instances = []
    monkeypatch.setattr(udp_service.socket, "socket", FakeSocket)
    transport = UdpTransport()

    for address in ("192.168.0.255", "192.168.0.20", "255.255.255.255"):
        transport.send((address, 60000), b"\x00" * 64)

    assert len(FakeSocket.instances) == 3
    for sock in FakeSocket.instances:
        assert (socket.SOL_SOCKET, socket.SO_BROADCAST, 1) in sock.options
    assert [sock.sent[0][1][0] for sock in FakeSocket.instances] == [
        "192.168.0.255", "192.168.0.20", "255.255.255.255"
    ]


def test_send_to_subnet_broadcast_address() -> None:
    # 127.255.255.255 is the loopback subnet broadcast; refused without SO_BROADCAST
    transport = UdpTransport()

    transport.send(("127.255.255.255", 60000), b"\x00" * 64)

    assert transport.frames_sent == 1


def test_frames_sent_counts_concurrent_senders(monkeypatch) -> None:
    monkeypatch.setattr(udp_service.socket, "socket", FakeSocket)
    transport = UdpTransport()

    def worker() -> None:
        for _ in range(500):
            transport.send(("192.168.0.20", 60000), b"\x00" * 64)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert transport.frames_sent == 2000
