"""Indicator service tests: sequence use and OFF policy."""

from __future__ import annotations

import pytest

from ledlocator.core.packet_builder import decode
from ledlocator.core.sequence import SequenceCounter
from ledlocator.exceptions.custom_exceptions import InvalidArgumentError
from ledlocator.models.data_models import BoardIdentity, OffPolicy
from ledlocator.services.indicator_service import IndicatorService


BOARD = BoardIdentity("10.1.1.1", 60000, 0x12345678)


class RecordingTransport:
    def __init__(self) -> None:
        self.sent: list[tuple[tuple[str, int], bytes]] = []

    def send(self, endpoint, frame: bytes) -> None:
        self.sent.append((endpoint, frame))


def make_service(**kwargs):
    transport = RecordingTransport()
    counter = SequenceCounter(start=1)
    return IndicatorService(BOARD, transport, counter, **kwargs), transport, counter


def test_activate_sends_to_board_endpoint() -> None:
    service, transport, _ = make_service(door=2, duration=30)

    frame = service.activate(5)

    assert transport.sent == [(("10.1.1.1", 60000), frame)]
    assert decode(frame) == {
        "serial_number": 0x12345678,
        "door": 2,
        "indicator": 5,
        "duration": 30,
        "sequence_number": 1,
    }


def test_each_command_draws_a_new_sequence_number() -> None:
    service, transport, _ = make_service(off_policy=OffPolicy.RESEND)

    service.activate(1)
    service.open_door()
    service.turn_off(1)

    assert [decode(f)["sequence_number"] for _, f in transport.sent] == [1, 2, 3]


def test_simulated_off_sends_nothing() -> None:
    service, transport, counter = make_service()

    assert service.turn_off(4) is None
    assert transport.sent == []
    assert counter.peek() == 1


def test_resend_off_repeats_activate_frame() -> None:
    service, transport, _ = make_service(off_policy=OffPolicy.RESEND)

    frame = service.turn_off(4)

    assert frame is not None
    assert decode(frame)["indicator"] == 4


def test_invalid_indicator_consumes_no_sequence_number() -> None:
    service, transport, counter = make_service()

    with pytest.raises(InvalidArgumentError):
        service.activate(0)
    with pytest.raises(InvalidArgumentError):
        service.open_door(7)

    assert transport.sent == []
    assert counter.peek() == 1


def test_rejects_invalid_door_setting() -> None:
    with pytest.raises(InvalidArgumentError):
        IndicatorService(BOARD, RecordingTransport(), SequenceCounter(), door=0)
