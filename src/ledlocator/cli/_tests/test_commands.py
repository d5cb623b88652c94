"""CLI tests using click's test runner; no datagrams leave the host."""

from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner

from ledlocator.cli.commands import main
from ledlocator.core import locator as locator_module
from ledlocator.core.packet_builder import decode


class FakeTransport:
    sent: list[bytes] = []

    def send(self, endpoint, frame: bytes) -> None:
        FakeTransport.sent.append(frame)


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    FakeTransport.sent = []
    monkeypatch.setattr(locator_module, "UdpTransport", FakeTransport)
    monkeypatch.setenv("BEACON_INTERVAL", "0.05")
    monkeypatch.delenv("SCANNER_PORT", raising=False)
    monkeypatch.delenv("PRODUCT_INDICATORS", raising=False)
    yield
    # Handlers point at the runner's captured stdout
    logging.getLogger("ledlocator").handlers.clear()


def test_run_processes_console_scans() -> None:
    result = CliRunner().invoke(main, ["--log-level", "WARNING", "run"],
                                input="PRD1\nT1\nT1\nconfirm\nexit\nPRD2\n")

    assert result.exit_code == 0, result.output
    assert "Stopped after 4 scans" in result.output
    assert "associated with product 'PRD1'" in result.output

    indicators = {decode(frame)["indicator"] for frame in FakeTransport.sent}
    assert indicators == {1}


def test_open_door_sends_one_frame() -> None:
    result = CliRunner().invoke(main, ["open-door", "--door", "2"])

    assert result.exit_code == 0, result.output
    assert len(FakeTransport.sent) == 1
    assert decode(FakeTransport.sent[0])["door"] == 2


def test_activate_rejects_out_of_range_indicator() -> None:
    result = CliRunner().invoke(main, ["activate", "81"])

    assert result.exit_code != 0
    assert FakeTransport.sent == []


def test_frame_dump_prints_layout() -> None:
    result = CliRunner().invoke(main, ["frame-dump", "3", "--sequence", "258"])

    assert result.exit_code == 0, result.output
    assert "00: 17 40 00 00 B8 FE 6F 0A 01 03 00 00 00 00 00 00" in result.output
    assert "indicator: 3" in result.output
    assert "sequence_number: 258" in result.output
    assert FakeTransport.sent == []


def test_config_lists_products() -> None:
    result = CliRunner().invoke(main, ["config"])

    assert result.exit_code == 0, result.output
    assert "PRD1: indicator 1" in result.output
    assert "Scanner Port: stdin" in result.output


def test_validate_config_fails_on_bad_door(monkeypatch) -> None:
    monkeypatch.setenv("DOOR_NUMBER", "0")

    result = CliRunner().invoke(main, ["validate-config"])

    assert result.exit_code != 0
    assert "validation failed" in result.output


def test_beacon_check_reports_cadence() -> None:
    result = CliRunner().invoke(main, ["--log-level", "WARNING", "beacon-check", "4", "--seconds", "0.3"])

    assert result.exit_code == 0, result.output
    assert "Mean interval" in result.output
    assert len(FakeTransport.sent) >= 3


def test_locate_lights_product_indicator() -> None:
    result = CliRunner().invoke(main, ["--log-level", "WARNING", "locate", "PRD3"])

    assert result.exit_code == 0, result.output
    assert "Product PRD3 is at indicator 3" in result.output
    assert [decode(frame)["indicator"] for frame in FakeTransport.sent] == [3]


def test_locate_unknown_product_fails() -> None:
    result = CliRunner().invoke(main, ["--log-level", "WARNING", "locate", "PRD99"])

    assert result.exit_code != 0
    assert "not found" in result.output
    assert FakeTransport.sent == []
