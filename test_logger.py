#!/usr/bin/env python3
"""Tests for the console logger: stream routing, colour and debug switches."""

import pytest

import SWARM_PSO.Logs.logger as logger
from SWARM_PSO.Logs.logger import log_debug, log_error, log_info, log_warning, set_color, set_debug


@pytest.fixture(autouse=True)
def plain_logger(monkeypatch):
    monkeypatch.setattr(logger, "ENABLE_COLOR", False)
    monkeypatch.setattr(logger, "DEBUG", False)


def test_levels_are_routed_to_streams(capsys):
    log_info("swarm ready", "PSO")
    log_warning("run cancelled", "PSO")
    log_error("bad bounds", "benchmark")
    captured = capsys.readouterr()

    assert "swarm ready" in captured.out
    assert "[PSO" in captured.out
    assert "run cancelled" in captured.err
    assert "bad bounds" in captured.err
    assert "run cancelled" not in captured.out


def test_debug_only_when_enabled(capsys):
    log_debug("hidden", "PSO")
    assert capsys.readouterr().out == ""

    set_debug(True)
    log_debug("shown", "PSO")
    assert "shown" in capsys.readouterr().out


def test_colour_switch(capsys):
    log_info("plain", "PSO")
    assert "\033[" not in capsys.readouterr().out

    set_color(True)
    log_info("coloured", "PSO")
    out = capsys.readouterr().out
    assert logger.Colors.CYAN in out
    assert out.rstrip().endswith(logger.Colors.RESET)
