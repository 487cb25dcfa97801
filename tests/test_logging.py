# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the Rich-backed console logger."""

from __future__ import annotations

import io

from rich.console import Console

from inspectrun.logging import InspectionLogger, build_logger


def _logger(*, debug: bool = False, use_emoji: bool = False) -> tuple[InspectionLogger, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, no_color=True, width=200, emoji=use_emoji)
    return InspectionLogger(console=console, use_emoji=use_emoji, use_color=False, debug_enabled=debug), buffer


def test_channels_print_messages() -> None:
    logger, buffer = _logger()

    logger.info("first")
    logger.warn("second")
    logger.error("third")
    logger.ok("fourth")

    assert buffer.getvalue().splitlines() == ["first", "second", "third", "fourth"]


def test_emoji_prefixes_are_optional() -> None:
    logger, buffer = _logger(use_emoji=True)

    logger.error("broken")

    assert buffer.getvalue().startswith("❌")


def test_debug_is_hidden_unless_enabled() -> None:
    quiet, quiet_buffer = _logger()
    loud, loud_buffer = _logger(debug=True)

    quiet.debug("tool=demo files=3")
    loud.debug("tool=demo files=3")

    assert quiet_buffer.getvalue() == ""
    assert loud_buffer.getvalue().strip() == "[debug] tool=demo files=3"


def test_build_logger_honours_flags() -> None:
    logger = build_logger(emoji=False, debug=True, no_color=True)

    assert logger.use_emoji is False
    assert logger.use_color is False
    assert logger.debug_enabled is True
