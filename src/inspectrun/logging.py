# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Protocol

from rich.console import Console
from rich.text import Text


class RunLogger(Protocol):
    """Logging surface consumed by the inspection engine."""

    def info(self, message: str) -> None:
        """Emit an informational message."""

    def warn(self, message: str) -> None:
        """Emit a warning message."""

    def error(self, message: str) -> None:
        """Emit an error message."""

    def debug(self, message: str) -> None:
        """Emit a debug message."""


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stdout`` reports TTY support, ``False`` otherwise.
    """

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_color: bool | None,
    console: Console,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_color: Optional explicit colour flag overriding TTY detection.
        console: Console to print to.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool, console: Console, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_color=use_color, console=console)


def ok(msg: str, *, use_emoji: bool, console: Console, use_color: bool | None = None) -> None:
    """Emit a success message."""

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_color=use_color, console=console)


def warn(msg: str, *, use_emoji: bool, console: Console, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="yellow", use_color=use_color, console=console)


def fail(msg: str, *, use_emoji: bool, console: Console, use_color: bool | None = None) -> None:
    """Emit an error message."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_color=use_color, console=console)


@dataclass(slots=True)
class InspectionLogger:
    """Adapter around the logging helpers honouring emoji and colour settings."""

    console: Console
    use_emoji: bool
    use_color: bool
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

    def info(self, message: str) -> None:
        info(message, use_emoji=self.use_emoji, use_color=self.use_color, console=self.console)

    def ok(self, message: str) -> None:
        ok(message, use_emoji=self.use_emoji, use_color=self.use_color, console=self.console)

    def warn(self, message: str) -> None:
        warn(message, use_emoji=self.use_emoji, use_color=self.use_color, console=self.console)

    def error(self, message: str) -> None:
        fail(message, use_emoji=self.use_emoji, use_color=self.use_color, console=self.console)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        ``key=value`` pairs in ``message`` are highlighted.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> InspectionLogger:
    """Return an :class:`InspectionLogger` bound to a dedicated Rich console.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        InspectionLogger: Logger ready to be handed to the engine.
    """

    console = Console(no_color=no_color, highlight=False, emoji=emoji, soft_wrap=True)
    return InspectionLogger(
        console=console,
        use_emoji=emoji,
        use_color=not no_color and detect_tty(),
        debug_enabled=debug,
    )


__all__ = [
    "InspectionLogger",
    "RunLogger",
    "build_logger",
    "detect_tty",
    "emoji",
    "fail",
    "info",
    "ok",
    "warn",
]
