# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from ..errors import ConfigError
from ..host.environment import HostEnvironment
from ..inspections.base import PerFileTool, tool_kind_for
from ..logging import build_logger
from ..orchestration.engine import InspectionEngine
from .config_builder import RunOptions, build_config

app = typer.Typer(name="inspectrun", help="Run inspections, gate on thresholds, report, and fix.", no_args_is_help=True)


@app.command("run")
def run_command(
    paths: Annotated[list[Path] | None, typer.Argument(help="Files or directories to inspect.")] = None,
    root: Annotated[Path, typer.Option("--root", help="Project root.")] = Path(),
    config_path: Annotated[Path | None, typer.Option("--config", help="Configuration file.")] = None,
    profile: Annotated[str | None, typer.Option("--profile", help="Inherit the named host profile.")] = None,
    inherit: Annotated[
        bool | None,
        typer.Option("--inherit/--no-inherit", help="Inherit inspections from the current host profile."),
    ] = None,
    fix: Annotated[bool | None, typer.Option("--fix/--no-fix", help="Apply single-candidate quick fixes.")] = None,
    quiet: Annotated[bool | None, typer.Option("--quiet/--show-violations", help="Hide per-finding lines.")] = None,
    xml: Annotated[Path | None, typer.Option("--xml", help="Write a checkstyle XML report.")] = None,
    html: Annotated[Path | None, typer.Option("--html", help="Write an HTML report.")] = None,
    json_path: Annotated[Path | None, typer.Option("--json", help="Write a JSON report.")] = None,
    ignore_failures: Annotated[
        bool | None,
        typer.Option("--ignore-failures/--fail-on-threshold", help="Exit 0 even when a threshold is exceeded."),
    ] = None,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show debug output.")] = False,
) -> None:
    """Inspect the project and exit non-zero when a threshold is exceeded."""

    logger = build_logger(emoji=not no_emoji, debug=debug, no_color=no_color)
    root_path = root.resolve()
    options = RunOptions(
        root=root_path,
        paths=[path.resolve() for path in paths or []],
        config_path=config_path,
        profile=profile,
        inherit=inherit,
        fix=fix,
        quiet=quiet,
        xml=xml,
        html=html,
        json_path=json_path,
        ignore_failures=ignore_failures,
    )
    try:
        config = build_config(options)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    host = HostEnvironment.create(root_path)
    engine = InspectionEngine(host, logger)
    files = engine.discover(config)
    try:
        outcome = engine.execute(files, config)
    except ConfigError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=2) from exc

    if outcome.success:
        logger.ok(f"Inspection finished: {outcome.total_findings} problem(s)")
        raise typer.Exit(code=0)
    if config.ignore_failures:
        logger.warn("Thresholds exceeded; failures ignored")
        raise typer.Exit(code=0)
    logger.error("Inspection failed: thresholds exceeded")
    raise typer.Exit(code=1)


@app.command("list")
def list_command(
    root: Annotated[Path, typer.Option("--root", help="Project root.")] = Path(),
) -> None:
    """List every registered inspection."""

    host = HostEnvironment.create(root.resolve())
    table = Table(title="Registered inspections")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Language")
    table.add_column("Kind")
    for inspection in host.registry.create_tools():
        kind = "local" if isinstance(tool_kind_for(inspection), PerFileTool) else "unsupported"
        table.add_row(inspection.inspection_id(), inspection.display_name, inspection.language or "any", kind)
    Console().print(table)


def main() -> None:
    app()


__all__ = ["app", "main"]
