# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import json
from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from pxlsconv.codec import encode_line, format_timestamp
from pxlsconv.convert import convert_log
from pxlsconv.errors import PxlsError
from pxlsconv.logging import configure_logging
from pxlsconv.reader import STDIN_PATH, read_path
from pxlsconv.settings import Settings
from pxlsconv.sink import JsonlRecordSink
from pxlsconv.timeline import require_events, summarize

_INPUT = click.argument(
    "input_path",
    metavar="INPUT",
    default=STDIN_PATH,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)


def _report_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn package errors into a clean CLI failure."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except PxlsError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.pass_context
def cli(ctx: click.Context) -> None:
    """pxlsconv command line interface."""
    settings = Settings()
    configure_logging(settings)
    ctx.obj = settings


@cli.command("convert")
@_INPUT
@click.option("-o", "--output", type=click.Path(dir_okay=False, allow_dash=True), default=None,
              help="Output file ('-' for stdout). Defaults to <output_root>/<name>.jsonl.")
@click.option("--name", default=None, help="Canvas name (default: PXLSCONV_CANVAS_NAME).")
@click.option("--platform", default=None, help="Platform label (default: PXLSCONV_PLATFORM).")
@click.pass_obj
@_report_errors
def convert(settings: Settings, input_path: str, output: str | None, name: str | None, platform: str | None) -> None:
    """Convert a pxls log into a canvas record stream."""
    if name is not None:
        settings.canvas_name = name
    if platform is not None:
        settings.platform = platform

    log = read_path(input_path)
    require_events(log)
    if output is None:
        output = str(settings.default_output_path())
    with click.open_file(output, "w", encoding="utf-8") as f:
        report = convert_log(log, JsonlRecordSink(f), name=settings.canvas_name, platform=settings.platform)

    summary = report.summary
    click.echo(
        f"{report.events} events, {summary.width}x{summary.height}, "
        f"{summary.duration_ms} ms -> {output}",
        err=output == "-",
    )


@cli.command("summary")
@_INPUT
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON.")
@_report_errors
def summary(input_path: str, as_json: bool) -> None:
    """Print canvas size and time span of a log."""
    log = read_path(input_path)
    result = summarize(log)
    if as_json:
        payload = {
            "events": len(log),
            "width": result.width,
            "height": result.height,
            "start": result.start,
            "end": result.end,
            "duration_ms": result.duration_ms,
        }
        click.echo(json.dumps(payload))
        return

    click.echo(f"events:   {len(log)}")
    click.echo(f"size:     {result.width}x{result.height}")
    click.echo(f"start:    {format_timestamp(result.start)} ({result.start})")
    click.echo(f"end:      {format_timestamp(result.end)} ({result.end})")
    click.echo(f"duration: {result.duration_ms} ms")


@cli.command("check")
@_INPUT
@_report_errors
def check(input_path: str) -> None:
    """Decode a log and report whether every record is valid."""
    log = read_path(input_path)
    click.echo(f"ok: {len(log)} records")


@cli.command("normalize")
@_INPUT
@click.option("-o", "--output", type=click.Path(dir_okay=False, allow_dash=True), default=STDIN_PATH,
              show_default=True)
@_report_errors
def normalize(input_path: str, output: str) -> None:
    """Re-encode every record canonically, one per line."""
    log = read_path(input_path)
    with click.open_file(output, "wb") as f:
        for event in log:
            f.write(encode_line(event, terminator=True))


def main() -> None:
    cli.main()


if __name__ == "__main__":
    main()
