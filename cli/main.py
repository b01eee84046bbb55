"""aocprep CLI.

Usage:
    aocprep day07      # in the project folder: scaffold day07/ from skeleton/
    aocprep            # inside a day folder: fetch input.txt and testNN.txt
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import typer

from aocprep.config import settings
from aocprep.day import RunContext
from aocprep.errors import AocPrepError, ErrorKind
from aocprep.prep import get_inputs, get_tests
from aocprep.skeleton import copy_skeleton

app = typer.Typer(
    name="aocprep",
    help="An Advent of Code skeleton tool.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if not value:
        return
    try:
        installed = version("aocprep")
    except PackageNotFoundError:
        installed = "unknown"
    typer.echo(f"aocprep {installed}")
    raise typer.Exit()


def _configure_logging() -> None:
    level = logging.getLevelNamesMapping().get(settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format="%(message)s", force=True)
    # httpx logs every request at INFO; the session cookie is in the headers.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@app.command()
def main(
    day_name: Optional[str] = typer.Argument(
        None, help='Day name. Format should be "day##".'
    ),
    version_: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Run in project folder with day folder name as argument to copy skeleton.
    Run from within day folder without argument to download inputs.
    """
    _configure_logging()
    cwd = Path.cwd()

    try:
        if day_name is not None:
            copy_skeleton(RunContext(day_name=day_name, base_folder=cwd))
        else:
            run = RunContext.from_day_folder(cwd)
            config = run.aoc_config()
            get_inputs(run, config)
            get_tests(run, config)
    except AocPrepError as exc:
        typer.echo(f"Error: {exc}", err=True)
        if exc.kind is ErrorKind.NOT_YET_AVAILABLE:
            typer.echo("The puzzle may not be unlocked yet; try again later.", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
