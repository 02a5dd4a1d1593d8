from __future__ import annotations

import dataclasses
import logging

import typer
from rich.console import Console

from fzy_score import __version__
from fzy_score.models import DEFAULT_CONFIG
from fzy_score.rendering import render_score
from fzy_score.search import has_match, score

logger = logging.getLogger(__name__)

__all__ = [
    "cli",
    "match",
    "run",
    "score_command",
]


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"fzy-score {__version__}")
    raise typer.Exit()


cli = typer.Typer(
    add_completion=False,
    help="Score fuzzy subsequence matches of a pattern against a candidate.",
)


@cli.callback()
def run(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger("fzy_score").setLevel(level)


@cli.command("score")
def score_command(
    pattern: str = typer.Argument(..., help="Query to look for."),
    text: str = typer.Argument(..., help="Candidate text to score."),
    gap_leading: float | None = typer.Option(
        None, "--gap-leading", help="Penalty per character before the match."
    ),
    gap_trailing: float | None = typer.Option(
        None, "--gap-trailing", help="Penalty per character after the match."
    ),
    gap_inner: float | None = typer.Option(
        None, "--gap-inner", help="Penalty per character skipped inside the match."
    ),
    consecutive: float | None = typer.Option(
        None, "--consecutive", help="Bonus for extending a contiguous run."
    ),
) -> None:
    overrides = {
        name: value
        for name, value in (
            ("gap_leading", gap_leading),
            ("gap_trailing", gap_trailing),
            ("gap_inner", gap_inner),
            ("match_consecutive", consecutive),
        )
        if value is not None
    }
    config = dataclasses.replace(DEFAULT_CONFIG, **overrides)
    if overrides:
        logger.debug("Using weight overrides: %s", overrides)

    value = score(pattern, text, config)
    Console(soft_wrap=True).print(render_score(pattern, text, value))


@cli.command()
def match(
    pattern: str = typer.Argument(..., help="Query to look for."),
    text: str = typer.Argument(..., help="Candidate text to test."),
) -> None:
    if not has_match(pattern, text):
        typer.echo("no match")
        raise typer.Exit(code=1)
    typer.echo("match")


if __name__ == "__main__":
    cli()
