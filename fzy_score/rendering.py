from __future__ import annotations

from rich.text import Text

from fzy_score.models import score_kind

KIND_STYLES = {
    "no-match": "red",
    "exact": "bold green",
    "scored": "cyan",
}


def format_score(value: float) -> str:
    kind = score_kind(value)
    if kind == "no-match":
        return "-inf"
    if kind == "exact":
        return "inf"
    return f"{value:.3f}"


def render_score(pattern: str, text: str, value: float) -> Text:
    kind = score_kind(value)
    rendered = Text()
    rendered.append(format_score(value), style=KIND_STYLES[kind])
    rendered.append(f"  {kind:<8}  ", style="dim")
    # Text.append never parses markup, so user input is shown verbatim.
    rendered.append(pattern, style="bold")
    rendered.append(" -> ")
    rendered.append(text)
    return rendered
