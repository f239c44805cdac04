from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from pathlib import Path

import typer

from .config import ConfigError, load_config
from .errors import GitLogError
from .formatting import format_commits_json, format_commits_table
from .gitlog import GitLog, Params
from .revision import Rev, RevAll, RevArgs, RevNumber, RevRange, RevTime

app = typer.Typer(add_completion=False, help="gitlog: structured git history")

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _select_revision(
    rev: str | None,
    rev_range: str | None,
    all_refs: bool,
    number: int | None,
    since: datetime | None,
    until: datetime | None,
) -> RevArgs | None:
    selected: list[RevArgs] = []
    if rev:
        selected.append(Rev(rev))
    if rev_range:
        old, sep, new = rev_range.partition("..")
        if not sep or not old or not new:
            raise typer.BadParameter("--range must look like OLD..NEW")
        selected.append(RevRange(old=old, new=new))
    if all_refs:
        selected.append(RevAll())
    if number is not None:
        selected.append(RevNumber(number))
    if since is not None or until is not None:
        selected.append(RevTime(since=since, until=until))

    if len(selected) > 1:
        raise typer.BadParameter("Use only one of --rev, --range, --all, --number, --since/--until")
    return selected[0] if selected else None


@app.command("log")
def log_cmd(
    path: str | None = typer.Option(None, "--path", "-C", help="Repository directory (default: .)"),
    bin: str | None = typer.Option(None, "--bin", help="git executable (default: git)"),
    config: Path | None = typer.Option(None, "--config", help="Path to gitlog config JSON"),
    rev: str | None = typer.Option(None, "--rev", help="Single refname"),
    rev_range: str | None = typer.Option(None, "--range", help="Range as OLD..NEW"),
    all_refs: bool = typer.Option(False, "--all", help="All refs"),
    number: int | None = typer.Option(None, "--number", "-n", help="Limit number of commits"),
    since: datetime | None = typer.Option(None, "--since", formats=DATE_FORMATS, help="Commits after date"),
    until: datetime | None = typer.Option(None, "--until", formats=DATE_FORMATS, help="Commits before date"),
    merges_only: bool = typer.Option(False, "--merges-only", help="Only merge commits"),
    no_merges: bool = typer.Option(False, "--no-merges", help="Exclude merge commits"),
    reverse: bool = typer.Option(False, "--reverse", help="Oldest first"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Print commit history of a repository."""
    try:
        cfg = load_config(config)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    overrides = {}
    if path:
        overrides["path"] = path
    if bin:
        overrides["bin"] = bin
    if overrides:
        cfg = replace(cfg, **overrides)

    selector = _select_revision(rev, rev_range, all_refs, number, since, until)
    params = Params(merges_only=merges_only, ignore_merges=no_merges, reverse=reverse)

    try:
        commits = GitLog(cfg).log(selector, params)
    except GitLogError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(format_commits_json(commits))
    else:
        typer.echo(format_commits_table(commits))


if __name__ == "__main__":
    app()
