#!/usr/bin/env python3
"""
Crosslist command line entry point.

Usage:
    crosslist intersect followers.csv following.csv
    crosslist intersect a.csv b.csv --classify --mode direct --api-key sk-...
    crosslist scrape someone --type followers --session-id <cookie>
"""

import asyncio
import sys
from pathlib import Path

import click
from loguru import logger
from rich.console import Console
from rich.table import Table

from crosslist.classification import ClassifierMode, build_batcher
from crosslist.config import get_settings
from crosslist.connectors import InstagramListType, InstagramScraper
from crosslist.exceptions import ClassificationError, CrosslistError, InvalidCredentialError
from crosslist.export import format_profiles_csv
from crosslist.models import Category, GenderStats
from crosslist.runner import ListMatchPipeline
from crosslist.utils.logging import setup_logging

console = Console()


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug):
    """Crosslist - intersect follower exports and classify common names"""
    if debug:
        setup_logging(level="DEBUG")


def _write(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")
    console.print(f"  [dim]{path}[/dim]")


def _stats_table(stats: GenderStats) -> Table:
    table = Table(title="Classification")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right", style="green")
    table.add_row("Common users", str(stats.total))
    table.add_row("With names", str(stats.with_names))
    table.add_row("Male", str(stats.male))
    table.add_row("Female", str(stats.female))
    table.add_row("Unknown", str(stats.unknown))
    return table


@cli.command()
@click.argument("file1", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("file2", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--usernames-only", is_flag=True, help="Only require a username column")
@click.option("--classify", is_flag=True, help="Classify common display names by gender")
@click.option(
    "--mode",
    type=click.Choice([m.value for m in ClassifierMode]),
    default=ClassifierMode.AMBIENT.value,
    show_default=True,
    help="How to reach the classifier",
)
@click.option("--api-key", default=None, help="API key for --mode direct")
@click.option(
    "--category",
    type=click.Choice([c.value for c in Category]),
    default=Category.MALE.value,
    show_default=True,
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("data/crosslist_output"),
    show_default=True,
)
def intersect(
    file1: Path,
    file2: Path,
    usernames_only: bool,
    classify: bool,
    mode: str,
    api_key: str | None,
    category: str,
    output_dir: Path,
):
    """
    Find the users present in both FILE1 and FILE2.

    Writes the comma-joined usernames and names, the username:name list and,
    with --classify, the list filtered to one category.
    """
    console.print("\n[bold blue]Crosslist - Intersection[/bold blue]")

    batcher = None
    if classify:
        try:
            batcher = build_batcher(ClassifierMode(mode), get_settings().classifier, api_key=api_key)
        except ClassificationError as e:
            console.print(f"[red]{e}[/red]")
            sys.exit(1)

    pipeline = ListMatchPipeline(batcher=batcher)
    report = pipeline.match_texts(
        file1.read_text(encoding="utf-8"),
        file2.read_text(encoding="utf-8"),
        with_names=not usernames_only,
    )

    if report.is_empty:
        console.print("[yellow]No common users found[/yellow]")
        return

    console.print(f"[green]{len(report.records)} common users found[/green]")
    output_dir.mkdir(parents=True, exist_ok=True)
    plain = report.plain
    _write(output_dir / "common_usernames.csv", plain.usernames)
    if not usernames_only:
        _write(output_dir / "common_names.csv", plain.display_names)
        _write(output_dir / "common_users.txt", report.paired)

    if not classify:
        return

    try:
        report = pipeline.classify(report)
    except InvalidCredentialError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    except ClassificationError as e:
        console.print(f"[red]Classification failed: {e}[/red]")
        sys.exit(1)

    _write(output_dir / f"{category}_users.txt", report.classified(Category(category)))
    console.print(_stats_table(report.stats))


@cli.command()
@click.argument("username")
@click.option(
    "--type",
    "list_type",
    type=click.Choice([t.value for t in InstagramListType]),
    default=InstagramListType.FOLLOWERS.value,
    show_default=True,
)
@click.option("--session-id", envvar="INSTAGRAM_SESSION_ID", required=True, help="Instagram sessionid cookie")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), default=None)
def scrape(username: str, list_type: str, session_id: str, output: Path | None):
    """Download USERNAME's followers or following as a CSV export."""
    console.print("\n[bold blue]Crosslist - Instagram[/bold blue]")
    output = output or Path(f"{username}_{list_type}.csv")

    async def _fetch():
        async with InstagramScraper(session_id, settings=get_settings().instagram) as scraper:
            return await scraper.fetch_profiles(username, InstagramListType(list_type))

    try:
        profiles = asyncio.run(_fetch())
    except CrosslistError as e:
        logger.error(f"Scrape failed: {e}")
        console.print(f"[red]{e}[/red]")
        console.print(
            "[dim]Get the sessionid cookie from a logged-in browser: "
            "DevTools > Application > Cookies > sessionid[/dim]"
        )
        sys.exit(1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(format_profiles_csv(profiles), encoding="utf-8")
    console.print(f"[green]{len(profiles)} profiles written to {output}[/green]")


@cli.command()
def serve():
    """Run the HTTP API."""
    import uvicorn

    api_settings = get_settings().api
    uvicorn.run("api.main:app", host=api_settings.host, port=api_settings.port, reload=api_settings.reload)


if __name__ == "__main__":
    cli()
