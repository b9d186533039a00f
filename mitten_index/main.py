"""CLI entry point for the Mitten Index."""

import asyncio
import csv
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn

from .config import DEFAULT_CONCURRENCY, DEFAULT_RATE_LIMIT, LOG_LEVEL
from .errors import MittenIndexError
from .lookup import check_location
from .output import format_table, format_json, export_to_csv
from .utils import configure_logging, run_bulk_lookups

app = typer.Typer(
    name="mitten-index",
    help="Score how brutal the weather feels outside and get dressing advice.",
    add_completion=False,
)
console = Console()

OUTPUT_FORMATS = ["table", "json"]


@app.command()
def check(
    query: str = typer.Argument(..., help="ZIP code, city name, or 'lat,lon'"),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table or json",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (CSV format)",
    ),
    log_level: str = typer.Option(LOG_LEVEL, "--log-level", help="Logging level"),
) -> None:
    """Score the current weather at one location."""
    configure_logging(log_level)

    if output_format not in OUTPUT_FORMATS:
        console.print(f"[red]Invalid format: {output_format}[/red]")
        raise typer.Exit(1)

    try:
        result = check_location(query)
    except MittenIndexError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if output:
        export_to_csv([result], output)
        console.print(f"[green]Results saved to {output}[/green]")
    elif output_format == "json":
        format_json(result, console)
    else:
        format_table(result, console)


@app.command("check-bulk")
def check_bulk(
    input_file: str = typer.Argument(..., help="File with one location per line, or a CSV with a 'location' column"),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output CSV file path",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show progress for each location",
    ),
    concurrency: int = typer.Option(
        DEFAULT_CONCURRENCY,
        "--concurrency",
        help="Number of concurrent lookups",
    ),
    log_level: str = typer.Option(LOG_LEVEL, "--log-level", help="Logging level"),
) -> None:
    """Score many locations listed in a file."""
    configure_logging(log_level)

    input_path = Path(input_file)
    if not input_path.exists():
        console.print(f"[red]File not found: {input_file}[/red]")
        raise typer.Exit(1)

    queries = read_locations(input_path)
    if not queries:
        console.print("[red]No locations found in file[/red]")
        raise typer.Exit(1)

    console.print(f"[cyan]Checking {len(queries)} locations (concurrency: {concurrency})...[/cyan]")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Checking...", total=len(queries))

        def on_progress(query: str, result: dict | None, error: Exception | None):
            progress.advance(task)
            if not verbose:
                return
            if error:
                console.print(f"  [red]Error: {query}: {error}[/red]")
            elif result:
                console.print(f"  [dim]{query}[/dim]: {result['score']}/100 ({result['category']})")

        results = asyncio.run(
            run_bulk_lookups(
                queries=queries,
                lookup_func=check_location,
                concurrency=concurrency,
                rate_limit=DEFAULT_RATE_LIMIT,
                on_progress=on_progress,
            )
        )

    failed = sum(1 for r in results if r.get("error"))
    console.print(f"\n[green]Checked {len(results) - failed}/{len(results)} locations[/green]")

    if output:
        export_to_csv(results, output)
        console.print(f"[green]Results saved to {output}[/green]")
        return

    console.print("\n[bold]Results Summary:[/bold]")
    for result in results[:10]:
        query = result.get("query", "?")
        if result.get("error"):
            console.print(f"  {query}: [red]{result['error']}[/red]")
        else:
            console.print(f"  {query}: {result['score']}/100 ({result['category']}) - {result['recommendation']}")

    if len(results) > 10:
        console.print(f"  ... and {len(results) - 10} more")
        console.print("\n[dim]Use --output to save full results to CSV[/dim]")


def read_locations(path: Path) -> list[str]:
    """Read location queries from a CSV with a 'location' column or a plain list."""
    locations = []

    with path.open("r", encoding="utf-8") as f:
        first_line = f.readline()
        f.seek(0)

        if first_line.strip().lower().split(",")[0] == "location":
            reader = csv.DictReader(f)
            for row in reader:
                location = (row.get("location") or row.get("Location") or "").strip()
                if location:
                    locations.append(location)
        else:
            # "lat,lon" lines contain commas, so the plain format is line based
            for line in f:
                line = line.strip()
                if line and not line.startswith("#"):
                    locations.append(line)

    return locations


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", help="Bind port"),
    log_level: str = typer.Option("info", "--log-level", help="Logging level"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    from .api import create_app

    uvicorn.run(create_app(log_level=log_level), host=host, port=port, log_level=log_level.lower())


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"mitten-index version {__version__}")


if __name__ == "__main__":
    app()
