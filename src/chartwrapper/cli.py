"""CLI interface for chartwrapper."""

import os
import sys

import typer
from dotenv import load_dotenv
from rich.console import Console

from .chart import Dimension
from .charts import DataChart, GoogleOMeter, GoogleOMeterValue, PieChart, PieChartSlice
from .coder import create_encoder, supported_encodings
from .constants import GOOGLE_API, GOOGLE_POST_API
from .data import ChartTitle
from .image import ChartFetchError, fetch_image
from .log import configure_logging

# Load environment variables from .env file
load_dotenv()

API_URL_ENV = "CHARTWRAPPER_API_URL"
CHART_KINDS = ("pie", "meter")

console = Console()
err_console = Console(stderr=True)


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    values: list[float] = typer.Argument(None, help="Data values of the chart"),
    kind: str = typer.Option(
        "pie",
        "--kind",
        "-k",
        help=f"Chart kind ({', '.join(CHART_KINDS)})",
    ),
    labels: list[str] = typer.Option(
        None,
        "--label",
        "-l",
        help="Label for the value at the same position (repeatable)",
    ),
    colors: list[str] = typer.Option(
        None,
        "--color",
        "-c",
        help="Chart color, e.g. red or #ff000080 (repeatable)",
    ),
    size: str = typer.Option(
        None,
        "--size",
        "-s",
        help="Chart size as WIDTHxHEIGHT or HEIGHT",
    ),
    title: str = typer.Option(None, "--title", "-t", help="Chart title"),
    three_d: bool = typer.Option(False, "--3d", help="Render a three dimensional pie"),
    encoding: str = typer.Option(
        "auto",
        "--encoding",
        "-e",
        help=f"Data encoding ({', '.join(supported_encodings())})",
    ),
    post: bool = typer.Option(False, "--post", help="Print an HTML POST form instead of a url"),
    fetch: str = typer.Option(
        None,
        "--fetch",
        "-f",
        help="Download the rendered chart image to this path",
    ),
    base_url: str = typer.Option(
        None,
        "--base-url",
        help=(
            "Chart service location for urls, forms and downloads "
            f"(default: ${API_URL_ENV} or {GOOGLE_API})"
        ),
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Build a chart url from values given on the command line.

    Examples:
      # Pie chart with labels
      chartwrapper 60 40 -l Yes -l No --size 300x150

      # Download the rendered image
      chartwrapper 60 40 --fetch chart.png
    """
    if verbose:
        configure_logging(verbose=True)

    try:
        if not values:
            raise CLIError("At least one value is required")
        if post and fetch:
            raise CLIError("Cannot specify both --post and --fetch. Choose one.")

        chart = _build_chart(
            kind, list(values), list(labels or []), list(colors or []), size, title, three_d
        )
        _apply_encoding(chart, encoding)
        override_url = base_url or os.getenv(API_URL_ENV)
        target_url = override_url or GOOGLE_API

        if post:
            post_url = override_url.rstrip("?") if override_url else GOOGLE_POST_API
            _print_raw(chart.get_post_request(post_url))
        elif fetch:
            _fetch_to_file(chart, target_url, fetch)
        else:
            _print_raw(chart.get_url(target_url))

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _print_raw(text: str) -> None:
    """Print without Rich markup, highlighting or line wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _parse_size(size: str | None) -> Dimension:
    """Parse WIDTHxHEIGHT or HEIGHT."""
    if not size:
        return Dimension()
    try:
        if "x" in size.lower():
            width, height = size.lower().split("x", 1)
            return Dimension(width=int(width), height=int(height))
        return Dimension(height=int(size))
    except ValueError as e:
        raise CLIError(f"Invalid size '{size}': {e}")


def _build_chart(
    kind: str,
    values: list[float],
    labels: list[str],
    colors: list[str],
    size: str | None,
    title: str | None,
    three_d: bool,
) -> DataChart:
    if kind not in CHART_KINDS:
        raise CLIError(f"Unknown chart kind '{kind}'. Available: {', '.join(CHART_KINDS)}")
    if len(labels) > len(values):
        raise CLIError(f"Got {len(labels)} labels for {len(values)} values")
    dimension = _parse_size(size)
    chart_title = ChartTitle(title) if title else None
    padded_labels = labels + [""] * (len(values) - len(labels))

    if kind == "meter":
        if three_d:
            raise CLIError("--3d is only supported for pie charts")
        chart = GoogleOMeter(
            dimension,
            [GoogleOMeterValue(label, value) for label, value in zip(padded_labels, values)],
            title=chart_title,
        )
    else:
        chart = PieChart(
            dimension,
            [PieChartSlice(value, label or None) for label, value in zip(padded_labels, values)],
            three_d=three_d,
            title=chart_title,
        )

    try:
        chart.add_chart_colors(colors)
    except ValueError as e:
        raise CLIError(f"Invalid color: {e}")
    return chart


def _apply_encoding(chart: DataChart, encoding: str) -> None:
    try:
        chart.set_encoder(create_encoder(encoding))
    except ValueError as e:
        raise CLIError(str(e))


def _fetch_to_file(chart: DataChart, base_url: str, path: str) -> None:
    console.print(f"[bold blue]Fetching chart from {base_url}...[/bold blue]")
    try:
        image = fetch_image(chart, base_url)
        image.save(path)
    except ChartFetchError as e:
        raise CLIError(str(e))
    except (OSError, ValueError) as e:
        raise CLIError(f"Failed to save image '{path}': {e}")
    console.print(f"[green]✓[/green] Chart saved to {path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
