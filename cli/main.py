"""pricescan CLI — entry-point for price collection.

Usage:
    python cli/main.py --help

Commands:
    prices    → scrape every result page for a postcode, save and summarise
    stats     → summarise a previously saved price file
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from pricescan.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from pricescan.config import settings
from pricescan.output import read_prices, write_prices
from pricescan.scraper import PageFetchError, ParseError, SearchParams, scrape_prices
from pricescan.stats import calculate_price_stats

app = typer.Typer(
    name="pricescan",
    help="Collect listing prices from property search results.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Scrape
# ---------------------------------------------------------------------------
@app.command("prices")
def prices(
    postcode: str = typer.Argument(..., help="Postcode or area to search around."),
    price_min: Optional[int] = typer.Option(None, min=0, help="Minimum asking price."),
    price_max: Optional[int] = typer.Option(None, min=0, help="Maximum asking price."),
    beds_min: Optional[int] = typer.Option(None, min=0, help="Minimum bedrooms."),
    beds_max: Optional[int] = typer.Option(None, min=0, help="Maximum bedrooms."),
    radius: int = typer.Option(0, min=0, help="Search radius in miles."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Where to write the JSON price list."
    ),
    base_url: Optional[str] = typer.Option(None, help="Override the search endpoint."),
) -> None:
    """Scrape every result page, write the prices and print their statistics."""
    params = SearchParams(
        postcode=postcode,
        price_min=price_min,
        price_max=price_max,
        beds_min=beds_min,
        beds_max=beds_max,
        radius=radius,
    )

    try:
        collected = scrape_prices(params, base_url=base_url)
    except PageFetchError as exc:
        typer.echo(f"[prices] ✗ {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"[prices] got {len(collected)} prices")
    if not collected:
        return

    path = write_prices(collected, output or settings.output_path)
    typer.echo(f"[prices] wrote price data to {path}")

    stats = calculate_price_stats(collected)
    typer.echo(f"[prices] price stats: {stats}")


# ---------------------------------------------------------------------------
# Summarise
# ---------------------------------------------------------------------------
@app.command("stats")
def stats(
    path: Path = typer.Argument(..., help="JSON price file written by 'prices'."),
) -> None:
    """Print the mean and standard deviation of a saved price file."""
    try:
        saved = read_prices(path)
    except (OSError, ParseError) as exc:
        typer.echo(f"[stats] ✗ {exc}", err=True)
        raise typer.Exit(code=1)

    if not saved:
        typer.echo(f"[stats] {path} holds no prices.", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"[stats] {len(saved)} prices: {calculate_price_stats(saved)}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
