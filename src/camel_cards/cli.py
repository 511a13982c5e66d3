"""Command-line interface for ranking camel cards hands."""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .evaluator import HandEvaluator
from .models import Entry
from .parser import ParseError, load_entries
from .parser.entry_parser import parse_hand
from .ranker import HandRanker, Standing, total_winnings

console = Console()

RESULT_LABEL = "The result value is"


def configure_logging(verbose: bool = False) -> None:
    """Route log records through rich on the shared console."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def load_or_exit(input_path: str) -> list[Entry]:
    """Load entries, aborting the run on the first problem."""
    try:
        return load_entries(input_path)
    except (ParseError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


def display_standings(standings: list[Standing], limit: Optional[int] = None) -> None:
    """Display the ranked entries, strongest first."""
    table = Table(title="Standings")
    table.add_column("Rank", style="cyan", justify="right")
    table.add_column("Hand", style="bold")
    table.add_column("Tier", style="magenta")
    table.add_column("Wager", justify="right")
    table.add_column("Payout", style="green", justify="right")

    shown = list(reversed(standings))
    if limit is not None:
        shown = shown[:limit]

    for standing in shown:
        entry = standing.entry
        table.add_row(
            str(standing.position),
            str(entry.hand),
            entry.tier.label,
            f"{entry.wager:,}",
            f"{standing.payout:,}",
        )

    console.print(table)
    if limit is not None and limit < len(standings):
        console.print(f"[dim](showing {limit} of {len(standings)} entries)[/dim]")


def display_tier_distribution(entries: list[Entry]) -> None:
    """Display how many entries fall into each tier."""
    stats = HandRanker().get_tier_distribution(entries)

    table = Table(title="Tier Distribution")
    table.add_column("Tier", style="cyan")
    table.add_column("Count", style="yellow", justify="right")

    for tier, count in reversed(stats["tiers"].items()):
        table.add_row(tier, str(count))

    console.print(table)
    console.print(f"  Entries: {stats['total']}")
    console.print(f"  Total wagered: {stats['total_wager']:,}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Camel Cards - rank hands and compute total winnings."""
    configure_logging(verbose)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
def winnings(input_path: str):
    """Print the total winnings for an input file."""
    entries = load_or_exit(input_path)
    ranked = HandRanker().rank(entries)
    click.echo(f"{RESULT_LABEL} {total_winnings(ranked)}")


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--limit", "-n", type=click.IntRange(min=1), help="Show only the N strongest entries")
def rank(input_path: str, limit: Optional[int]):
    """Show every entry's final position and payout."""
    entries = load_or_exit(input_path)
    if not entries:
        console.print("[yellow]No entries found.[/yellow]")

    standings = HandRanker().standings(entries)
    display_standings(standings, limit=limit)
    display_tier_distribution(entries)

    total = sum(standing.payout for standing in standings)
    console.print(f"\n[bold]{RESULT_LABEL} {total}[/bold]")


@cli.command()
@click.argument("hands", nargs=-1, required=True)
def evaluate(hands: tuple):
    """Show the tier of one or more hands (e.g. QQQJA)."""
    evaluator = HandEvaluator()
    for symbols in hands:
        try:
            hand = parse_hand(symbols)
        except ParseError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            sys.exit(1)

        details = evaluator.describe(hand)
        counts = ", ".join(f"{symbol}x{count}" for symbol, count in details["counts"].items())
        console.print(
            f"{details['hand']}: [bold]{details['tier'].label}[/bold] "
            f"[dim]({counts or 'all wild'}; wildcards: {details['wildcards']})[/dim]"
        )


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
