from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from statcard.cards.power import power_label
from statcard.cards.structural import is_structural_position
from statcard.domain.card import PlayerCard
from statcard.simulation.fallback import direct_outcome

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_card_summary(cards: Sequence[PlayerCard], *, limit: int = 25) -> None:
    console.print(f"[bold green]Generated[/bold green] {len(cards)} cards")
    if not cards:
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("Archetype")
    table.add_column("Power", justify="right")
    table.add_column("Grade", justify="right")
    for card in cards[:limit]:
        grade = str(card.pitching.grade) if card.pitching is not None else ""
        table.add_row(card.name, card.primary_position, str(card.archetype.kind), str(card.power_rating), grade)
    console.print(table)
    if len(cards) > limit:
        console.print(f"  ... and {len(cards) - limit} more")


def print_card_detail(card: PlayerCard, *, vs: str | None = None) -> None:
    header = f"[bold]{card.name}[/bold] ({card.season}, {card.primary_position}, bats {card.batting_hand})"
    if vs is not None:
        header += f" vs {vs}HP"
    console.print(header)
    console.print(f"  Archetype: {card.archetype.kind} {card.archetype.values}")
    console.print(f"  Power: {card.power_rating} ({power_label(card.power_rating)})")
    if card.pitching is not None:
        p = card.pitching
        console.print(f"  Pitching: {p.role} grade {p.grade}, ERA {p.era:.2f}, WHIP {p.whip:.2f}")

    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Slot", justify="right")
    table.add_column("Value", justify="right")
    table.add_column("Outcome")
    for position, value in enumerate(card.card):
        outcome = direct_outcome(value).name.lower()
        if is_structural_position(position):
            outcome = f"[dim]{outcome} (fixed)[/dim]"
        table.add_row(str(position), str(value), outcome)
    console.print(table)


def print_legacy_summary(cards: Sequence[PlayerCard], season: int) -> None:
    pitchers = sum(1 for c in cards if c.is_pitcher)
    console.print(f"[bold green]Imported[/bold green] legacy season [bold]{season}[/bold]")
    console.print(f"  Players: {len(cards)} ({pitchers} pitchers)")
