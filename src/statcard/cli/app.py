import dataclasses
from pathlib import Path
from typing import Annotated, cast

import typer

from statcard.cards.generator import generate_all_cards
from statcard.cli._logging import configure_logging
from statcard.cli._output import (
    print_card_detail,
    print_card_summary,
    print_error,
    print_legacy_summary,
)
from statcard.config import GenerationSettings, create_config, validate_generation_settings
from statcard.domain.player_season import PlayerSeason, ThrowingHand
from statcard.domain.result import Err
from statcard.legacy.bridge import legacy_season_years, run_legacy_pipeline
from statcard.legacy.loader import load_legacy_season
from statcard.serialization import PlayerCardSerializer, read_player_seasons
from statcard.simulation.platoon import apply_platoon_adjustment

app = typer.Typer(name="statcard", help="Statistical player-card generator")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Statistical player-card generator."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_StatsArg = Annotated[Path, typer.Argument(help="JSON list of player seasons")]
_OutputOpt = Annotated[Path | None, typer.Option("--output", "-o", help="Write cards as JSON to this path")]
_ConfigOpt = Annotated[str, typer.Option("--config", help="YAML config file")]
_HandOpt = Annotated[str | None, typer.Option("--vs", help="Opposing pitcher hand (L or R)")]


def _settings(config: str, *, workers: int | None = None, season_year: int | None = None) -> GenerationSettings:
    result = validate_generation_settings(create_config(config, workers=workers, season_year=season_year))
    if isinstance(result, Err):
        print_error(result.error.message)
        raise typer.Exit(code=1)
    return result.value


def _player_seasons(path: Path) -> list[PlayerSeason]:
    result = read_player_seasons(path)
    if isinstance(result, Err):
        print_error(result.error.message)
        raise typer.Exit(code=1)
    return result.value


@app.command()
def generate(
    stats: _StatsArg,
    output: _OutputOpt = None,
    workers: Annotated[int | None, typer.Option("--workers", help="Worker processes")] = None,
    config: _ConfigOpt = "statcard.yaml",
) -> None:
    """Generate cards for every player season in a JSON file."""
    settings = _settings(config, workers=workers)
    pool = _player_seasons(stats)

    cards = generate_all_cards(pool, workers=settings.workers, min_pitcher_outs=settings.min_pitcher_outs)
    print_card_summary(cards)
    if output is not None:
        output.write_text(PlayerCardSerializer().serialize(cards))


@app.command()
def show(
    stats: _StatsArg,
    player_id: Annotated[str, typer.Argument(help="Player id to display")],
    vs: _HandOpt = None,
    config: _ConfigOpt = "statcard.yaml",
) -> None:
    """Show one player's card slot by slot, optionally against a pitcher hand."""
    if vs is not None and vs not in ("L", "R"):
        print_error(f"--vs must be L or R, got {vs!r}")
        raise typer.Exit(code=1)
    settings = _settings(config)
    pool = _player_seasons(stats)

    # The whole pool is generated so the pitcher grade sees every ERA.
    cards = generate_all_cards(pool, min_pitcher_outs=settings.min_pitcher_outs)
    card = next((c for c in cards if c.player_id == player_id), None)
    if card is None:
        print_error(f"No player {player_id!r} in {stats}")
        raise typer.Exit(code=1)

    if vs is not None:
        card = dataclasses.replace(card, card=apply_platoon_adjustment(card.card, card.batting_hand, cast("ThrowingHand", vs)))
    print_card_detail(card, vs=vs)


@app.command()
def legacy(
    directory: Annotated[Path, typer.Argument(help="Legacy season directory (e.g. 1971S.WDD)")],
    year: Annotated[int | None, typer.Option("--year", help="Season year of the directory")] = None,
    output: _OutputOpt = None,
    config: _ConfigOpt = "statcard.yaml",
) -> None:
    """Import a legacy binary season, keeping each card's bytes as stored."""
    settings = _settings(config, season_year=year)
    if settings.season_year not in legacy_season_years():
        print_error(f"No legacy season for {settings.season_year}; known: {legacy_season_years()}")
        raise typer.Exit(code=1)

    result = load_legacy_season(directory)
    if isinstance(result, Err):
        print_error(result.error.message)
        raise typer.Exit(code=1)
    season = result.value

    cards = run_legacy_pipeline(season.players, season.batting, season.pitching, settings.season_year)
    print_legacy_summary(cards, settings.season_year)
    if output is not None:
        output.write_text(PlayerCardSerializer().serialize(cards))
