from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from statcard.domain.errors import ConfigError
from statcard.domain.result import Err, Ok, Result


class AppConfig(Protocol):
    def __getitem__(self, key: str) -> object: ...


_DEFAULTS: dict[str, object] = {
    "generation": {
        "workers": 1,
        "min_pitcher_outs": 1,
        "season_year": 1971,
    },
}


@dataclass(frozen=True)
class GenerationSettings:
    workers: int = 1
    min_pitcher_outs: int = 1
    season_year: int = 1971


def create_config(
    yaml_path: str = "statcard.yaml",
    env_prefix: str = "STATCARD",
    defaults: dict[str, object] | None = None,
    *,
    workers: int | None = None,
    season_year: int | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables (``STATCARD__GENERATION__WORKERS``).
        defaults: Default configuration values.
        workers: Override the worker count, typically from a CLI flag.
        season_year: Override the season year, typically from a CLI flag.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]

    overrides = _build_overrides(workers, season_year)
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _build_overrides(workers: int | None, season_year: int | None) -> dict[str, object]:
    generation: dict[str, object] = {}
    if workers is not None:
        generation["workers"] = workers
    if season_year is not None:
        generation["season_year"] = season_year
    return {"generation": generation} if generation else {}


def load_generation_settings(cfg: AppConfig | None = None) -> GenerationSettings:
    if cfg is None:
        cfg = create_config()
    return GenerationSettings(
        workers=max(1, int(str(cfg["generation.workers"]))),
        min_pitcher_outs=max(0, int(str(cfg["generation.min_pitcher_outs"]))),
        season_year=int(str(cfg["generation.season_year"])),
    )


def validate_generation_settings(cfg: AppConfig) -> Result[GenerationSettings, ConfigError]:
    """Like ``load_generation_settings`` but reports non-integer values instead of raising."""
    bad = []
    for key in ("workers", "min_pitcher_outs", "season_year"):
        try:
            int(str(cfg[f"generation.{key}"]))
        except (KeyError, ValueError):
            bad.append(key)
    if bad:
        return Err(ConfigError(f"Invalid generation settings: {', '.join(bad)}", tuple(bad)))
    return Ok(load_generation_settings(cfg))
