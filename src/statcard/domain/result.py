"""Ok/Err result type returned by the file loaders.

Usage:
    match load_legacy_season(path):
        case Ok(season):
            ...
        case Err(error):
            print_error(error.message)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    error: E


type Result[T, E] = Ok[T] | Err[E]
