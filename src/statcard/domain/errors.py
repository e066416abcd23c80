from dataclasses import dataclass


@dataclass(frozen=True)
class StatcardError:
    message: str


@dataclass(frozen=True)
class LegacyFormatError(StatcardError):
    file_name: str
    record_size: int = 0


@dataclass(frozen=True)
class InputError(StatcardError):
    source_path: str


@dataclass(frozen=True)
class ConfigError(StatcardError):
    invalid_keys: tuple[str, ...] = ()
