"""Game options and their environment variable overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Callable, Mapping, Optional, TypeVar

ROWS_ENV_VAR = "LIGHTS_OUT_ROWS"
COLS_ENV_VAR = "LIGHTS_OUT_COLS"
LIT_PROBABILITY_ENV_VAR = "LIGHTS_OUT_LIT_PROBABILITY"
SEED_ENV_VAR = "LIGHTS_OUT_SEED"

DEFAULT_ROWS = 5
DEFAULT_COLS = 5
DEFAULT_LIT_PROBABILITY = 0.25

T = TypeVar("T")


@dataclass(frozen=True)
class GameConfig:
    """Board size and starting density for a game."""

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    lit_probability: float = DEFAULT_LIT_PROBABILITY
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        validate_config(self)

    def with_overrides(self, **overrides: object) -> "GameConfig":
        """Return a copy with every non-``None`` override applied."""

        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        return replace(self, **values)


def validate_config(config: GameConfig) -> None:
    for name in ("rows", "cols"):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"{name} must be a positive integer, got {value!r}")
    probability = config.lit_probability
    if isinstance(probability, bool) or not isinstance(probability, (int, float)):
        raise ValueError(
            f"lit_probability must be a number, got {probability!r}"
        )
    if not 0.0 <= probability <= 1.0:
        raise ValueError(
            f"lit_probability must be between 0 and 1, got {probability!r}"
        )
    if config.seed is not None and (
        isinstance(config.seed, bool) or not isinstance(config.seed, int)
    ):
        raise ValueError(f"seed must be an integer, got {config.seed!r}")


def _read_value(
    environ: Mapping[str, str], env_var: str, convert: Callable[[str], T]
) -> Optional[T]:
    value = environ.get(env_var)
    if value is None or not value.strip():
        return None
    try:
        return convert(value.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid value for {env_var}: {value!r}") from exc


def resolve_config(environ: Optional[Mapping[str, str]] = None) -> GameConfig:
    """Build a :class:`GameConfig` from defaults and environment variables.

    Parameters
    ----------
    environ:
        Mapping to read from. Defaults to :data:`os.environ`; tests pass a
        plain dictionary.
    """

    environ = os.environ if environ is None else environ
    return GameConfig().with_overrides(
        rows=_read_value(environ, ROWS_ENV_VAR, int),
        cols=_read_value(environ, COLS_ENV_VAR, int),
        lit_probability=_read_value(environ, LIT_PROBABILITY_ENV_VAR, float),
        seed=_read_value(environ, SEED_ENV_VAR, int),
    )


__all__ = [
    "COLS_ENV_VAR",
    "DEFAULT_COLS",
    "DEFAULT_LIT_PROBABILITY",
    "DEFAULT_ROWS",
    "GameConfig",
    "LIT_PROBABILITY_ENV_VAR",
    "ROWS_ENV_VAR",
    "SEED_ENV_VAR",
    "resolve_config",
    "validate_config",
]
