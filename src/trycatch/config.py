"""Configuration: frozen Config resolved from overrides and the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from trycatch.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

# Environment variable name per Config field
_ENV_VARS: dict[str, str] = {
    "max_depth": "TRYCATCH_MAX_DEPTH",
}


@dataclass(frozen=True)
class Config:
    """Immutable configuration for try_magic.

    Example:
        config = Config(max_depth=50)
        data, error = await try_magic(thunk, config=config)
    """

    #: Maximum number of thunks try_magic invokes; *None* means unbounded.
    max_depth: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.max_depth is None:
            return
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ConfigurationError(
                "max_depth must be an int or None, "
                f"got {type(self.max_depth).__name__}",
                hint="Pass an integer depth limit, or None to disable the guard.",
            )
        if self.max_depth < 1:
            raise ConfigurationError(
                f"max_depth must be ≥ 1, got {self.max_depth}",
                hint="Use None (the default) for unbounded unwrapping.",
            )


class _Settings(BaseModel):
    """Validation wall for raw environment strings and explicit overrides."""

    model_config = {"extra": "forbid"}

    max_depth: int | None = Field(default=None, ge=1)

    @field_validator("max_depth", mode="before")
    @classmethod
    def blank_means_unbounded(cls, v: Any) -> Any:
        """Treat empty and ``none`` environment values as no limit."""
        if isinstance(v, str):
            v = v.strip()
            if v.lower() in ("", "none"):
                return None
        return v


def resolve_config(overrides: Mapping[str, Any] | None = None) -> Config:
    """Resolve a Config from the environment, then explicit overrides.

    A ``.env`` file is loaded first without replacing variables that are
    already set. Precedence: overrides > environment > defaults.

    Raises:
        ConfigurationError: When a value fails validation or a key is unknown.
    """
    load_dotenv(override=False)

    raw: dict[str, Any] = {}
    for field_name, env_var in _ENV_VARS.items():
        value = os.environ.get(env_var)
        if value is not None:
            raw[field_name] = value
    if overrides:
        raw.update(overrides)

    try:
        settings = _Settings.model_validate(raw)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(
            f"Invalid trycatch configuration: {problems}",
            hint="Check TRYCATCH_* environment variables and overrides.",
        ) from e

    return Config(**settings.model_dump())

