"""
Environment configuration for Quickcheck-Kit.

The trace toggle is read from the process environment once and cached
for the life of the process.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from ..utilities.constants import DEBUG_ENV_VAR, FALSY_ENV_VALUES


def parse_env_flag(raw: str | None) -> bool:
    """Interpret a boolean-like environment value; unset or falsy means off."""
    if raw is None:
        return False
    return raw.strip().lower() not in FALSY_ENV_VALUES


@dataclass(frozen=True)
class EnvironmentConfig:
    """Settings resolved from environment variables."""

    debug_quickcheck: bool = False


def load_environment_config(environ: Mapping[str, str]) -> EnvironmentConfig:
    """Build an EnvironmentConfig from an arbitrary mapping."""
    return EnvironmentConfig(debug_quickcheck=parse_env_flag(environ.get(DEBUG_ENV_VAR)))


@lru_cache(maxsize=1)
def get_environment_config() -> EnvironmentConfig:
    """Get the process-wide environment configuration (read once)."""
    return load_environment_config(os.environ)
