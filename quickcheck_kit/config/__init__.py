"""
Configuration management for Quickcheck-Kit.

Provides the environment-derived trace toggle and the runner settings
object built from it.
"""

from .environment import (
    EnvironmentConfig,
    get_environment_config,
    load_environment_config,
    parse_env_flag,
)
from .runner_config import RunnerConfig

__all__ = [
    "EnvironmentConfig",
    "RunnerConfig",
    "get_environment_config",
    "load_environment_config",
    "parse_env_flag",
]
