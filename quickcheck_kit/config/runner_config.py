"""
Runner configuration.

Trace settings are threaded into each runner explicitly instead of being
read from a global at call time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..utilities.console import create_stderr_sink
from ..utilities.constants import DEFAULT_ITERATIONS, PREVIEW_LENGTH
from ..utilities.validators import validate_non_negative_int, validate_positive_int
from .environment import EnvironmentConfig, get_environment_config

if TYPE_CHECKING:
    from ..core.types import TraceSink


@dataclass(frozen=True)
class RunnerConfig:
    """
    Immutable runner settings.

    Attributes:
        trace_enabled: Echo each sampled value before testing it
        trace_sink: Where trace lines go (stderr console when None)
        preview_length: Characters of the serialized value shown per trace line
        default_iterations: Trials per run when the caller passes none
    """

    trace_enabled: bool = False
    trace_sink: TraceSink | None = None
    preview_length: int = PREVIEW_LENGTH
    default_iterations: int = DEFAULT_ITERATIONS

    def __post_init__(self):
        """Validate configuration after initialization."""
        validate_positive_int(self.preview_length, "preview_length")
        validate_non_negative_int(self.default_iterations, "default_iterations")
        if self.trace_enabled and self.trace_sink is None:
            object.__setattr__(self, "trace_sink", create_stderr_sink())

    @classmethod
    def from_environment(cls, environment: EnvironmentConfig | None = None) -> RunnerConfig:
        """Create the configuration implied by the process environment."""
        environment = environment or get_environment_config()
        return cls(trace_enabled=environment.debug_quickcheck)
