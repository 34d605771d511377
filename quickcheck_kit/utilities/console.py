"""
Console output for trace mode.

Trace lines are written to stderr through a rich console with markup and
highlighting disabled, so sampled values are echoed verbatim.
"""

from rich.console import Console


class ConsoleTraceSink:
    """Trace sink writing one line per trial to stderr."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True, highlight=False, soft_wrap=True)

    def __call__(self, line: str) -> None:
        self.console.print(line, markup=False, emoji=False)


def create_stderr_sink() -> ConsoleTraceSink:
    """Create the default trace sink."""
    return ConsoleTraceSink()
