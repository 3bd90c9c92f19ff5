"""Shared utilities for CLI commands."""

import time
import tracemalloc
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from src.accounts.core.errors import ValidationError

T = TypeVar("T")

# Initialize Rich consoles for colored output
console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message, on standard error."""
    err_console.print(f"[red]❌ {escape(message)}[/red]")


def ask(question: str, validator: Callable[[str], T]) -> T:
    """Prompt until ``validator`` accepts the answer and return its result.

    The validator raises ``ValidationError`` to reject an answer; the error
    is shown and the question is asked again.
    """
    while True:
        answer = Prompt.ask(f"[cyan]{question}", console=console)
        try:
            return validator(answer)
        except ValidationError as e:
            print_error(e.message)


def log_level_for(verbose: int, quiet: bool) -> str | None:
    """Map -q/-v/-vv/-vvv to a log level; None keeps the configured one."""
    if quiet:
        return "ERROR"
    if verbose >= 3:
        return "DEBUG"
    if verbose == 2:
        return "INFO"
    return None


@dataclass(frozen=True)
class StopwatchEvent:
    """Elapsed wall-clock time and peak traced memory of a measured section."""

    duration_ms: float
    peak_memory_bytes: int

    @property
    def memory_mb(self) -> float:
        return self.peak_memory_bytes / (1024 ** 2)


class Stopwatch:
    """Measure wall-clock time and, optionally, peak memory of a code section."""

    def __init__(self, track_memory: bool = False) -> None:
        self._track_memory = track_memory
        self._started_at: float | None = None
        self._owns_tracing = False

    def start(self) -> None:
        if self._track_memory:
            if tracemalloc.is_tracing():
                tracemalloc.reset_peak()
            else:
                tracemalloc.start()
                self._owns_tracing = True
        self._started_at = time.perf_counter()

    def stop(self) -> StopwatchEvent:
        if self._started_at is None:
            raise RuntimeError("Stopwatch was not started")

        duration_ms = (time.perf_counter() - self._started_at) * 1000
        peak = 0
        if self._track_memory:
            _, peak = tracemalloc.get_traced_memory()
            if self._owns_tracing:
                tracemalloc.stop()
                self._owns_tracing = False

        self._started_at = None
        return StopwatchEvent(duration_ms=duration_ms, peak_memory_bytes=peak)
