# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The interpreter and the console loop depend on these Protocols instead of
sys.stdin/sys.stdout, so tests can drive a whole session in memory.
"""

from collections.abc import Iterator
from datetime import date
from typing import Protocol


class LineSource(Protocol):
    """Newline-delimited input; any iterable of str (a file, a list) fits."""

    def __iter__(self) -> Iterator[str]: ...


class TextSink(Protocol):
    """Where prompts and command output go (sys.stdout fits)."""

    def write(self, text: str, /) -> object: ...


class ErrorSink(Protocol):
    """Out-of-band channel for errors that escape a single command line."""

    def report(self, error: Exception) -> None: ...


class ShutdownListener(Protocol):
    """One-shot, fire-and-forget notification that the session has ended."""

    def __call__(self) -> None: ...


class Clock(Protocol):
    """Returns the current calendar date; queried on every evaluation."""

    def __call__(self) -> date: ...
