# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires a fresh, empty ProjectRegistry into a Session,
- provides the stdout/stderr adapters for the console ports.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..config import get_settings
from ..core.ports import Clock
from ..core.state import Session
from ..tasks.task_store import ProjectRegistry

logger = logging.getLogger(__name__)


def create_session(*, settings=None, clock: Clock | None = None) -> Session:
    """
    Create a Session from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    session = Session(settings=settings, registry=ProjectRegistry())
    if clock is not None:
        session.clock = clock
    logger.debug("Session created (reset_existing_projects=%s).", session.reset_existing_projects)
    return session


class StreamSink:
    """TextSink over a text stream; flushes so prompts show up before input is read."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> int:
        n = self._stream.write(text)
        self._stream.flush()
        return n


class StderrErrorSink:
    """ErrorSink that logs the error and shows its one-line message on stderr."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stderr

    def report(self, error: Exception) -> None:
        logger.warning("Command failed: %s", error)
        print(str(error), file=self._stream, flush=True)
