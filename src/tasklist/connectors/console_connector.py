# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import execute
from ..core.errors import UsageError
from ..core.ports import ErrorSink, LineSource, ShutdownListener, TextSink
from ..core.state import Session

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "> "
DEFAULT_QUIT = "quit"

INTERNAL_ERROR_MESSAGE = "Internal error while handling a command."


def run_console_loop(
    session: Session,
    source: LineSource,
    out: TextSink,
    errors: ErrorSink,
    on_shutdown: ShutdownListener | None = None,
) -> bool:
    """
    Read-execute loop.

    Writes the prompt, then for every line: the quit sentinel (exact match)
    ends the session with no further output; anything else is executed and
    followed by a fresh prompt. Returns True when ended by the sentinel,
    False when the input simply ran out.
    """
    prompt = str(getattr(session.settings, "prompt", DEFAULT_PROMPT))
    quit_command = str(getattr(session.settings, "quit_command", DEFAULT_QUIT))

    logger.info("Console loop started.")
    out.write(prompt)

    for raw in source:
        line = raw.rstrip("\r\n")
        if line == quit_command:
            logger.info("Quit command received.")
            if on_shutdown is not None:
                on_shutdown()
            return True

        try:
            execute(session, line, out)
        except UsageError as e:
            logger.info("Usage error: %s", e)
            errors.report(e)
        except Exception as e:
            logger.exception("Command handler crashed on line %r.", line)
            out.write(f"{INTERNAL_ERROR_MESSAGE}\n")
            errors.report(e)

        out.write(prompt)

    logger.info("Console input exhausted, exiting.")
    return False
