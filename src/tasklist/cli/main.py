# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the Session, then runs the console loop on
stdin/stdout until the quit command, end of input, or a signal.
"""

from __future__ import annotations

import logging
import signal
import sys
import threading

from ..cli.bootstrap import StderrErrorSink, StreamSink, create_session
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    log_file = setup_logging(
        console_level=console_level,
        log_dir=settings.log_dir,
        log_to_file=settings.log_to_file,
    )
    if log_file is not None:
        logger.info("Logging to %s", log_file)

    logger.info("Starting %s...", settings.app_name)
    session = create_session(settings=settings)

    # Set by the console loop when the user types the quit command.
    session_ended = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        raise KeyboardInterrupt

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
    except (ValueError, OSError, AttributeError):
        # Not in the main thread, or no SIGTERM on this platform.
        logger.debug("SIGTERM handler not installed.")

    try:
        run_console_loop(
            session,
            sys.stdin,
            StreamSink(sys.stdout),
            StderrErrorSink(sys.stderr),
            on_shutdown=session_ended.set,
        )
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        print()

    logger.info(
        "Bye. (quit=%s, projects=%d, tasks=%d)",
        session_ended.is_set(),
        len(session.registry),
        session.registry.task_count(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
