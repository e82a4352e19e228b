# src/tasklist/cli/commands.py

"""
Command interpreter.

A line is parsed into a Command whose kind comes from the closed CommandKind
enum; the registry then dispatches it to exactly one handler. Verbs outside
the enum all land in the UNKNOWN arm.

Error policy:
- TaskListError subclasses are user mistakes: their message is printed to
  the output sink and the line is done.
- UsageError is the exception: it escapes execute() so the read loop can
  forward it to the error channel.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from ..core.errors import TaskListError, UsageError
from ..core.ports import TextSink
from ..core.state import Session
from ..tasks.task_models import DEADLINE_FORMAT, parse_deadline, parse_identifier
from ..tasks.task_view import render_by_deadline, render_due, render_projects

logger = logging.getLogger(__name__)


class CommandKind(StrEnum):
    SHOW = "show"
    VIEW = "view"
    ADD = "add"
    CHECK = "check"
    UNCHECK = "uncheck"
    DEADLINE = "deadline"
    TODAY = "today"
    HELP = "help"
    UNKNOWN = "<unknown>"


_VERBS: dict[str, CommandKind] = {
    kind.value: kind for kind in CommandKind if kind is not CommandKind.UNKNOWN
}


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    verb: str
    args: tuple[str, ...] = ()


def parse_command(line: str) -> Command | None:
    """
    Split a line on whitespace; the first token is the verb (case-sensitive).
    Returns None for a blank line.
    """
    parts = line.split()
    if not parts:
        return None
    verb, args = parts[0], tuple(parts[1:])
    return Command(kind=_VERBS.get(verb, CommandKind.UNKNOWN), verb=verb, args=args)


CommandHandler = Callable[[Session, Sequence[str], TextSink], None]


def _println(out: TextSink, text: str = "") -> None:
    out.write(f"{text}\n")


class CommandRegistry:
    """Maps every CommandKind (except UNKNOWN) to one handler plus its help lines."""

    def __init__(self) -> None:
        self._handlers: dict[CommandKind, CommandHandler] = {}
        self._usage: dict[CommandKind, list[str]] = {}

    def register(self, kind: CommandKind, handler: CommandHandler, usage: list[str]) -> None:
        if kind is CommandKind.UNKNOWN:
            raise ValueError("UNKNOWN is the fallback arm and cannot have a handler")
        self._handlers[kind] = handler
        self._usage[kind] = list(usage)

    def missing_kinds(self) -> list[CommandKind]:
        return [k for k in _VERBS.values() if k not in self._handlers]

    def dispatch(self, session: Session, command: Command, out: TextSink) -> None:
        if command.kind is CommandKind.UNKNOWN:
            logger.debug("Unknown command verb=%r", command.verb)
            _println(out, f'Unknown command "{command.verb}".')
            return

        handler = self._handlers.get(command.kind)
        if handler is None:
            raise LookupError(f"No handler registered for {command.kind.value!r}")

        try:
            handler(session, command.args, out)
        except UsageError:
            raise
        except TaskListError as e:
            logger.debug("%s failed: %s", command.kind.value, e)
            _println(out, str(e))

    def build_help(self) -> str:
        lines = ["Commands:"]
        for usage in self._usage.values():
            lines.extend(f"  {u}" for u in usage)
        return "\n".join(lines)


registry = CommandRegistry()


def execute(
    session: Session,
    line: str,
    out: TextSink,
    *,
    commands: CommandRegistry | None = None,
) -> None:
    """Run one input line against the session. Raises UsageError only."""
    command = parse_command(line)
    if command is None:
        return
    (commands or registry).dispatch(session, command, out)


# ---- handlers ----

ADD_USAGE = "add project <project name> | add task <project name> <task description>"
DEADLINE_USAGE = f"deadline <task ID> <date as {DEADLINE_FORMAT}>"
VIEW_USAGE = "view by project | view by deadline"


def cmd_show(session: Session, args: Sequence[str], out: TextSink) -> None:
    out.write(render_projects(session.registry))


def cmd_today(session: Session, args: Sequence[str], out: TextSink) -> None:
    # "today" is read on every call so a long session follows the calendar.
    out.write(render_due(session.registry, session.today()))


def cmd_view(session: Session, args: Sequence[str], out: TextSink) -> None:
    """
    view by project   -> same as show
    view by deadline  -> tasks grouped by due date
    """
    if len(args) != 2 or args[0] != "by":
        _println(out, f"Usage: {VIEW_USAGE}")
        return

    mode = args[1]
    if mode == "project":
        out.write(render_projects(session.registry))
    elif mode == "deadline":
        out.write(render_by_deadline(session.registry))
    else:
        _println(out, f"Usage: {VIEW_USAGE}")


def cmd_add(session: Session, args: Sequence[str], out: TextSink) -> None:
    if len(args) < 2:
        raise UsageError("add", ADD_USAGE)

    sub, name = args[0], args[1]
    if sub == "project":
        if len(args) != 2:
            raise UsageError("add", ADD_USAGE)
        session.registry.create_project(name, replace=session.reset_existing_projects)
    elif sub == "task":
        if len(args) < 3:
            raise UsageError("add", ADD_USAGE)
        session.registry.add_task(name, " ".join(args[2:]))
    else:
        raise UsageError("add", ADD_USAGE)


def _set_done(session: Session, args: Sequence[str], out: TextSink, verb: str, done: bool) -> None:
    if len(args) != 1:
        _println(out, f"Usage: {verb} <task ID>")
        return

    task = session.registry.find_task(parse_identifier(args[0]))
    if done:
        task.mark_done()
    else:
        task.mark_undone()
    logger.debug("Task %s done=%s", task.id, task.done)


def cmd_check(session: Session, args: Sequence[str], out: TextSink) -> None:
    _set_done(session, args, out, "check", True)


def cmd_uncheck(session: Session, args: Sequence[str], out: TextSink) -> None:
    _set_done(session, args, out, "uncheck", False)


def cmd_deadline(session: Session, args: Sequence[str], out: TextSink) -> None:
    # Count first: both positional tokens must exist before either is read.
    if len(args) != 2:
        raise UsageError("deadline", DEADLINE_USAGE)

    task_id = parse_identifier(args[0])
    deadline = parse_deadline(args[1])
    task = session.registry.find_task(task_id)
    task.set_deadline(deadline)
    logger.debug("Task %s deadline=%s", task.id, deadline)


def cmd_help(session: Session, args: Sequence[str], out: TextSink) -> None:
    quit_command = str(getattr(session.settings, "quit_command", "quit"))
    _println(out, registry.build_help())
    _println(out, f"  {quit_command}")


registry.register(CommandKind.SHOW, cmd_show, ["show"])
registry.register(CommandKind.VIEW, cmd_view, ["view by project", "view by deadline"])
registry.register(
    CommandKind.ADD,
    cmd_add,
    ["add project <project name>", "add task <project name> <task description>"],
)
registry.register(CommandKind.CHECK, cmd_check, ["check <task ID>"])
registry.register(CommandKind.UNCHECK, cmd_uncheck, ["uncheck <task ID>"])
registry.register(CommandKind.DEADLINE, cmd_deadline, [DEADLINE_USAGE])
registry.register(CommandKind.TODAY, cmd_today, ["today"])
registry.register(CommandKind.HELP, cmd_help, ["help"])

if registry.missing_kinds():
    raise RuntimeError(f"Commands without a handler: {registry.missing_kinds()}")
