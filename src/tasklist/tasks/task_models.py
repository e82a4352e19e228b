# src/tasklist/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from ..core.errors import InvalidDeadlineError, InvalidIdentifierError

# Ids come from a signed 64-bit counter.
MAX_IDENTIFIER = 2**63 - 1

DEADLINE_FORMAT = "YYYY-MM-DD"

_DIGITS_RE = re.compile(r"[0-9]+")
_DEADLINE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


@dataclass(frozen=True, slots=True, order=True)
class Identifier:
    """Numeric task id. Equal iff the wrapped integers are equal."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True, order=True)
class Deadline:
    """Calendar date a task is due by (no time of day)."""

    day: date

    def is_on_or_before(self, reference: date) -> bool:
        return self.day <= reference

    def __str__(self) -> str:
        return self.day.isoformat()


def parse_identifier(text: str) -> Identifier:
    """
    Parse a task id typed by the user.

    Only ASCII decimal digits are accepted: no sign, no whitespace,
    nothing after the number. Values that do not fit the id counter fail too.
    """
    if not _DIGITS_RE.fullmatch(text):
        raise InvalidIdentifierError(text)
    value = int(text)
    if value > MAX_IDENTIFIER:
        raise InvalidIdentifierError(text)
    return Identifier(value)


def parse_deadline(text: str) -> Deadline:
    """Parse a deadline in the single accepted layout, YYYY-MM-DD."""
    m = _DEADLINE_RE.fullmatch(text)
    if not m:
        raise InvalidDeadlineError(text, DEADLINE_FORMAT)
    year, month, day = (int(part) for part in m.groups())
    try:
        return Deadline(date(year, month, day))
    except ValueError as e:
        raise InvalidDeadlineError(text, DEADLINE_FORMAT) from e


@dataclass(slots=True)
class Task:
    id: Identifier
    description: str
    done: bool = False
    deadline: Deadline | None = None

    def mark_done(self) -> None:
        self.done = True

    def mark_undone(self) -> None:
        self.done = False

    def set_deadline(self, deadline: Deadline) -> None:
        self.deadline = deadline

    def is_due_by(self, reference: date) -> bool:
        """True iff a deadline is set and falls on or before `reference`."""
        if self.deadline is None:
            return False
        return self.deadline.is_on_or_before(reference)
