# src/tasklist/core/errors.py

"""
Error kinds raised by the task engine.

Every error carries a one-line, user-facing message (str(exc)); the
interpreter prints it as-is. They subclass ValueError because each one
describes bad user input, not a broken program.
"""

from __future__ import annotations


class TaskListError(ValueError):
    """Base class for all user-input errors of the task list."""


class InvalidIdentifierError(TaskListError):
    def __init__(self, text: str) -> None:
        super().__init__(f'Invalid ID "{text}".')
        self.text = text


class InvalidDeadlineError(TaskListError):
    def __init__(self, text: str, expected: str = "YYYY-MM-DD") -> None:
        super().__init__(f'Invalid deadline "{text}". Expected format {expected}.')
        self.text = text


class ProjectNotFoundError(TaskListError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Could not find a project with the name "{name}".')
        self.name = name


class ProjectExistsError(TaskListError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Project "{name}" already exists.')
        self.name = name


class TaskNotFoundError(TaskListError):
    def __init__(self, task_id: object) -> None:
        super().__init__(f'Task with ID "{task_id}" not found.')
        self.task_id = task_id


class UsageError(TaskListError):
    """Too few (or too many) arguments for a command."""

    def __init__(self, command: str, usage: str) -> None:
        super().__init__(f"could not execute {command}. Usage: {usage}")
        self.command = command
        self.usage = usage
