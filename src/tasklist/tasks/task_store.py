# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..core.errors import ProjectExistsError, ProjectNotFoundError, TaskNotFoundError
from .task_models import Identifier, Task

logger = logging.getLogger(__name__)


class ProjectRegistry:
    """
    In-memory task store: projects keyed by name, tasks in insertion order.

    The registry also owns the id counter. Ids are unique across all
    projects, strictly increasing, and never handed out twice. Nothing is
    persisted; the registry lives as long as its session.
    """

    def __init__(self) -> None:
        self._projects: dict[str, list[Task]] = {}
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._projects)

    @property
    def last_id(self) -> int:
        return self._last_id

    # ---- projects ----

    def has_project(self, name: str) -> bool:
        return name in self._projects

    def create_project(self, name: str, *, replace: bool = False) -> None:
        """
        Create an empty project.

        An existing name raises ProjectExistsError, unless replace=True,
        in which case its task list is reset to empty.
        """
        if name in self._projects:
            if not replace:
                raise ProjectExistsError(name)
            logger.info(
                "Resetting project %r (dropping %d tasks).", name, len(self._projects[name])
            )
        self._projects[name] = []
        logger.debug("Project created name=%r", name)

    def projects_sorted_by_name(self) -> list[tuple[str, tuple[Task, ...]]]:
        return [(name, tuple(self._projects[name])) for name in sorted(self._projects)]

    # ---- tasks ----

    def _next_id(self) -> Identifier:
        self._last_id += 1
        return Identifier(self._last_id)

    def add_task(self, project_name: str, description: str) -> Identifier:
        tasks = self._projects.get(project_name)
        if tasks is None:
            raise ProjectNotFoundError(project_name)

        task = Task(id=self._next_id(), description=description)
        tasks.append(task)
        logger.debug("Task added id=%s project=%r", task.id, project_name)
        return task.id

    def all_tasks(self) -> Iterator[Task]:
        for tasks in self._projects.values():
            yield from tasks

    def task_count(self) -> int:
        return sum(len(tasks) for tasks in self._projects.values())

    def find_task(self, task_id: Identifier) -> Task:
        for task in self.all_tasks():
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)
