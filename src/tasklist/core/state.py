# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..tasks.task_store import ProjectRegistry
from .ports import Clock


@dataclass
class Session:
    # Settings object (tasklist.config.Settings or a test double with the same fields).
    settings: object

    registry: ProjectRegistry = field(default_factory=ProjectRegistry)
    clock: Clock = date.today

    def today(self) -> date:
        return self.clock()

    @property
    def reset_existing_projects(self) -> bool:
        return bool(getattr(self.settings, "reset_existing_projects", False))
