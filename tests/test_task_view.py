# tests/test_task_view.py

from __future__ import annotations

from datetime import date

from tasklist.tasks.task_models import Identifier, parse_deadline
from tasklist.tasks.task_store import ProjectRegistry
from tasklist.tasks.task_view import (
    format_task_line,
    render_by_deadline,
    render_due,
    render_projects,
)


def _registry() -> ProjectRegistry:
    reg = ProjectRegistry()
    reg.create_project("work")
    reg.create_project("home")
    reg.add_task("work", "buy milk")  # 1
    reg.add_task("home", "fix sink")  # 2
    reg.add_task("work", "write report")  # 3
    reg.add_task("home", "water plants")  # 4
    reg.add_task("work", "ship it")  # 5
    reg.add_task("home", "taxes")  # 6

    reg.find_task(Identifier(4)).mark_done()
    reg.find_task(Identifier(5)).set_deadline(parse_deadline("2024-01-01"))
    reg.find_task(Identifier(6)).set_deadline(parse_deadline("2024-04-15"))
    return reg


def test_task_line_shapes() -> None:
    reg = _registry()
    assert format_task_line(reg.find_task(Identifier(1))) == "    [ ] 1: buy milk"
    assert format_task_line(reg.find_task(Identifier(4))) == "    [X] 4: water plants"
    assert format_task_line(reg.find_task(Identifier(5))) == "    [ ] 5:2024-01-01 ship it"


def test_render_projects_sorted_with_blank_separator() -> None:
    assert render_projects(_registry()) == (
        "home\n"
        "    [ ] 2: fix sink\n"
        "    [X] 4: water plants\n"
        "    [ ] 6:2024-04-15 taxes\n"
        "\n"
        "work\n"
        "    [ ] 1: buy milk\n"
        "    [ ] 3: write report\n"
        "    [ ] 5:2024-01-01 ship it\n"
        "\n"
    )


def test_render_empty_registry_is_empty() -> None:
    assert render_projects(ProjectRegistry()) == ""
    assert render_by_deadline(ProjectRegistry()) == ""


def test_render_due_keeps_headers_and_filters_tasks() -> None:
    reg = _registry()

    assert render_due(reg, date(2024, 1, 15)) == (
        "home\n"
        "\n"
        "work\n"
        "    [ ] 5:2024-01-01 ship it\n"
        "\n"
    )
    assert render_due(reg, date(2023, 12, 31)) == "home\n\nwork\n\n"


def test_render_due_is_ordered_subset_of_render_projects() -> None:
    reg = _registry()
    full = render_projects(reg).splitlines()
    for today in (date(2023, 1, 1), date(2024, 1, 1), date(2024, 4, 15), date(2030, 1, 1)):
        due = render_due(reg, today).splitlines()
        it = iter(full)
        assert all(line in it for line in due)


def test_render_by_deadline_groups_earliest_first() -> None:
    assert render_by_deadline(_registry()) == (
        "2024-01-01\n"
        "    [ ] 5:2024-01-01 ship it\n"
        "\n"
        "2024-04-15\n"
        "    [ ] 6:2024-04-15 taxes\n"
        "\n"
        "No deadline\n"
        "    [ ] 2: fix sink\n"
        "    [X] 4: water plants\n"
        "    [ ] 1: buy milk\n"
        "    [ ] 3: write report\n"
        "\n"
    )
