# tests/test_render.py

from __future__ import annotations

from tasklist.cli.render import render_for_settings, render_task_list
from tasklist.tasks.task_models import Task


def test_empty_list_shows_placeholder() -> None:
    assert render_task_list([]) == "My Tasks\n  Nothing to show yet."


def test_rows_follow_store_order_with_marks() -> None:
    tasks = [
        Task(id="1111aaaa-x", title="Buy milk", description="2%"),
        Task(id="2222bbbb-y", title="Call mom", description="Sunday", is_complete=True),
    ]

    out = render_task_list(tasks, title="Today")
    assert out.splitlines() == [
        "Today",
        "  1. [ ] Buy milk",
        "         2%",
        "  2. [x] Call mom",
        "         Sunday",
    ]


def test_settings_control_title_placeholder_and_ids(settings) -> None:
    settings.list_title = "Inbox"
    settings.empty_text = "All clear."
    assert render_for_settings([], settings) == "Inbox\n  All clear."

    settings.show_ids = True
    out = render_for_settings([Task(id="1234567890", title="t", description="d")], settings)
    assert "(12345678)" in out
