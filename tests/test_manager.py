# tests/test_manager.py

from __future__ import annotations

import pytest

from manager import TaskManager
from models import Task


def test_add_task_keeps_text_as_typed(manager: TaskManager) -> None:
    first = manager.add_task("first")
    second = manager.add_task("  second  ")

    assert len(manager) == 2
    assert manager.tasks == (first, second)
    assert second is not None and second.description == "  second  "
    assert second.completed is False


@pytest.mark.parametrize("text", [None, "", "   ", "\t\n"])
def test_add_blank_is_noop(manager: TaskManager, text) -> None:
    manager.add_task("keep")
    assert manager.add_task(text) is None
    assert len(manager) == 1


def test_initial_descriptions_skip_blanks() -> None:
    mgr = TaskManager(["a", " ", "b "])
    assert [t.description for t in mgr] == ["a", "b "]


def test_remove_task_by_identity(manager: TaskManager) -> None:
    a = manager.add_task("same")
    b = manager.add_task("same")

    assert manager.remove_task(b) is True
    assert manager.tasks == (a,)


def test_remove_non_member_or_none_is_noop(manager: TaskManager) -> None:
    manager.add_task("x")
    assert manager.remove_task(Task("x")) is False
    assert manager.remove_task(None) is False
    assert len(manager) == 1


def test_remove_completed_keeps_only_pending_in_order(manager: TaskManager) -> None:
    tasks = [manager.add_task(name) for name in ("a", "b", "c", "d")]
    manager.toggle_task(tasks[0])
    manager.toggle_task(tasks[2])

    assert manager.remove_completed_tasks() == 2
    assert [t.description for t in manager] == ["b", "d"]
    assert all(not t.completed for t in manager)
    assert manager.remove_completed_tasks() == 0


def test_completed_and_pending_filters(manager: TaskManager) -> None:
    a = manager.add_task("a")
    b = manager.add_task("b")
    manager.toggle_task(b)

    assert manager.completed_tasks() == [b]
    assert manager.pending_tasks() == [a]
    assert str(manager) == "Pending: 1 tasks, Completed: 1 tasks"


def test_toggle_unknown_task_is_noop(manager: TaskManager) -> None:
    outsider = Task("outsider")
    assert manager.toggle_task(outsider) is False
    assert outsider.completed is False


def test_edit_task(manager: TaskManager) -> None:
    task = manager.add_task("draft")

    assert manager.edit_task(task, "  final ") is True
    assert task.description == "  final "
    assert manager.edit_task(task, "   ") is False
    assert manager.edit_task(task, "  final ") is False
    assert manager.edit_task(task, "final") is True
    assert manager.edit_task(Task("x"), "y") is False
    assert task.description == "final"


def test_listeners_fire_only_on_effective_changes(manager: TaskManager) -> None:
    events: list[int] = []

    def listener() -> None:
        events.append(len(manager))

    manager.subscribe(listener)
    manager.subscribe(listener)  # duplicate subscription ignored

    task = manager.add_task("a")
    manager.add_task(" ")
    manager.remove_task(Task("a"))
    manager.remove_completed_tasks()
    manager.toggle_task(task)
    manager.edit_task(task, "b")
    manager.remove_completed_tasks()

    assert events == [1, 1, 1, 0]

    manager.unsubscribe(listener)
    manager.add_task("c")
    assert events == [1, 1, 1, 0]


def test_tasks_view_is_a_snapshot(manager: TaskManager) -> None:
    manager.add_task("a")
    snapshot = manager.tasks
    manager.add_task("b")
    assert len(snapshot) == 1
