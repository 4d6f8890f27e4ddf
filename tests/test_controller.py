# tests/test_controller.py

from __future__ import annotations

from controller import ADD, MARK, REMOVE, REMOVE_COMPLETED, TodoListController
from manager import TaskManager

from .fakes import FakeView


def test_controller_renders_on_start_and_on_change(manager: TaskManager, view: FakeView) -> None:
    manager.add_task("existing")
    TodoListController(manager, view)
    assert [t.description for t in view.shown[-1]] == ["existing"]

    manager.add_task("new")
    assert [t.description for t in view.shown[-1]] == ["existing", "new"]


def test_add_task_clears_input_scrolls_and_animates(controller, manager, view) -> None:
    view.text = "  water plants "
    controller.handle_add_task()

    assert [t.description for t in manager] == ["  water plants "]
    assert view.text == ""
    assert ("scroll_to", manager.tasks[-1]) in view.calls
    assert ("click", ADD) in view.calls
    assert "shake" not in view.names()


def test_add_task_scrolls_to_the_task_it_created(controller, manager, view) -> None:
    older = manager.add_task("older")
    view.text = "newer"
    controller.handle_add_task()

    targets = [c[1] for c in view.calls if c[0] == "scroll_to"]
    assert len(targets) == 1
    assert targets[0] is not older
    assert targets[0] is manager.tasks[-1]
    assert targets[0].description == "newer"


def test_add_blank_shakes_input(controller, manager, view) -> None:
    view.text = "   "
    controller.handle_add_task()
    view.text = None
    controller.handle_add_task()

    assert len(manager) == 0
    assert view.names() == ["shake", "shake"]


def test_mark_as_completed_toggles_selected(controller, manager, view) -> None:
    task = manager.add_task("a")
    view.selected = task
    controller.handle_mark_as_completed()

    assert task.completed is True
    assert view.selected is None
    assert ("click", MARK) in view.calls

    view.selected = task
    controller.handle_mark_as_completed()
    assert task.completed is False


def test_handlers_without_selection_do_nothing(controller, manager, view) -> None:
    manager.add_task("a")
    controller.handle_mark_as_completed()
    controller.handle_remove_task()
    controller.handle_edit_task()

    assert view.calls == []
    assert len(manager) == 1


def test_remove_task_removes_selected(controller, manager, view) -> None:
    a = manager.add_task("a")
    b = manager.add_task("b")
    view.selected = a
    controller.handle_remove_task()

    assert manager.tasks == (b,)
    assert view.names() == ["clear_selection", "click"]
    assert view.calls[-1] == ("click", REMOVE)


def test_remove_completed_only_when_something_is_completed(controller, manager, view) -> None:
    a = manager.add_task("a")
    manager.add_task("b")

    controller.handle_remove_completed_tasks()
    assert len(manager) == 2
    assert view.calls == []

    manager.toggle_task(a)
    controller.handle_remove_completed_tasks()
    assert [t.description for t in manager] == ["b"]
    assert view.calls == [("click", REMOVE_COMPLETED)]


def test_toggle_specific_row(controller, manager, view) -> None:
    task = manager.add_task("a")
    controller.handle_toggle(task)
    assert task.completed is True
    assert view.shown[-1][0].completed is True
    controller.handle_toggle(None)


def test_edit_selected_task(controller, manager, view) -> None:
    task = manager.add_task("draft")
    view.selected = task
    view.edit_reply = "final"
    controller.handle_edit_task()

    assert task.description == "final"
    assert view.selected is None


def test_edit_cancelled_keeps_description(controller, manager, view) -> None:
    task = manager.add_task("draft")
    view.selected = task
    view.edit_reply = None
    controller.handle_edit_task()

    assert task.description == "draft"
    assert view.selected is task


def test_close_stops_rendering(controller, manager, view) -> None:
    rendered = len(view.shown)
    controller.close()
    manager.add_task("a")
    assert len(view.shown) == rendered
