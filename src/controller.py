"""Event handlers wiring the window to the task manager.

The controller only talks to the window through the TodoView protocol so
the handlers can be driven by a fake view in tests.
"""
from __future__ import annotations
import logging
from typing import Optional, Protocol, Sequence
from models import Task
from manager import TaskManager

logger = logging.getLogger(__name__)

# Button names passed to TodoView.animate_click
ADD = 'add'
MARK = 'mark'
REMOVE = 'remove'
REMOVE_COMPLETED = 'remove_completed'


class TodoView(Protocol):
    def input_text(self) -> Optional[str]: ...
    def clear_input(self) -> None: ...
    def selected_task(self) -> Optional[Task]: ...
    def clear_selection(self) -> None: ...
    def show_tasks(self, tasks: Sequence[Task]) -> None: ...
    def scroll_to(self, task: Task) -> None: ...
    def animate_click(self, button: str) -> None: ...
    def shake_input(self) -> None: ...
    def prompt_edit(self, task: Task) -> Optional[str]: ...


class TodoListController:
    def __init__(self, manager: TaskManager, view: TodoView):
        self.manager: TaskManager = manager
        self.view: TodoView = view
        manager.subscribe(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        self.view.show_tasks(self.manager.tasks)

    def close(self) -> None:
        self.manager.unsubscribe(self.refresh)

    # -------------------- handlers --------------------
    def handle_add_task(self) -> None:
        task = self.manager.add_task(self.view.input_text())
        if task is None:
            self.view.shake_input()
            return
        self.view.clear_input()
        self.view.scroll_to(task)
        self.view.animate_click(ADD)

    def handle_mark_as_completed(self) -> None:
        task = self.view.selected_task()
        if task is None:
            return
        self.manager.toggle_task(task)
        self.view.clear_selection()
        self.view.animate_click(MARK)

    def handle_remove_task(self) -> None:
        task = self.view.selected_task()
        if task is None:
            return
        self.manager.remove_task(task)
        self.view.clear_selection()
        self.view.animate_click(REMOVE)

    def handle_remove_completed_tasks(self) -> None:
        if not self.manager.completed_tasks():
            logger.debug("No completed tasks to remove")
            return
        self.view.animate_click(REMOVE_COMPLETED)
        removed = self.manager.remove_completed_tasks()
        logger.info("Cleared %d completed task(s)", removed)

    def handle_toggle(self, task: Optional[Task]) -> None:
        """Checkbox-style toggle of one row (double-click)."""
        self.manager.toggle_task(task)

    def handle_edit_task(self) -> None:
        task = self.view.selected_task()
        if task is None:
            return
        new_text = self.view.prompt_edit(task)
        if self.manager.edit_task(task, new_text):
            self.view.clear_selection()
