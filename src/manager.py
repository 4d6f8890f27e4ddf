"""Task list logic: holds the ordered task list, mutation and change listeners.

The window never touches the list directly; it subscribes a listener and
re-renders whenever an effective mutation happens. No-op calls (blank text,
unknown task) do not notify.
"""
from __future__ import annotations
import logging
from typing import Callable, Iterator, List, Optional, Sequence
from models import Task

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


def _is_blank(text: Optional[str]) -> bool:
    """Trimming only decides emptiness; accepted text is stored as typed."""
    return text is None or not text.strip()


class TaskManager:
    def __init__(self, descriptions: Optional[Sequence[str]] = None):
        self._tasks: List[Task] = []
        self._listeners: List[Listener] = []
        for description in descriptions or ():
            if not _is_blank(description):
                self._tasks.append(Task(description))

    # -------------------- listeners --------------------
    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # -------------------- queries --------------------
    @property
    def tasks(self) -> Sequence[Task]:
        return tuple(self._tasks)

    def completed_tasks(self) -> List[Task]:
        return [t for t in self._tasks if t.completed]

    def pending_tasks(self) -> List[Task]:
        return [t for t in self._tasks if not t.completed]

    def __contains__(self, task: object) -> bool:
        return any(t is task for t in self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    # -------------------- task operations --------------------
    def add_task(self, description: Optional[str]) -> Optional[Task]:
        """Append a new task; blank or missing text is ignored."""
        if _is_blank(description):
            logger.debug("Ignoring blank task description")
            return None
        task = Task(description)
        self._tasks.append(task)
        logger.debug("Added task %r (%d total)", description, len(self._tasks))
        self._notify()
        return task

    def remove_task(self, task: Optional[Task]) -> bool:
        if task is None or task not in self:
            logger.debug("Remove ignored: task not in list")
            return False
        self._tasks.remove(task)  # Task.__eq__ is identity
        logger.debug("Removed task %r", task.description)
        self._notify()
        return True

    def remove_completed_tasks(self) -> int:
        """Drop every completed task, keeping the order of the rest."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]
        removed = before - len(self._tasks)
        if removed:
            logger.debug("Removed %d completed task(s)", removed)
            self._notify()
        return removed

    def toggle_task(self, task: Optional[Task]) -> bool:
        if task is None or task not in self:
            return False
        state = task.toggle()
        logger.debug("Task %r completed=%s", task.description, state)
        self._notify()
        return True

    def edit_task(self, task: Optional[Task], description: Optional[str]) -> bool:
        if task is None or _is_blank(description) or task not in self:
            logger.debug("Edit ignored")
            return False
        if task.description == description:
            return False
        task.description = description
        self._notify()
        return True

    def __str__(self) -> str:
        return (f'Pending: {len(self.pending_tasks())} tasks, '
                f'Completed: {len(self.completed_tasks())} tasks')
