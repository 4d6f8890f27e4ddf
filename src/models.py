"""Data models for the todo list application.

Only exposes the Task dataclass. Equality is identity based (eq=False) so
two tasks with the same description stay distinct list members and
removal always targets the exact instance the user selected.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(eq=False)
class Task:
    """A single todo item.

    Fields:
        description: Short, single-line text (editable after creation).
        completed: Whether the task has been checked off.
    """
    description: str
    completed: bool = False

    def toggle(self) -> bool:
        """Flip the completed flag and return the new value."""
        self.completed = not self.completed
        return self.completed

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(description={self.description!r}, completed={self.completed})"
