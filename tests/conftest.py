# tests/conftest.py

from __future__ import annotations

import pytest

from animation import Animator
from controller import TodoListController
from manager import TaskManager

from .fakes import FakeScheduler, FakeView


@pytest.fixture()
def manager() -> TaskManager:
    return TaskManager()


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def controller(manager: TaskManager, view: FakeView) -> TodoListController:
    return TodoListController(manager, view)


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def animator(scheduler: FakeScheduler) -> Animator:
    """Animator on the fake clock, one frame per millisecond for exact assertions."""
    return Animator(scheduler, clock=scheduler.clock, frame_ms=1)
