"""Main entry point for the todo list window.

Tasks live in memory only; closing the window discards them.
"""
import logging
from config import load_settings
from logging_setup import setup_logging
from manager import TaskManager
from controller import TodoListController
from theme import Palette
from window import TodoWindow

logger = logging.getLogger(__name__)


def main():
    settings = load_settings()
    setup_logging(level=settings.log_level, log_dir=settings.log_dir)
    logger.debug("Settings: %s", settings)
    manager = TaskManager()
    window = TodoWindow(settings, Palette.load())
    controller = TodoListController(manager, window)
    window.bind_controller(controller)
    window.start_effects()
    window.run()

if __name__ == "__main__":
    main()
