from status_checker.rendering.console import console
from status_checker.rendering.console_renderer import ConsoleRenderer
from status_checker.rendering.progress import ProgressIndicator

__all__ = ["ConsoleRenderer", "ProgressIndicator", "console"]
