"""
Animated progress indicator for a running scan.

The indicator is a background asyncio task that periodically reads a snapshot
of the scan's progress counters and redraws a one-line spinner. It never
writes to the counters and nothing in the scan waits on it, so cancelling it
has no effect on the report.
"""

import asyncio
import logging
from typing import Callable, Optional

from rich.console import Console
from rich.live import Live
from rich.text import Text

from status_checker.config.constants import PROGRESS_REFRESH_INTERVAL
from status_checker.domain import ProgressSnapshot

# Module logger
logger = logging.getLogger(__name__)

SPINNER_FRAMES = ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷")


def render_progress(snapshot: ProgressSnapshot, frame: int) -> Text:
    """
    Builds the spinner line for a progress snapshot.

    Args:
        snapshot: The counters to display.
        frame: Animation step; any integer is accepted.

    Returns:
        Text: The renderable line.
    """
    return Text.assemble(
        ("Scanning: ", "warning"),
        f"{SPINNER_FRAMES[frame % len(SPINNER_FRAMES)]} ",
        ("Progress: ", "bold"),
        f"{snapshot.current}/{snapshot.total}",
    )


class ProgressIndicator:
    """
    Displays a spinner with the current/total counters of a scan.

    The display is refreshed by the indicator's own task only, never by a
    thread, and is removed from the terminal when the indicator stops.
    Use it as an async context manager around the scan.
    """

    def __init__(
        self,
        read_progress: Callable[[], ProgressSnapshot],
        console: Console,
        interval: float = PROGRESS_REFRESH_INTERVAL,
    ) -> None:
        """
        Args:
            read_progress: Returns the current progress snapshot. Must not block.
            console: Console the spinner is drawn on.
            interval: Seconds between redraws.
        """
        self._read_progress: Callable[[], ProgressSnapshot] = read_progress
        self._console: Console = console
        self._interval: float = interval
        self._live: Optional[Live] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _animate(self) -> None:
        """
        Redraws the spinner until cancelled.
        """
        frame = 0
        while True:
            try:
                if self._live is not None:
                    self._live.update(render_progress(self._read_progress(), frame), refresh=True)
                frame += 1
                await asyncio.sleep(self._interval)
            except asyncio.CancelledError:
                logger.debug("Progress indicator stopping.")
                break

    def start(self) -> None:
        """
        Starts the background redraw task. Calling it twice has no effect.
        """
        if self.running:
            return
        self._live = Live(console=self._console, auto_refresh=False, transient=True)
        self._live.start()
        self._task = asyncio.create_task(self._animate())

    async def stop(self) -> None:
        """
        Cancels the redraw task, waits for it to exit and clears the spinner.
        """
        if self._task is not None:
            self._task.cancel()
            await asyncio.gather(self._task, return_exceptions=True)
            self._task = None
        if self._live is not None:
            self._live.stop()
            self._live = None

    async def __aenter__(self) -> "ProgressIndicator":
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()
