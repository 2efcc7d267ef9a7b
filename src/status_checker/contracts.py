"""
Core interfaces for the website status checker.

This module defines the abstract base classes that separate the scanning
engine from its collaborators: the component that probes a URL, the policy
that decides which records a report keeps, and the listener that observes a
scan as it progresses. The engine only depends on these contracts.
"""

import abc
from typing import Optional, Sequence, Tuple

from .domain import Outcome, ProbeRecord, SelectionPolicyName


class StatusProber(abc.ABC):
    """
    Abstract interface for a component that checks a single URL.

    Its responsibility is to encapsulate the network I/O for one URL and to
    reduce whatever happens into an Outcome.
    """

    @abc.abstractmethod
    async def probe(self, url: str, timeout: Optional[float] = None) -> Outcome:
        """
        Performs exactly one bounded HTTP GET against the given URL.

        Args:
            url: The trimmed URL to check.
            timeout: Bound in seconds for this call. None uses the prober's default.

        Returns:
            Outcome: The classified result of the attempt.

        Raises:
            asyncio.CancelledError: Only when the scan is being cancelled.
                Every other failure is returned as an Outcome.
            ValueError: If an explicit timeout is not positive.
        """
        pass


class SelectionPolicy(abc.ABC):
    """
    Abstract interface for a report selection policy.

    A policy decides which probe records are retained in a report and which
    counter, if any, each record contributes to. Implementations must be
    stateless so that folding the same records twice gives the same report.
    """

    @property
    @abc.abstractmethod
    def name(self) -> SelectionPolicyName:
        """The identifier of this policy."""
        pass

    @property
    @abc.abstractmethod
    def categories(self) -> Tuple[str, ...]:
        """
        All counter names this policy can produce, in display order.

        Returns:
            Tuple[str, ...]: The category names. Every report built with this
                policy carries each of them, starting at zero.
        """
        pass

    @abc.abstractmethod
    def categorize(self, outcome: Outcome) -> Optional[str]:
        """
        Maps an outcome to the single category it is counted in.

        Args:
            outcome: The outcome of one probe.

        Returns:
            Optional[str]: One of 'categories', or None if the outcome is not
                counted in any category.
        """
        pass

    @abc.abstractmethod
    def retains(self, outcome: Outcome) -> bool:
        """
        Decides whether a record with this outcome is kept in the report.

        Args:
            outcome: The outcome of one probe.

        Returns:
            bool: True if the record belongs in the report's record list.
        """
        pass


class ScanListener(abc.ABC):
    """
    Abstract interface for a component that observes a scan.

    Listeners are notified synchronously by the orchestrator. They must not
    block and must not alter the scan; they exist for live display.
    """

    def on_start(self, urls: Sequence[str], filtered_out: Sequence[str]) -> None:
        """
        Called once, before probing starts.

        Args:
            urls: Every trimmed, non-blank input URL.
            filtered_out: The URLs excluded by validation or extension filtering.
        """
        pass

    @abc.abstractmethod
    def on_record(self, record: ProbeRecord, retained: bool) -> None:
        """
        Called after each probe with its record.

        Args:
            record: The record just produced.
            retained: Whether the active policy keeps the record in the report.
        """
        pass
