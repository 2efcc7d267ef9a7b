"""
Scan orchestration for the website status checker.

This module provides the ScanOrchestrator class, which drives a scan from raw
input lines to a finalized report: it filters the input, probes the remaining
URLs strictly one at a time and in input order, and folds each result into a
report builder.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional, Tuple

from .contracts import ScanListener, SelectionPolicy, StatusProber
from .domain import ProbeRecord, ProgressSnapshot, ScanReport
from .report.builder import ReportBuilder
from .validation import should_skip


class ScanProgress:
    """
    Progress counters of a running scan.

    Only the orchestrator writes the counters. Readers, such as a progress
    display, take a snapshot and never need a lock.
    """

    def __init__(self) -> None:
        self._current: int = 0
        self._total: int = 0

    def reset(self, total: int) -> None:
        self._current = 0
        self._total = total

    def advance(self) -> None:
        self._current += 1

    def snapshot(self) -> ProgressSnapshot:
        return ProgressSnapshot(current=self._current, total=self._total)


def prepare_urls(raw_lines: Iterable[str]) -> List[str]:
    """
    Trims every line and drops the blank ones.

    Args:
        raw_lines: Lines as read from the input source.

    Returns:
        List[str]: The non-empty, trimmed URLs in input order.
    """
    return [line.strip() for line in raw_lines if line.strip()]


def partition_urls(urls: Iterable[str]) -> Tuple[List[str], List[str]]:
    """
    Splits URLs into those to skip and those to probe, keeping input order.

    Args:
        urls: Trimmed, non-empty URLs.

    Returns:
        Tuple[List[str], List[str]]: The filtered-out URLs and the URLs to probe.
    """
    filtered_out: List[str] = []
    to_probe: List[str] = []
    for url in urls:
        (filtered_out if should_skip(url) else to_probe).append(url)
    return filtered_out, to_probe


class ScanOrchestrator:
    """
    Coordinates a sequential scan.

    URL n+1 is never probed before the probe of URL n has resolved, so the
    progress counters and any live display follow the input order exactly.
    """

    def __init__(
        self,
        prober: StatusProber,
        policy: SelectionPolicy,
        listener: Optional[ScanListener] = None,
    ) -> None:
        """
        Initializes a new ScanOrchestrator instance.

        Args:
            prober: Component that probes a single URL.
            policy: Selection policy applied to the report.
            listener: Optional observer notified of skipped URLs and of every record.
        """
        self._prober: StatusProber = prober
        self._policy: SelectionPolicy = policy
        self._listener: Optional[ScanListener] = listener
        self._progress: ScanProgress = ScanProgress()
        self._logger: logging.Logger = logging.getLogger(__name__)

    def _notify(self, event: str, *args: Any) -> None:
        """
        Calls a listener hook, isolating the scan from display failures.

        Args:
            event: Name of the ScanListener method to call.
            *args: Arguments passed to the hook.
        """
        if self._listener is None:
            return
        try:
            getattr(self._listener, event)(*args)
        except Exception as e:
            self._logger.exception(
                f"Listener '{type(self._listener).__name__}' failed on {event} with error: {e}"
            )

    @property
    def progress(self) -> ScanProgress:
        return self._progress

    async def run(
        self, raw_lines: Iterable[str], timeout: Optional[float] = None
    ) -> ScanReport:
        """
        Scans every URL of the input and returns the finalized report.

        Steps:
        1. Trim the lines and drop blank ones
        2. Partition the URLs into filtered-out and to-probe
        3. Probe each remaining URL in order and fold its record into the report
        4. Finalize the report

        An interruption (cancellation or KeyboardInterrupt) propagates out of
        this method, so no report is produced for an incomplete scan.

        Args:
            raw_lines: Lines of the URL list, as read from the input source.
            timeout: Per-request bound in seconds for this run. None leaves the
                prober's own timeout in place.

        Returns:
            ScanReport: The finalized report.
        """
        generated_at = datetime.now(timezone.utc)
        urls = prepare_urls(raw_lines)
        filtered_out, to_probe = partition_urls(urls)

        self._logger.info(
            f"Starting scan of {len(urls)} URLs ({len(filtered_out)} filtered out, "
            f"{len(to_probe)} to probe, policy: {self._policy.name.value})."
        )

        self._notify("on_start", urls, filtered_out)

        builder = ReportBuilder(
            self._policy, filtered_out_count=len(filtered_out), generated_at=generated_at
        )
        self._progress.reset(len(to_probe))

        for url in to_probe:
            if timeout is None:
                outcome = await self._prober.probe(url)
            else:
                outcome = await self._prober.probe(url, timeout=timeout)
            record = ProbeRecord(url=url, outcome=outcome, observed_at=datetime.now(timezone.utc))
            retained = builder.add(record)
            self._progress.advance()

            self._notify("on_record", record, retained)

        report = builder.finalize()
        self._logger.info(
            f"Scan complete: {report.checked_count} checked, {len(report.records)} retained."
        )
        return report
