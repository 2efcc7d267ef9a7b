"""
Incremental construction of scan reports.

The ReportBuilder folds probe records, one at a time and in scan order, into
counters and a retained record list according to a selection policy. The
fold is pure: feeding the same records under the same policy always yields
the same counts and records.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from status_checker.contracts import SelectionPolicy
from status_checker.domain import ProbeRecord, ScanReport

# Module logger
logger = logging.getLogger(__name__)


class ReportBuilder:
    """
    Accumulates probe records into a ScanReport.

    The total number of input URLs is derived when the report is finalized
    as the filtered count plus the number of records added, so the report
    always satisfies total == filtered + checked.
    """

    def __init__(
        self,
        policy: SelectionPolicy,
        filtered_out_count: int = 0,
        generated_at: Optional[datetime] = None,
    ) -> None:
        """
        Initializes an empty builder.

        Args:
            policy: The selection policy deciding retention and categories.
            filtered_out_count: Number of input URLs skipped before probing.
            generated_at: Timestamp of the report. Defaults to now (UTC).

        Raises:
            ValueError: If filtered_out_count is negative.
        """
        if filtered_out_count < 0:
            raise ValueError("filtered_out_count must not be negative.")

        self._policy: SelectionPolicy = policy
        self._filtered_out_count: int = filtered_out_count
        self._generated_at: datetime = generated_at or datetime.now(timezone.utc)
        self._checked_count: int = 0
        self._category_counts: Dict[str, int] = {name: 0 for name in policy.categories}
        self._records: List[ProbeRecord] = []
        self._finalized: bool = False

    @property
    def checked_count(self) -> int:
        return self._checked_count

    def add(self, record: ProbeRecord) -> bool:
        """
        Folds one record into the report.

        Args:
            record: The next probe record, in scan order.

        Returns:
            bool: True if the policy retained the record.

        Raises:
            RuntimeError: If the report has already been finalized.
        """
        if self._finalized:
            raise RuntimeError("Cannot add records to a finalized report.")

        self._checked_count += 1

        category = self._policy.categorize(record.outcome)
        if category is not None:
            self._category_counts[category] += 1

        retained = self._policy.retains(record.outcome)
        if retained:
            self._records.append(record)

        logger.debug(
            f"Folded {record.url} ({record.outcome.kind.value}): "
            f"category={category}, retained={retained}"
        )
        return retained

    def finalize(self) -> ScanReport:
        """
        Freezes the builder and returns the resulting report.

        Returns:
            ScanReport: The immutable report. Further calls to add() fail.
        """
        self._finalized = True
        return ScanReport(
            generated_at=self._generated_at,
            policy=self._policy.name,
            total_input_urls=self._filtered_out_count + self._checked_count,
            filtered_out_count=self._filtered_out_count,
            checked_count=self._checked_count,
            category_counts=dict(self._category_counts),
            records=tuple(self._records),
        )


def build_report(
    records: Iterable[ProbeRecord],
    policy: SelectionPolicy,
    filtered_out_count: int = 0,
    generated_at: Optional[datetime] = None,
) -> ScanReport:
    """
    Folds a complete sequence of probe records into a report.

    Args:
        records: Probe records in scan order.
        policy: The selection policy to apply.
        filtered_out_count: Number of input URLs skipped before probing.
        generated_at: Timestamp of the report. Defaults to now (UTC).

    Returns:
        ScanReport: The finalized report.
    """
    builder = ReportBuilder(policy, filtered_out_count=filtered_out_count, generated_at=generated_at)
    for record in records:
        builder.add(record)
    return builder.finalize()
