"""
Domain models for the website status checker.

This module defines the core data structures used throughout the application:
the closed set of probe outcomes, the per-URL probe record, the selection
policy identifiers and the final scan report. All of them are immutable.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar, Mapping, NamedTuple, Optional, Tuple, Union


class OutcomeKind(str, Enum):
    """
    Tags the case of an Outcome.

    Inheriting from 'str' keeps the members usable wherever a plain string
    tag is expected, such as in serialized reports.
    """

    SUCCESS = "SUCCESS"
    TIMEOUT = "TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    OTHER_ERROR = "ERROR"
    INVALID_URL = "INVALID_URL"


# Outcomes are frozen dataclasses, not NamedTuples: two different cases
# carrying the same message must never compare equal.


@dataclass(frozen=True)
class Success:
    """
    A response was received. The status code is kept verbatim.

    Attributes:
        code: The numeric HTTP status code (100-599).

    Raises:
        ValueError: If the code is outside the 100-599 range.
    """

    code: int
    kind: ClassVar[OutcomeKind] = OutcomeKind.SUCCESS
    is_error: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if not 100 <= self.code <= 599:
            raise ValueError(f"HTTP status code out of range: {self.code}")

    @property
    def status(self) -> int:
        return self.code

    @property
    def error(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class _Failure:
    message: str
    kind: ClassVar[OutcomeKind]
    is_error: ClassVar[bool] = True

    @property
    def status(self) -> Optional[str]:
        return self.kind.value

    @property
    def error(self) -> Optional[str]:
        return self.message


@dataclass(frozen=True)
class Timeout(_Failure):
    """The request did not complete within the configured bound."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.TIMEOUT


@dataclass(frozen=True)
class NetworkError(_Failure):
    """Name resolution or connection-level failure."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.NETWORK_ERROR


@dataclass(frozen=True)
class OtherError(_Failure):
    """Any other exception raised during the attempt."""

    kind: ClassVar[OutcomeKind] = OutcomeKind.OTHER_ERROR


@dataclass(frozen=True)
class InvalidURL(_Failure):
    """The input is not an absolute http(s) URL. No request was made."""

    message: str = "Invalid URL format"
    kind: ClassVar[OutcomeKind] = OutcomeKind.INVALID_URL

    @property
    def status(self) -> Optional[str]:
        # Invalid input has no status at all, not even a tag.
        return None


Outcome = Union[Success, Timeout, NetworkError, OtherError, InvalidURL]


class SelectionPolicyName(str, Enum):
    """
    Identifies which records a report retains and how it categorizes them.

    STATUS_200_403 retains only 200 and 403 responses, ALL retains every
    record and INTERESTING retains 2xx, 403, 404 and every 4xx/5xx response.
    """

    STATUS_200_403 = "status-200-403"
    ALL = "all"
    INTERESTING = "interesting"


class ProbeRecord(NamedTuple):
    """
    The classified result of probing a single URL.

    Attributes:
        url: The trimmed URL as read from the input.
        outcome: The Outcome produced by the prober.
        observed_at: When the probe completed (UTC).
    """

    url: str
    outcome: Outcome
    observed_at: datetime


class ScanReport(NamedTuple):
    """
    The finalized result of a scan.

    Attributes:
        generated_at: When the scan started (UTC).
        policy: The selection policy the report was built with.
        total_input_urls: Number of non-blank input lines.
        filtered_out_count: Number of URLs skipped before probing.
        checked_count: Number of URLs probed, retained or not.
        category_counts: Per-category counters defined by the policy.
        records: Retained records, in input order.
    """

    generated_at: datetime
    policy: SelectionPolicyName
    total_input_urls: int
    filtered_out_count: int
    checked_count: int
    category_counts: Mapping[str, int]
    records: Tuple[ProbeRecord, ...]


class ProgressSnapshot(NamedTuple):
    """A point-in-time copy of the orchestrator's progress counters."""

    current: int
    total: int
