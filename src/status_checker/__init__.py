"""
Website status checker.

Probes a list of URLs over HTTP(S), classifies each outcome and builds a
report whose contents depend on a selection policy.
"""

from status_checker.domain import (
    InvalidURL,
    NetworkError,
    OtherError,
    Outcome,
    ProbeRecord,
    ScanReport,
    SelectionPolicyName,
    Success,
    Timeout,
)
from status_checker.scanner import ScanOrchestrator
from status_checker.validation import is_valid_url, should_skip

__version__ = "1.0.0"

__all__ = [
    "InvalidURL",
    "NetworkError",
    "OtherError",
    "Outcome",
    "ProbeRecord",
    "ScanOrchestrator",
    "ScanReport",
    "SelectionPolicyName",
    "Success",
    "Timeout",
    "is_valid_url",
    "should_skip",
]
