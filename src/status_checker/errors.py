"""
Run-level errors for the website status checker.

Per-URL failures are never raised: they are captured as Outcome values by the
prober. The exceptions below abort a whole run and no report is written when
one of them escapes.
"""


class StatusCheckerError(Exception):
    """Base class for all run-level errors."""


class InputSourceMissingError(StatusCheckerError):
    """The URL list cannot be read. Raised before any URL is probed."""

    def __init__(self, path: str, reason: str = "not found") -> None:
        super().__init__(f"File {path} {reason}")
        self.path: str = path


class ReportExportError(StatusCheckerError):
    """The finalized report could not be written to its destination."""
