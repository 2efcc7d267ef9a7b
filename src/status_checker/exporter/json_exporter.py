"""
JSON export of scan reports.

This module turns a finalized ScanReport into the JSON document written at
the end of a scan:

    {
      "metadata": {"generated_at", "policy", "total_urls", "filtered_urls",
                   "checked_urls", <policy counters>},
      "websites": [{"url", "status", "timestamp", "error"?}]
    }

'status' is the HTTP status code, or one of the tags TIMEOUT, NETWORK_ERROR
and ERROR. It is omitted for invalid URLs. 'error' is only present when the
probe failed.
"""

import contextlib
import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from status_checker.domain import ProbeRecord, ScanReport
from status_checker.errors import ReportExportError

# Module logger
logger = logging.getLogger(__name__)


def _isoformat(moment: datetime) -> str:
    # Second precision with a 'Z' suffix, e.g. 2024-05-01T12:00:00Z
    return moment.astimezone(timezone.utc).replace(microsecond=0).strftime("%Y-%m-%dT%H:%M:%SZ")


def _discard(path: str) -> None:
    with contextlib.suppress(OSError):
        os.unlink(path)


def record_to_dict(record: ProbeRecord) -> Dict[str, Any]:
    """
    Serializes a single probe record.

    Args:
        record: The record to serialize.

    Returns:
        Dict[str, Any]: The JSON-ready representation of the record.
    """
    website: Dict[str, Any] = {"url": record.url}
    if record.outcome.status is not None:
        website["status"] = record.outcome.status
    website["timestamp"] = _isoformat(record.observed_at)
    if record.outcome.error is not None:
        website["error"] = record.outcome.error
    return website


def report_to_dict(report: ScanReport) -> Dict[str, Any]:
    """
    Serializes a report into the exported document structure.

    Args:
        report: The finalized report.

    Returns:
        Dict[str, Any]: A dictionary with 'metadata' and 'websites' keys.
    """
    metadata: Dict[str, Any] = {
        "generated_at": _isoformat(report.generated_at),
        "policy": report.policy.value,
        "total_urls": report.total_input_urls,
        "filtered_urls": report.filtered_out_count,
        "checked_urls": report.checked_count,
    }
    metadata.update(report.category_counts)

    return {
        "metadata": metadata,
        "websites": [record_to_dict(record) for record in report.records],
    }


class JsonReportExporter:
    """
    Writes reports as pretty-printed JSON files.
    """

    def __init__(self, output_file: str, indent: int = 2) -> None:
        """
        Args:
            output_file: Destination path of the report.
            indent: Indentation of the JSON document.
        """
        self._output_file: str = output_file
        self._indent: int = indent

    @property
    def output_file(self) -> str:
        return self._output_file

    def export(self, report: ScanReport) -> None:
        """
        Serializes the report and writes it to the output file.

        Args:
            report: The finalized report.

        Raises:
            ReportExportError: If the file cannot be written.
        """
        document = json.dumps(report_to_dict(report), indent=self._indent, ensure_ascii=False)
        output_path = Path(self._output_file)

        # Written next to the destination, then renamed over it in one step.
        try:
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
            )
        except OSError as err:
            raise ReportExportError(
                f"Could not write report to {self._output_file}: {err}"
            ) from err

        try:
            os.chmod(temp_name, 0o644)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(document + "\n")
            os.replace(temp_name, output_path)
        except OSError as err:
            _discard(temp_name)
            raise ReportExportError(
                f"Could not write report to {self._output_file}: {err}"
            ) from err
        except BaseException:
            _discard(temp_name)
            raise

        logger.info(f"Report with {len(report.records)} websites written to {self._output_file}")
