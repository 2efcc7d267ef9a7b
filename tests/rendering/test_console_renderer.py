"""
Unit tests for the console presentation of a scan.

Output is captured by pointing a Rich console at an in-memory buffer; since
the buffer is not a terminal, the captured text carries no styling codes.
"""

import io
from datetime import datetime, timezone
from typing import Tuple

import pytest
from rich.console import Console

from status_checker.domain import (
    InvalidURL,
    NetworkError,
    ProbeRecord,
    ScanReport,
    SelectionPolicyName,
    Success,
    Timeout,
)
from status_checker.rendering.console import custom_theme
from status_checker.rendering.console_renderer import ConsoleRenderer, describe_record

OBSERVED_AT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def buffer_console() -> Tuple[Console, io.StringIO]:
    """Provides a console writing to a string buffer, and the buffer."""
    buffer = io.StringIO()
    return Console(file=buffer, width=120, theme=custom_theme, highlight=False), buffer


def _plain(markup: str) -> str:
    buffer = io.StringIO()
    Console(file=buffer, width=120, theme=custom_theme, highlight=False).print(markup)
    return buffer.getvalue().strip()


@pytest.mark.parametrize(
    "outcome, expected",
    [
        (Success(200), "✅ LIVE https://a.example"),
        (Success(403), "🔒 FORBIDDEN https://a.example"),
        (Success(404), "❓ NOT FOUND https://a.example"),
        (Success(503), "💥 SERVER ERROR https://a.example"),
        (Success(301), "⚡ 301 https://a.example"),
        (Timeout("slow"), "❌ ERROR https://a.example (TIMEOUT)"),
        (NetworkError("refused"), "❌ ERROR https://a.example (NETWORK_ERROR)"),
        (InvalidURL(), "🚫 INVALID https://a.example"),
    ],
)
def test_describe_record_should_label_each_outcome(outcome, expected: str) -> None:
    # Act
    line = _plain(describe_record(ProbeRecord("https://a.example", outcome, OBSERVED_AT)))

    # Assert
    assert line == expected


def test_describe_record_should_escape_markup_in_urls() -> None:
    """
    Tests that square brackets in a URL are printed literally.
    """
    # Arrange
    record = ProbeRecord("https://a.example/[bold]x", Success(200), OBSERVED_AT)

    # Act
    line = _plain(describe_record(record))

    # Assert
    assert line == "✅ LIVE https://a.example/[bold]x"


class TestConsoleRenderer:
    """Tests for the ConsoleRenderer class."""

    def test_on_start_should_print_header(self, buffer_console) -> None:
        """
        Tests that the header shows the counters and the timeout, without the
        skipped URLs when not verbose.
        """
        # Arrange
        console, buffer = buffer_console
        renderer = ConsoleRenderer(console, SelectionPolicyName.STATUS_200_403, timeout=10)

        # Act
        renderer.on_start(["https://a.example", "bad"], ["bad"])

        # Assert
        output = buffer.getvalue()
        assert "Total URLs: 2" in output
        assert "Filtered out: 1" in output
        assert "Timeout: 10 seconds per request" in output
        assert "only 200 & 403" in output
        assert "Skipped:" not in output

    def test_on_start_should_list_skipped_urls_when_verbose(self, buffer_console) -> None:
        # Arrange
        console, buffer = buffer_console
        renderer = ConsoleRenderer(console, SelectionPolicyName.ALL, timeout=2.5, verbose=True)

        # Act
        renderer.on_start(["https://a.example/x.png"], ["https://a.example/x.png"])

        # Assert
        output = buffer.getvalue()
        assert "Skipped: https://a.example/x.png" in output
        assert "Timeout: 2.5 seconds per request" in output

    def test_on_record_should_print_only_retained_records_when_not_verbose(
        self, buffer_console
    ) -> None:
        """
        Tests that unretained records stay silent outside verbose mode.
        """
        # Arrange
        console, buffer = buffer_console
        renderer = ConsoleRenderer(console, SelectionPolicyName.STATUS_200_403, timeout=10)

        # Act
        renderer.on_record(ProbeRecord("https://kept.example", Success(200), OBSERVED_AT), True)
        renderer.on_record(ProbeRecord("https://dropped.example", Success(500), OBSERVED_AT), False)

        # Assert
        output = buffer.getvalue()
        assert "https://kept.example" in output
        assert "https://dropped.example" not in output

    def test_on_record_should_print_every_record_when_verbose(self, buffer_console) -> None:
        # Arrange
        console, buffer = buffer_console
        renderer = ConsoleRenderer(
            console, SelectionPolicyName.STATUS_200_403, timeout=10, verbose=True
        )

        # Act
        renderer.on_record(ProbeRecord("https://dropped.example", Success(500), OBSERVED_AT), False)

        # Assert
        assert "SERVER ERROR https://dropped.example" in buffer.getvalue()

    def test_show_summary_should_print_counts_and_findings(self, buffer_console) -> None:
        """
        Tests that the summary lists every counter and groups the retained
        records by category.
        """
        # Arrange
        console, buffer = buffer_console
        renderer = ConsoleRenderer(console, SelectionPolicyName.INTERESTING, timeout=10)
        report = ScanReport(
            generated_at=OBSERVED_AT,
            policy=SelectionPolicyName.INTERESTING,
            total_input_urls=4,
            filtered_out_count=1,
            checked_count=3,
            category_counts={
                "successful_2xx": 1,
                "forbidden_403": 0,
                "not_found_404": 1,
                "client_error_4xx": 0,
                "server_error_5xx": 0,
            },
            records=(
                ProbeRecord("https://ok.example", Success(204), OBSERVED_AT),
                ProbeRecord("https://gone.example", Success(404), OBSERVED_AT),
            ),
        )

        # Act
        renderer.show_summary(report, "results.json")

        # Assert
        output = buffer.getvalue()
        assert "SCAN SUMMARY" in output
        assert "Total URLs in file:" in output
        assert "Checked URLs:" in output
        assert "Not found (404)" in output
        assert "Results saved to: results.json" in output
        assert "INTERESTING FINDINGS:" in output
        assert "🔗 https://ok.example (204)" in output
        assert "🔗 https://gone.example (404)" in output
        assert "Scan completed!" in output

    def test_show_summary_should_report_when_nothing_matched(self, buffer_console) -> None:
        # Arrange
        console, buffer = buffer_console
        renderer = ConsoleRenderer(console, SelectionPolicyName.STATUS_200_403, timeout=10)
        report = ScanReport(
            generated_at=OBSERVED_AT,
            policy=SelectionPolicyName.STATUS_200_403,
            total_input_urls=0,
            filtered_out_count=0,
            checked_count=0,
            category_counts={"successful_200": 0, "forbidden_403": 0},
            records=(),
        )

        # Act
        renderer.show_summary(report, "results.json")

        # Assert
        output = buffer.getvalue()
        assert "No websites matched the report policy (only 200 & 403)." in output
        assert "INTERESTING FINDINGS:" not in output

    def test_show_error_should_print_message_literally(self, buffer_console) -> None:
        # Arrange
        console, buffer = buffer_console
        renderer = ConsoleRenderer(console, SelectionPolicyName.ALL, timeout=10)

        # Act
        renderer.show_error("File [urls].txt not found")

        # Assert
        assert "❌ Error: File [urls].txt not found" in buffer.getvalue()

    def test_show_interrupted_should_print_message(self, buffer_console) -> None:
        # Arrange
        console, buffer = buffer_console
        renderer = ConsoleRenderer(console, SelectionPolicyName.ALL, timeout=10)

        # Act
        renderer.show_interrupted()

        # Assert
        assert "Scan interrupted by user." in buffer.getvalue()
