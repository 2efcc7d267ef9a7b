"""
Terminal presentation of a scan.

ConsoleRenderer listens to the orchestrator to print live results and, once
the scan is over, prints a summary of the finalized report. It only consumes
domain values; the engine never calls into it except through ScanListener.
"""

from typing import Dict, List, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from status_checker.contracts import ScanListener
from status_checker.domain import (
    OutcomeKind,
    ProbeRecord,
    ScanReport,
    SelectionPolicyName,
)
from status_checker.report.policies import get_policy

POLICY_DESCRIPTIONS: Dict[SelectionPolicyName, str] = {
    SelectionPolicyName.STATUS_200_403: "only 200 & 403",
    SelectionPolicyName.ALL: "all results with status or error",
    SelectionPolicyName.INTERESTING: "2xx, 403, 404, 4xx & 5xx",
}

CATEGORY_LABELS: Dict[str, str] = {
    "successful_200": "✅ Live (200)",
    "forbidden_403": "🔒 Forbidden (403)",
    "successful_checks": "✅ Successful checks",
    "failed_checks": "❌ Failed checks",
    "successful_2xx": "✅ Success (2xx)",
    "not_found_404": "❓ Not found (404)",
    "client_error_4xx": "⚠️  Client error (4xx)",
    "server_error_5xx": "💥 Server error (5xx)",
}


def describe_record(record: ProbeRecord) -> str:
    """
    Formats one record as a console markup line.

    Args:
        record: The record to describe.

    Returns:
        str: Rich markup with an icon, a label and the URL.
    """
    outcome = record.outcome
    url = f"[url]{escape(record.url)}[/]"

    if outcome.kind is OutcomeKind.INVALID_URL:
        return f"🚫 [error]INVALID[/] {url}"
    if outcome.is_error:
        return f"❌ [error]ERROR[/] {url} ({outcome.status})"

    code = outcome.status
    if code == 200:
        return f"✅ [success]LIVE[/] {url}"
    if code == 403:
        return f"🔒 [warning]FORBIDDEN[/] {url}"
    if code == 404:
        return f"❓ [bold blue]NOT FOUND[/] {url}"
    if 500 <= code <= 599:
        return f"💥 [error]SERVER ERROR[/] {url}"
    return f"⚡ [highlight]{code}[/] {url}"


class ConsoleRenderer(ScanListener):
    """
    Prints the banner, live results and the final summary of a scan.

    In verbose mode every probed and every skipped URL is printed; otherwise
    only the records retained by the report's policy are.
    """

    def __init__(
        self,
        console: Console,
        policy: SelectionPolicyName,
        timeout: float,
        verbose: bool = False,
    ) -> None:
        self._console: Console = console
        self._policy: SelectionPolicyName = policy
        self._timeout: float = timeout
        self._verbose: bool = verbose

    def show_banner(self) -> None:
        self._console.rule("[highlight]🌐 WEBSITE STATUS CHECKER[/]", style="blue")
        self._console.print(
            f"[info]Report keeps {POLICY_DESCRIPTIONS[self._policy]}[/]", justify="center"
        )
        self._console.rule(style="blue")

    def on_start(self, urls: Sequence[str], filtered_out: Sequence[str]) -> None:
        if self._verbose and filtered_out:
            self._console.print("🔍 [warning]Filtering URLs...[/]")
            for url in filtered_out:
                self._console.print(f"🚫 [error]Skipped:[/] {escape(url)}")
            self._console.print()

        self._console.print("🔍 [info]Checking websites...[/]")
        self._console.print(f"📊 [bold]Total URLs:[/] [count]{len(urls)}[/]")
        if filtered_out:
            self._console.print(f"🚫 [bold]Filtered out:[/] [warning]{len(filtered_out)}[/]")
        self._console.print(f"⏰ [bold]Timeout:[/] {self._timeout:g} seconds per request")
        self._console.print(f"💾 [bold]Output:[/] JSON format ({POLICY_DESCRIPTIONS[self._policy]})\n")

    def on_record(self, record: ProbeRecord, retained: bool) -> None:
        if self._verbose or retained:
            self._console.print(describe_record(record))

    def show_summary(self, report: ScanReport, output_file: str) -> None:
        """
        Prints the counters of the report and its retained records by category.

        Args:
            report: The finalized report.
            output_file: Where the report was written.
        """
        table = Table(title="📊 SCAN SUMMARY", show_header=False, border_style="green")
        table.add_column("metric", style="bold")
        table.add_column("value", justify="right")
        table.add_row("Total URLs in file:", f"[count]{report.total_input_urls}[/]")
        if report.filtered_out_count:
            table.add_row("Filtered out:", f"[warning]{report.filtered_out_count}[/]")
        table.add_row("Checked URLs:", f"[url]{report.checked_count}[/]")
        table.add_section()
        for category, count in report.category_counts.items():
            table.add_row(CATEGORY_LABELS.get(category, category), str(count))

        self._console.print()
        self._console.print(table)
        self._console.print(f"\n💾 [bold]Results saved to:[/] [underline cyan]{escape(output_file)}[/]")

        if not report.records:
            self._console.print(
                f"\n😔 [error]No websites matched the report policy "
                f"({POLICY_DESCRIPTIONS[report.policy]}).[/]"
            )
        else:
            self._show_findings(report)

        self._console.print("\n🎉 [success]Scan completed![/]")

    def _show_findings(self, report: ScanReport) -> None:
        policy = get_policy(report.policy)
        grouped: Dict[str, List[ProbeRecord]] = {name: [] for name in policy.categories}
        for record in report.records:
            category = policy.categorize(record.outcome)
            if category is not None:
                grouped[category].append(record)

        # The status is redundant when every category maps to a single code.
        show_status = report.policy is not SelectionPolicyName.STATUS_200_403

        self._console.print("\n🎯 [highlight]INTERESTING FINDINGS:[/]")
        for category, records in grouped.items():
            if not records:
                continue
            self._console.print(f"\n[bold]{CATEGORY_LABELS.get(category, category)}:[/]")
            for record in records:
                suffix = f" ({record.outcome.status})" if show_status else ""
                self._console.print(f"  🔗 [url]{escape(record.url)}[/]{suffix}")

    def show_error(self, message: str) -> None:
        self._console.print(f"❌ [error]Error:[/] {escape(message)}")

    def show_interrupted(self) -> None:
        self._console.print("\n\n⏹️  [warning]Scan interrupted by user.[/]")
