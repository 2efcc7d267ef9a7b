"""
Main entry point for the website status checker.

This module wires the scan together: it reads the URL list, creates the HTTP
session, the prober and the orchestrator, runs the scan with a live display,
writes the JSON report and prints the summary. A report is only written when
the scan ran to completion.
"""

import asyncio
import logging
import sys
from typing import List, Optional

import aiohttp

from status_checker.config import ScanContext, get_context
from status_checker.config.http_config import get_http_session
from status_checker.config.logging_config import configure_logging
from status_checker.domain import ScanReport
from status_checker.errors import StatusCheckerError
from status_checker.exporter.json_exporter import JsonReportExporter
from status_checker.prober.aiohttp_prober import AiohttpProber
from status_checker.rendering.console import console
from status_checker.rendering.console_renderer import ConsoleRenderer
from status_checker.rendering.progress import ProgressIndicator
from status_checker.report.policies import get_policy
from status_checker.scanner import ScanOrchestrator
from status_checker.source.file_source import read_url_lines


async def main(context: ScanContext, renderer: ConsoleRenderer) -> ScanReport:
    """
    Run a complete scan and export its report.

    This function:
    1. Reads the URL list (before any network activity)
    2. Creates the HTTP session and the prober
    3. Runs the orchestrator, with a progress indicator in verbose mode
    4. Writes the JSON report and prints the summary

    Args:
        context: Configuration context containing all application settings.
        renderer: Console presentation of the scan.

    Returns:
        ScanReport: The finalized report.

    Raises:
        InputSourceMissingError: If the URL list cannot be read.
        ReportExportError: If the report cannot be written.
    """
    logger: logging.Logger = logging.getLogger(__name__)
    logger.info("Starting scan...")

    raw_lines: List[str] = read_url_lines(context.input_file)
    renderer.show_banner()

    http_session: aiohttp.ClientSession = get_http_session(context)
    logger.info("configured: http_session")

    try:
        orchestrator = ScanOrchestrator(
            prober=AiohttpProber(
                session=http_session,
                timeout=context.timeout,
                user_agent=context.user_agent,
            ),
            policy=get_policy(context.policy),
            listener=renderer,
        )
        indicator = ProgressIndicator(orchestrator.progress.snapshot, console)

        if context.verbose:
            indicator.start()
        try:
            report: ScanReport = await orchestrator.run(raw_lines)
        finally:
            await indicator.stop()

    finally:
        # Ensure the session is closed, including when the scan is interrupted
        logger.info("Closing HTTP session...")
        await http_session.close()

    JsonReportExporter(context.output_file).export(report)
    renderer.show_summary(report, context.output_file)
    return report


def run(argv: Optional[List[str]] = None) -> int:
    """
    Console script entry point.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        int: The process exit status, 0 on success and 1 on any failure or interruption.
    """
    # Parse command-line arguments and environment variables
    context: ScanContext = get_context(argv)

    # Configure logging based on the context
    configure_logging(context)

    logger: logging.Logger = logging.getLogger(__name__)
    renderer = ConsoleRenderer(
        console, policy=context.policy, timeout=context.timeout, verbose=context.verbose
    )

    try:
        asyncio.run(main(context, renderer))
        return 0
    except KeyboardInterrupt:
        logger.info("Scan interrupted by user (Ctrl+C). No report written.")
        renderer.show_interrupted()
    except StatusCheckerError as e:
        logger.error(f"Scan aborted: {e}")
        renderer.show_error(str(e))
    except Exception as e:
        logger.exception("Unexpected error during scan.")
        renderer.show_error(f"Unexpected error: {e}")
    return 1


if __name__ == "__main__":
    sys.exit(run())
