"""
Configuration module for the website status checker.

This module parses command-line arguments and environment variables into a
ScanContext. Every option falls back to a STATUS_CHECKER_* environment
variable and then to a default from constants.py.
"""

import argparse
import os
from typing import Any, List, Optional
from uuid import uuid4

from status_checker.config.constants import (
    DEFAULT_LOGGING_CONFIG_FILE,
    DEFAULT_LOGGING_TYPE,
    DEFAULT_POLICY,
    DEFAULT_RUN_ID_PREFIX,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    DEFAULT_VERBOSE,
)
from status_checker.config.scan_context import ScanContext
from status_checker.domain import SelectionPolicyName

__all__ = ["ScanContext", "ensure_json_suffix", "get_context"]


def ensure_json_suffix(path: str) -> str:
    """
    Appends '.json' to a file name that does not already end with it.

    Args:
        path: The requested output path.

    Returns:
        str: The path, guaranteed to end in '.json' (case-insensitive).
    """
    if path.lower().endswith(".json"):
        return path
    return f"{path}.json"


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"timeout must be positive: {value!r}")
    return number


def get_context(argv: Optional[List[str]] = None) -> ScanContext:
    """
    Parse command-line arguments and environment variables to create a configuration context.

    For each option, it first checks for a command-line argument, then falls
    back to an environment variable, and finally uses a default value.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        ScanContext: A configuration context object containing all parsed settings.
    """
    parser = argparse.ArgumentParser(
        prog="status-checker",
        description="Checks the HTTP status of every URL listed in a file and writes a JSON report.",
        epilog="Examples:\n"
        "  status-checker websites.txt -o results.json\n"
        "  status-checker urls.txt -o results.json --verbose --policy interesting\n\n"
        "Images, documents, media and font URLs are skipped automatically.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "input_file",
        type=str,
        help="Text file listing one URL per line. Blank lines are ignored.",
    )

    parser.add_argument(
        "-o",
        "--output",
        dest="output_file",
        type=str,
        required=True,
        help="Output file for the JSON report. '.json' is appended when missing.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=os.getenv("STATUS_CHECKER_VERBOSE", DEFAULT_VERBOSE).lower() == "true",
        help="Show every request and every skipped URL.\n"
        "If not provided, the value is read from the STATUS_CHECKER_VERBOSE environment variable.",
    )

    parser.add_argument(
        "-t",
        "--timeout",
        type=_positive_float,
        default=_positive_float(os.getenv("STATUS_CHECKER_TIMEOUT", str(DEFAULT_TIMEOUT))),
        help="Specifies the timeout in seconds for each HTTP request.\n"
        "If not provided, the value is read from the STATUS_CHECKER_TIMEOUT environment variable.\n"
        f"If that is also absent, a default value of {DEFAULT_TIMEOUT} seconds is used.",
    )

    parser.add_argument(
        "-p",
        "--policy",
        type=str,
        choices=[policy.value for policy in SelectionPolicyName],
        default=os.getenv("STATUS_CHECKER_POLICY", DEFAULT_POLICY),
        help="Specifies which results are kept in the report.\n"
        "If not provided, the value is read from the STATUS_CHECKER_POLICY environment variable.\n"
        f"If that is also absent, a default value of {DEFAULT_POLICY} is used.",
    )

    parser.add_argument(
        "-ua",
        "--user-agent",
        type=str,
        default=os.getenv("STATUS_CHECKER_USER_AGENT", DEFAULT_USER_AGENT),
        help="Specifies the User-Agent header sent with every request.\n"
        "If not provided, the value is read from the STATUS_CHECKER_USER_AGENT environment variable.",
    )

    parser.add_argument(
        "-rid",
        "--run-id",
        type=str,
        default=os.getenv("STATUS_CHECKER_RUN_ID", f"{DEFAULT_RUN_ID_PREFIX}{uuid4()}"),
        help="Specifies the identifier attached to every log record of this run.\n"
        "If not provided, the value is read from the STATUS_CHECKER_RUN_ID environment variable.\n"
        f"If that is also absent, the default value will be {DEFAULT_RUN_ID_PREFIX}uuid4().",
    )

    parser.add_argument(
        "-lt",
        "--logging-type",
        type=str,
        default=os.getenv("STATUS_CHECKER_LOGGING_TYPE", DEFAULT_LOGGING_TYPE),
        help="Specifies the logging configuration type to use.\n"
        "Allowed values: dev, prod, custom (case insensitive).\n"
        "For 'dev' and 'prod', system will use built-in configurations.\n"
        "For 'custom', the --logging-config-file argument is required.",
    )

    parser.add_argument(
        "-lcf",
        "--logging-config-file",
        type=str,
        default=os.getenv("STATUS_CHECKER_LOGGING_CONFIG_FILE", DEFAULT_LOGGING_CONFIG_FILE),
        help="Path to custom logging configuration file.\n"
        "Required when --logging-type is set to 'custom'.",
    )

    # Parse the command-line arguments
    args: Any = parser.parse_args(argv)

    # Create and return a ScanContext with the parsed settings
    return ScanContext(
        input_file=args.input_file,
        output_file=ensure_json_suffix(args.output_file),
        verbose=args.verbose,
        timeout=args.timeout,
        policy=SelectionPolicyName(args.policy),
        user_agent=args.user_agent,
        run_id=args.run_id,
        logging_type=args.logging_type,
        logging_config_file=args.logging_config_file,
    )
