"""
Configuration context for the website status checker.

This module defines a data structure that holds all configuration parameters
of a scan. It serves as a central point for passing configuration throughout
the application.
"""

from typing import NamedTuple

from status_checker.domain import SelectionPolicyName


class ScanContext(NamedTuple):
    """
    A data structure containing all configuration parameters for a scan.

    This class is immutable and provides a type-safe way to pass configuration
    throughout the application. It is created by parsing command-line arguments
    and environment variables.

    Attributes:
        input_file: Path to the text file listing one URL per line.
        output_file: Path of the JSON report, always ending in '.json'.
        verbose: Whether every probe and skipped URL is displayed.
        timeout: Upper bound in seconds for each HTTP request.
        policy: Which records the report retains and how they are counted.
        user_agent: User-Agent header sent with every request.
        run_id: Unique identifier of this run, attached to every log record.
        logging_type: Type of logging configuration to use (dev, prod, or custom).
        logging_config_file: Path to custom logging configuration file (if logging_type is 'custom').
    """

    input_file: str
    output_file: str
    verbose: bool
    timeout: float
    policy: SelectionPolicyName
    user_agent: str
    run_id: str
    logging_type: str
    logging_config_file: str
