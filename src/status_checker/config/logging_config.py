"""
Logging setup for the status checker.

The built-in configurations ('dev' and 'prod') ship as JSON files next to
this module; 'custom' loads any dictConfig JSON file given on the command
line. Handlers write to stderr so that logs stay out of the console report.
Every record carries the run ID as '%(run_id)s'.
"""

import json
import logging.config
import os
from typing import Any, Dict

from status_checker.config.scan_context import ScanContext

# Built-in logging types and the packaged file each one loads
_BUILTIN_CONFIGS: Dict[str, str] = {
    "dev": "logging-config-dev.json",
    "prod": "logging-config-prod.json",
}


def _resolve_config_file(context: ScanContext) -> str:
    logging_type = context.logging_type.lower()
    if not logging_type:
        raise ValueError("Logging type must be provided.")
    if logging_type in _BUILTIN_CONFIGS:
        return _get_local_package_file_path(_BUILTIN_CONFIGS[logging_type])
    if logging_type == "custom":
        if not context.logging_config_file:
            raise ValueError("Custom logging configuration file must be provided.")
        return context.logging_config_file
    raise ValueError(
        f"Invalid logging type: {context.logging_type}. Allowed values are: dev, prod, custom"
    )


def configure_logging(context: ScanContext) -> None:
    """
    Applies the logging configuration selected by the context and tags every
    record with the run ID.

    Args:
        context: Scan settings; only the logging fields and run_id are read.

    Raises:
        ValueError: If the logging type is unknown, or is 'custom' without a file.
        RuntimeError: If the configuration file cannot be loaded.
    """
    _load_logging_config(_resolve_config_file(context))

    # Root logger filters are skipped for records propagated from child loggers.
    run_id_filter = _RunIdFilter(run_id=context.run_id)
    root_logger = logging.getLogger()
    root_logger.addFilter(run_id_filter)
    for handler in root_logger.handlers:
        handler.addFilter(run_id_filter)

    logging.debug(f"Logging configured ({context.logging_type}) for run {context.run_id}.")


def _load_logging_config(config_file: str) -> None:
    """
    Reads a JSON dictConfig file and applies it.

    Raises:
        RuntimeError: Wrapping whatever prevented the configuration from loading.
    """
    try:
        with open(config_file) as f:
            config: Dict[str, Any] = json.load(f)
        logging.config.dictConfig(config)
    except FileNotFoundError as err:
        raise RuntimeError(f"Logging config file not found: {config_file}") from err
    except json.JSONDecodeError as err:
        raise RuntimeError(f"Invalid JSON format in logging config file: {config_file}") from err
    except Exception as err:
        raise RuntimeError(f"Error loading logging config: {err}") from err


def _get_local_package_file_path(config_file: str) -> str:
    return os.path.join(os.path.dirname(__file__), config_file)


class _RunIdFilter(logging.Filter):
    """Sets 'run_id' on every record it sees and never drops one."""

    def __init__(self, run_id: str) -> None:
        super().__init__()
        self._run_id: str = run_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = self._run_id
        return True
