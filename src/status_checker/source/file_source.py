"""
File-based URL list source.

Reads the list of URLs to scan from a text file. The scanning engine never
opens files itself: it only receives the lines returned here.
"""

import logging
from pathlib import Path
from typing import List

from status_checker.errors import InputSourceMissingError

# Module logger
logger = logging.getLogger(__name__)


def read_url_lines(path: str) -> List[str]:
    """
    Reads every line of a URL list file.

    Lines are returned without their line terminators but otherwise as-is;
    trimming and blank-line removal are the scanner's job. A UTF-8 byte order
    mark is tolerated.

    Args:
        path: Path to the text file.

    Returns:
        List[str]: The lines of the file, in order.

    Raises:
        InputSourceMissingError: If the file does not exist or cannot be read.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise InputSourceMissingError(path)

    try:
        lines = file_path.read_text(encoding="utf-8-sig").splitlines()
    except (OSError, UnicodeDecodeError) as err:
        raise InputSourceMissingError(path, f"could not be read: {err}") from err

    logger.debug(f"Read {len(lines)} lines from {path}")
    return lines
