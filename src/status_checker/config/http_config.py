"""
HTTP client configuration module for the website status checker.

This module creates the aiohttp client session shared by every probe of a
scan.
"""

import logging

import aiohttp

from status_checker.config.scan_context import ScanContext

# Module logger
logger = logging.getLogger(__name__)


def get_http_session(context: ScanContext) -> aiohttp.ClientSession:
    """
    Create and configure an HTTP client session based on the provided configuration.

    The session carries the configured User-Agent and the per-request timeout
    as defaults. TLS settings are left to aiohttp's defaults.

    Args:
        context: Configuration context containing HTTP client settings.

    Returns:
        aiohttp.ClientSession: A configured HTTP client session.
    """
    logger.debug(f"Creating HTTP session (timeout: {context.timeout}s)")
    return aiohttp.ClientSession(
        headers={"User-Agent": context.user_agent},
        timeout=aiohttp.ClientTimeout(total=context.timeout),
    )
