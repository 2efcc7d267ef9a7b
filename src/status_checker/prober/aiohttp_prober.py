"""
HTTP prober implementation using the aiohttp library.

This module provides an implementation of the StatusProber interface that
uses aiohttp to issue a single GET request per URL. Every failure is reduced
to an Outcome so that a scan can always move on to the next URL.
"""

import asyncio
import logging
import time
from typing import Optional

import aiohttp

from status_checker.config.constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from status_checker.contracts import StatusProber
from status_checker.domain import (
    InvalidURL,
    NetworkError,
    OtherError,
    Outcome,
    Success,
    Timeout,
)
from status_checker.validation import is_valid_url

# Module logger
logger = logging.getLogger(__name__)


class AiohttpProber(StatusProber):
    """
    A concrete implementation of StatusProber using the aiohttp library.

    Each probe makes exactly one attempt, with no retry, bounded by a total
    timeout that covers connecting, sending and reading the response head.
    TLS is used for https URLs with the library's default verification.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """
        Initializes the prober with a shared aiohttp ClientSession.

        Args:
            session: An active aiohttp.ClientSession to be used for requests.
            timeout: Upper bound in seconds for a single probe.
            user_agent: Value of the User-Agent header sent with each request.

        Raises:
            ValueError: If the timeout is not positive.
        """
        if timeout <= 0:
            raise ValueError("timeout must be a positive number of seconds.")

        self._session: aiohttp.ClientSession = session
        self._timeout: float = timeout
        self._user_agent: str = user_agent

    @property
    def timeout(self) -> float:
        return self._timeout

    async def _request_status(self, url: str, timeout: float) -> int:
        async with self._session.get(
            url,
            timeout=aiohttp.ClientTimeout(total=timeout),
            headers={"User-Agent": self._user_agent},
        ) as response:
            return response.status

    async def probe(self, url: str, timeout: Optional[float] = None) -> Outcome:
        """
        Performs one HTTP GET to the URL and classifies the result.

        Invalid URLs are rejected without any network activity. A response of
        any status is a Success; the timeout elapsing is a Timeout; DNS and
        connection failures are NetworkErrors; anything else is an OtherError.

        Args:
            url: The URL to probe.
            timeout: Bound in seconds for this probe only. Defaults to the
                timeout given at construction.

        Returns:
            Outcome: The classified result of the attempt.

        Raises:
            ValueError: If an explicit timeout is not positive.
        """
        if timeout is None:
            timeout = self._timeout
        elif timeout <= 0:
            raise ValueError("timeout must be a positive number of seconds.")

        if not is_valid_url(url):
            logger.debug(f"Rejecting invalid URL without a request: {url!r}")
            return InvalidURL()

        logger.debug(f"Starting probe for: {url}")
        start_time: float = time.monotonic()

        try:
            # The outer bound also covers transports that never honour the client timeout.
            status_code = await asyncio.wait_for(self._request_status(url, timeout), timeout=timeout)
            outcome: Outcome = Success(status_code)
        except asyncio.TimeoutError:
            # Checked first: aiohttp's timeout errors are also connection errors.
            outcome = Timeout(f"Request timed out after {timeout:g} seconds")
        except aiohttp.ClientConnectionError as e:
            outcome = NetworkError(f"Network error: {e}")
        except Exception as e:
            logger.debug(f"Unexpected error probing {url}", exc_info=True)
            outcome = OtherError(str(e) or type(e).__name__)

        elapsed: float = time.monotonic() - start_time
        logger.debug(f"Probed {url} in {elapsed:.3f}s: {outcome.kind.value} ({outcome.status})")
        return outcome
