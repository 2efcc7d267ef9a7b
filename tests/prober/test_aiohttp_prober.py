"""
Unit tests for the AiohttpProber class.

This module checks that the prober performs exactly one GET per valid URL,
never touches the network for invalid URLs, and reduces every possible
result to the right Outcome.

The tests follow the Arrange-Act-Assert (AAA) pattern and mock the aiohttp
session so that no real network activity takes place.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
import pytest_asyncio

from status_checker.config.constants import DEFAULT_USER_AGENT
from status_checker.domain import (
    InvalidURL,
    NetworkError,
    OtherError,
    Success,
    Timeout,
)
from status_checker.prober.aiohttp_prober import AiohttpProber


@pytest_asyncio.fixture
async def mock_session() -> AsyncMock:
    """
    Creates a mock aiohttp.ClientSession for testing.

    Returns:
        A mock ClientSession whose get() context manager yields a 200 response.
    """
    session = AsyncMock(spec=aiohttp.ClientSession)

    # Mock the response context manager
    response = MagicMock()
    response.status = 200
    session.get.return_value.__aenter__.return_value = response

    return session


@pytest_asyncio.fixture
async def prober(mock_session: AsyncMock) -> AiohttpProber:
    """
    Creates an AiohttpProber instance with a mock session.
    """
    return AiohttpProber(session=mock_session, timeout=5)


@pytest.mark.asyncio
async def test_probe_should_return_success_with_status_code(
    prober: AiohttpProber, mock_session: AsyncMock
) -> None:
    """
    Tests that a received response becomes a Success carrying its code.
    """
    # Act
    outcome = await prober.probe("https://example.com")

    # Assert
    assert outcome == Success(200)
    assert mock_session.get.call_count == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [100, 204, 301, 403, 404, 418, 503, 599])
async def test_probe_should_accept_any_status_code_verbatim(
    prober: AiohttpProber, mock_session: AsyncMock, status: int
) -> None:
    """
    Tests that every status code is passed through without special-casing.
    """
    # Arrange
    mock_session.get.return_value.__aenter__.return_value.status = status

    # Act
    outcome = await prober.probe("https://example.com")

    # Assert
    assert outcome == Success(status)


@pytest.mark.asyncio
async def test_probe_should_send_one_get_with_timeout_and_user_agent(
    prober: AiohttpProber, mock_session: AsyncMock
) -> None:
    """
    Tests the request: one GET to the URL with the timeout bound and the
    fixed User-Agent header.
    """
    # Act
    await prober.probe("https://example.com/page")

    # Assert
    mock_session.get.assert_called_once()
    call_args = mock_session.get.call_args[0]
    call_kwargs = mock_session.get.call_args[1]
    assert call_args[0] == "https://example.com/page"
    assert isinstance(call_kwargs["timeout"], aiohttp.ClientTimeout)
    assert call_kwargs["timeout"].total == 5
    assert call_kwargs["headers"] == {"User-Agent": DEFAULT_USER_AGENT}


@pytest.mark.asyncio
async def test_probe_should_reject_invalid_url_without_network_activity(
    prober: AiohttpProber, mock_session: AsyncMock
) -> None:
    """
    Tests that an invalid URL returns InvalidURL and no request is made.
    """
    # Act
    outcome = await prober.probe("not a url")

    # Assert
    assert isinstance(outcome, InvalidURL)
    mock_session.get.assert_not_called()


@pytest.mark.asyncio
async def test_probe_should_return_timeout_when_transport_hangs(
    mock_session: AsyncMock,
) -> None:
    """
    Tests that a transport hanging past the bound yields Timeout, never a
    NetworkError or an OtherError.
    """

    # Arrange
    async def hang(*args, **kwargs):
        await asyncio.sleep(10)

    mock_session.get.return_value.__aenter__.side_effect = hang
    prober = AiohttpProber(session=mock_session, timeout=0.05)

    # Act
    outcome = await asyncio.wait_for(prober.probe("https://slow.example"), timeout=2)

    # Assert
    assert isinstance(outcome, Timeout)
    assert outcome.message == "Request timed out after 0.05 seconds"


@pytest.mark.asyncio
async def test_probe_should_return_timeout_for_client_timeout(
    prober: AiohttpProber, mock_session: AsyncMock
) -> None:
    """
    Tests that aiohttp's own timeout error is a Timeout, even though it is
    also a connection error.
    """
    # Arrange
    mock_session.get.side_effect = aiohttp.ServerTimeoutError("Timeout on reading data")

    # Act
    outcome = await prober.probe("https://slow.example")

    # Assert
    assert isinstance(outcome, Timeout)
    assert outcome.message == "Request timed out after 5 seconds"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        aiohttp.ClientConnectionError("Connection refused"),
        aiohttp.ServerDisconnectedError(),
    ],
)
async def test_probe_should_return_network_error_for_connection_failures(
    prober: AiohttpProber, mock_session: AsyncMock, error: Exception
) -> None:
    """
    Tests that connection-level failures become NetworkError.
    """
    # Arrange
    mock_session.get.side_effect = error

    # Act
    outcome = await prober.probe("https://down.example")

    # Assert
    assert isinstance(outcome, NetworkError)
    assert outcome.message.startswith("Network error: ")


@pytest.mark.asyncio
async def test_probe_should_return_other_error_for_unexpected_exceptions(
    prober: AiohttpProber, mock_session: AsyncMock
) -> None:
    """
    Tests that any other exception becomes OtherError with its message.
    """
    # Arrange
    mock_session.get.return_value.__aenter__.side_effect = ValueError("unexpected")

    # Act
    outcome = await prober.probe("https://broken.example")

    # Assert
    assert outcome == OtherError("unexpected")


@pytest.mark.asyncio
async def test_probe_should_return_other_error_for_out_of_range_status(
    prober: AiohttpProber, mock_session: AsyncMock
) -> None:
    """
    Tests that a status code outside 100-599 is reported as OtherError.
    """
    # Arrange
    mock_session.get.return_value.__aenter__.return_value.status = 999

    # Act
    outcome = await prober.probe("https://weird.example")

    # Assert
    assert isinstance(outcome, OtherError)
    assert "999" in outcome.message


@pytest.mark.asyncio
async def test_probe_should_propagate_cancellation(
    prober: AiohttpProber, mock_session: AsyncMock
) -> None:
    """
    Tests that cancellation is not captured as an Outcome.
    """
    # Arrange
    mock_session.get.side_effect = asyncio.CancelledError()

    # Act & Assert
    with pytest.raises(asyncio.CancelledError):
        await prober.probe("https://example.com")


def test_prober_should_reject_non_positive_timeout() -> None:
    """
    Tests that the timeout bound must be positive.
    """
    # Arrange
    session = MagicMock(spec=aiohttp.ClientSession)

    # Act & Assert
    with pytest.raises(ValueError):
        AiohttpProber(session=session, timeout=0)


@pytest.mark.asyncio
async def test_probe_should_use_timeout_given_for_the_call(
    prober: AiohttpProber, mock_session: AsyncMock
) -> None:
    """
    Tests that a per-call timeout bounds that request only and leaves the
    prober's default untouched.
    """
    # Act
    await prober.probe("https://example.com", timeout=2.5)
    await prober.probe("https://example.com")

    # Assert
    first_call, second_call = mock_session.get.call_args_list
    assert first_call[1]["timeout"].total == 2.5
    assert second_call[1]["timeout"].total == 5
    assert prober.timeout == 5


@pytest.mark.asyncio
async def test_probe_should_report_per_call_timeout_in_message(mock_session: AsyncMock) -> None:
    # Arrange
    async def hang(*args, **kwargs):
        await asyncio.sleep(10)

    mock_session.get.return_value.__aenter__.side_effect = hang
    prober = AiohttpProber(session=mock_session, timeout=30)

    # Act
    outcome = await asyncio.wait_for(prober.probe("https://slow.example", timeout=0.05), timeout=2)

    # Assert
    assert outcome == Timeout("Request timed out after 0.05 seconds")


@pytest.mark.asyncio
@pytest.mark.parametrize("timeout", [0, -1])
async def test_probe_should_reject_non_positive_call_timeout(
    prober: AiohttpProber, mock_session: AsyncMock, timeout: float
) -> None:
    # Act & Assert
    with pytest.raises(ValueError):
        await prober.probe("https://example.com", timeout=timeout)
    mock_session.get.assert_not_called()
