"""
HTTP transports and manifest retrieval.

The resolver only needs ``fetch_text(url) -> (status_code, body)`` from its
HTTP collaborator. Two implementations are provided:

- RequestsTransport: blocking, built on a requests.Session
- AiohttpTransport: asyncio, built on an aiohttp.ClientSession

Both raise TransportError for failures below HTTP (DNS, connection, TLS,
timeouts). Neither retries; a failed request is reported immediately.
"""

import asyncio
import importlib.metadata
from typing import Any, Optional, Protocol, Tuple

import aiohttp
import requests  # type: ignore[import-untyped]
from aiohttp import ClientSession, ClientTimeout

from nodejs_release_info.constants import (
    APP_NAME,
    DEFAULT_REQUEST_TIMEOUT,
    HTTP_STATUS_ERROR_THRESHOLD,
)
from nodejs_release_info.exceptions import TransportError, UnrecognizedVersionError
from nodejs_release_info.log_utils import logger

_USER_AGENT_CACHE: Optional[str] = None


def get_user_agent() -> str:
    """
    Get the User-Agent string used for HTTP requests.

    Returns:
        The string `nodejs-release-info/{version}`, where `{version}` is the
        installed package version or `unknown` if it cannot be determined.
    """
    global _USER_AGENT_CACHE

    if _USER_AGENT_CACHE is None:
        try:
            app_version = importlib.metadata.version(APP_NAME)
        except importlib.metadata.PackageNotFoundError:
            app_version = "unknown"

        _USER_AGENT_CACHE = f"{APP_NAME}/{app_version}"

    return _USER_AGENT_CACHE


class HttpTransport(Protocol):
    """Blocking HTTP collaborator."""

    def fetch_text(self, url: str) -> Tuple[int, str]:
        """Issue a GET and return the status code and body text."""
        ...


class AsyncHttpTransport(Protocol):
    """Asyncio HTTP collaborator."""

    async def fetch_text(self, url: str) -> Tuple[int, str]:
        """Issue a GET and return the status code and body text."""
        ...


class RequestsTransport:
    """
    Blocking transport backed by a requests.Session.

    Usage:
        transport = RequestsTransport(timeout=10)
        status, body = transport.fetch_text(url)
    """

    def __init__(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Parameters:
            timeout (float): Request timeout in seconds.
            session (Optional[requests.Session]): Session to reuse; a new one is created when omitted.
        """
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = get_user_agent()
        self.session = session

    def fetch_text(self, url: str) -> Tuple[int, str]:
        """
        Issue a GET request for `url`.

        Returns:
            Tuple[int, str]: The HTTP status code and the decoded body.

        Raises:
            TransportError: If the request could not be completed.
        """
        logger.debug("Requesting %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            return response.status_code, response.text
        except requests.RequestException as exc:
            raise TransportError(url, exc) from exc

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


class AiohttpTransport:
    """
    Asyncio transport backed by an aiohttp.ClientSession.

    The session is created lazily on first use and closed by `close()` or
    when leaving an `async with` block.

    Example:
        async with AiohttpTransport() as transport:
            status, body = await transport.fetch_text(url)
    """

    def __init__(self, timeout: float = DEFAULT_REQUEST_TIMEOUT) -> None:
        self.timeout = ClientTimeout(total=timeout)
        self._session: Optional[ClientSession] = None

    async def __aenter__(self) -> "AiohttpTransport":
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def _ensure_session(self) -> ClientSession:
        if self._session is None or self._session.closed:
            self._session = ClientSession(
                timeout=self.timeout,
                headers={"User-Agent": get_user_agent()},
            )
        return self._session

    async def close(self) -> None:
        """Close the client session and release resources."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def fetch_text(self, url: str) -> Tuple[int, str]:
        """
        Issue a GET request for `url`.

        Returns:
            Tuple[int, str]: The HTTP status code and the decoded body.

        Raises:
            TransportError: If the request could not be completed.
        """
        session = await self._ensure_session()
        logger.debug("Requesting %s", url)
        try:
            async with session.get(url) as response:
                # Undecodable bytes are replaced, as requests' Response.text does
                body = await response.text(errors="replace")
                return response.status, body
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(url, exc) from exc


def check_manifest_response(status_code: int, body: str, url: str, version: str) -> str:
    """
    Interpret the server's answer to a manifest request.

    Manifests live under a per-version directory, so an error status can only
    mean the version is not published.

    Raises:
        UnrecognizedVersionError: If `status_code` is 400 or above.
    """
    logger.debug("Manifest request to %s returned HTTP %d", url, status_code)
    if status_code >= HTTP_STATUS_ERROR_THRESHOLD:
        raise UnrecognizedVersionError(version, url=url, status_code=status_code)
    return body


def fetch_manifest(url: str, version: str, transport: HttpTransport) -> str:
    """
    Retrieve a manifest through a blocking transport.

    Returns:
        str: The manifest body, verbatim.

    Raises:
        TransportError: If the request could not be completed.
        UnrecognizedVersionError: If the server answered with an error status.
    """
    status_code, body = transport.fetch_text(url)
    return check_manifest_response(status_code, body, url, version)


async def async_fetch_manifest(
    url: str, version: str, transport: AsyncHttpTransport
) -> str:
    """Asyncio counterpart of fetch_manifest()."""
    status_code, body = await transport.fetch_text(url)
    return check_manifest_response(status_code, body, url, version)
