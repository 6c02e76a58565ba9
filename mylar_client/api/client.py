"""
API client for the Mylar comic server

aiohttp-based client for the read-only Mylar /api endpoint. Every operation
is a single GET whose cmd query parameter selects the server-side action.
"""
import asyncio
import logging
import re
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Union
from urllib.parse import urlsplit

import aiohttp
from pydantic import TypeAdapter, ValidationError
from yarl import URL

from mylar_client.api.commands import Command
from mylar_client.config import MylarConfig, get_config
from mylar_client.exceptions import APIError, ConfigError, DecodeError, TransportError
from mylar_client.models import Comic, ComicDetail, Envelope, History, WantedIssue

logger = logging.getLogger(f'{__name__}.MylarClient')

API_PATH = "/api"
LOG_TRUNCATE = 1200

_COMIC_LIST = TypeAdapter(List[Comic])
_COMIC_DETAIL = TypeAdapter(ComicDetail)
_WANTED_LIST = TypeAdapter(List[WantedIssue])
_HISTORY_LIST = TypeAdapter(List[History])

# unreserved, sub-delims, pct-encoded and IP literal characters
_HOST_RE = re.compile(r"^[\w.~%!$&'()*+,;=:-]+$")


def _parse_base_url(base_url: str) -> URL:
    """
    Parse and validate the server address.

    Raises:
        ConfigError: If the address is not an absolute http(s) URL with a
            well-formed host and port
    """
    try:
        parsed = URL(base_url)
        split = urlsplit(base_url)
        port = split.port
    except (ValueError, TypeError) as e:
        raise ConfigError(f"failed to parse base_url: {e}") from e

    if parsed.scheme not in ('http', 'https') or not parsed.host:
        raise ConfigError(f"failed to parse base_url: {base_url!r} is not an absolute http(s) URL")
    if not split.hostname or not _HOST_RE.match(split.hostname):
        raise ConfigError(f"failed to parse base_url: invalid host in {base_url!r}")

    logger.debug(f"Parsed base_url host={split.hostname} port={port}")
    return parsed


class MylarClient:
    """
    Async HTTP client for the Mylar API.

    Features:
    - Static API key authentication via the apikey query parameter
    - Lazily created or caller-supplied aiohttp session
    - Optional per-request timeout applied to every call
    - Typed decoding of both response shapes the server uses

    Errors are raised, never retried: ConfigError at construction,
    TransportError for network failures, DecodeError for unexpected bodies
    and APIError when the server reports a failure in its envelope.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize the client. No network I/O happens here.

        Args:
            base_url: Address of the Mylar server; any path it carries is ignored
            api_key: Mylar API key
            timeout: Total request timeout in seconds (None uses the session default)
            session: Optional aiohttp session to use instead of creating one

        Raises:
            ConfigError: If the URL or key is empty, the URL is invalid,
                or the timeout is not a positive number
        """
        if not base_url:
            raise ConfigError("base_url is required")
        if not api_key:
            raise ConfigError("api_key is required")

        parsed = _parse_base_url(base_url)

        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                raise ConfigError(f"timeout must be a positive number of seconds, got {timeout!r}")

        self.base_url = parsed
        self.api_key = api_key
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

        logger.debug(f"MylarClient initialized with base_url: {self.base_url}")

    @classmethod
    def from_config(
        cls,
        config: Optional[MylarConfig] = None,
        session: Optional[aiohttp.ClientSession] = None
    ) -> 'MylarClient':
        """
        Build a client from MYLAR_* settings.

        Args:
            config: Settings to use (defaults to the global configuration)
            session: Optional aiohttp session to share

        Raises:
            ConfigError: If the configured values are missing or invalid
        """
        config = config or get_config()
        return cls(
            config.mylar_url,
            config.mylar_api_key,
            timeout=config.mylar_timeout,
            session=session
        )

    @property
    def headers(self) -> Dict[str, str]:
        """Default headers for the session the client creates."""
        return {
            'Accept': 'application/json',
            'User-Agent': 'mylar-client/1.0'
        }

    def _build_url(self, command: Command, params: Optional[Dict[str, str]] = None) -> URL:
        """
        Build the request URL for a command.

        The base path is replaced with /api, and cmd/apikey always win over
        caller-supplied values of the same name.
        """
        query: Dict[str, Union[str, int, float]] = dict(params or {})
        query['cmd'] = command.value
        query['apikey'] = self.api_key
        return self.base_url.with_path(API_PATH).with_query(query)

    @staticmethod
    def _redact(url: URL) -> URL:
        return url.update_query(apikey='***')

    async def _ensure_session(self) -> None:
        """Ensure an aiohttp session exists and is not closed."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(headers=self.headers)
            self._owns_session = True
            logger.debug("Created new aiohttp session")

    @asynccontextmanager
    async def _request(
        self,
        command: Command,
        params: Optional[Dict[str, str]] = None
    ) -> AsyncIterator[aiohttp.ClientResponse]:
        """
        Execute one GET request and yield the response.

        The response is released when the block exits, whatever the outcome.

        Raises:
            TransportError: For connection failures and timeouts
        """
        url = self._build_url(command, params)
        await self._ensure_session()

        kwargs: Dict[str, Any] = {}
        if self.timeout is not None:
            kwargs['timeout'] = aiohttp.ClientTimeout(total=self.timeout)

        logger.debug(f"GET: {self._redact(url)}", extra={'command': command.value})
        try:
            async with self._session.get(url, **kwargs) as response:
                logger.debug(
                    f"{command} responded with status {response.status}",
                    extra={'command': command.value}
                )
                yield response
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Network error: {e}") from e

    async def _read_json(self, response: aiohttp.ClientResponse, command: Command) -> Any:
        """Read and parse the response body."""
        try:
            data = await response.json(content_type=None)
        except ValueError as e:
            raise DecodeError(f"{command} returned invalid JSON: {e}") from e

        data_str = str(data)
        if len(data_str) > LOG_TRUNCATE:
            data_str = data_str[:LOG_TRUNCATE] + "..."
        logger.debug(f"Response: {data_str}")

        return data

    async def _unwrap(self, response: aiohttp.ClientResponse, command: Command) -> Any:
        """
        Decode a structured envelope and return its raw data payload.

        Raises:
            DecodeError: If the body is not a valid envelope
            APIError: If the envelope reports a failure
        """
        payload = await self._read_json(response, command)
        try:
            envelope = Envelope.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"{command} returned an unexpected envelope: {e}") from e

        if not envelope.success:
            raise APIError(envelope.error.code, envelope.error.message)
        return envelope.data

    @staticmethod
    def _decode(adapter: TypeAdapter, payload: Any, command: Command) -> Any:
        try:
            return adapter.validate_python(payload)
        except ValidationError as e:
            raise DecodeError(f"{command} returned an unexpected payload: {e}") from e

    async def get_index(self) -> List[Comic]:
        """
        List every comic series tracked by the server.

        Returns:
            Comics in server order (possibly empty)
        """
        async with self._request(Command.INDEX) as response:
            data = await self._unwrap(response, Command.INDEX)
        return self._decode(_COMIC_LIST, data, Command.INDEX)

    async def get_comic(self, comic_id: str) -> ComicDetail:
        """
        Fetch a comic series with its issues and annuals.

        The id is forwarded as given; the server decides how to answer an
        empty or unknown id.

        Args:
            comic_id: Mylar comic ID
        """
        params = {'id': comic_id}
        async with self._request(Command.COMIC_DETAIL, params) as response:
            data = await self._unwrap(response, Command.COMIC_DETAIL)
        return self._decode(_COMIC_DETAIL, data, Command.COMIC_DETAIL)

    async def get_wanted(self) -> List[WantedIssue]:
        """
        List issues the server wants but has not collected yet.

        Unlike the other commands, getWanted answers with a bare JSON array
        rather than the success/error envelope. A server-side failure can
        therefore only show up as a DecodeError (or an unexpected list),
        never as an APIError.

        Returns:
            Wanted issues in server order
        """
        async with self._request(Command.WANTED) as response:
            data = await self._read_json(response, Command.WANTED)
        return self._decode(_WANTED_LIST, data, Command.WANTED)

    async def get_history(self) -> List[History]:
        """
        List the server's download and post-processing history.

        Returns:
            History entries in server order
        """
        async with self._request(Command.HISTORY) as response:
            data = await self._unwrap(response, Command.HISTORY)
        return self._decode(_HISTORY_LIST, data, Command.HISTORY)

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            logger.debug("Closed aiohttp session")

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit with cleanup."""
        await self.close()


@asynccontextmanager
async def get_mylar_client(config: Optional[MylarConfig] = None) -> AsyncIterator[MylarClient]:
    """
    Get a configured client as an async context manager.

    Usage:
        async with get_mylar_client() as client:
            comics = await client.get_index()
    """
    client = MylarClient.from_config(config)
    try:
        yield client
    finally:
        await client.close()
