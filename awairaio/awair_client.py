"""Python API for the Awair Local API

The Local API is documented at
https://support.getawair.com/hc/en-us/articles/360049221014-Awair-Element-Local-API-Feature
"""
from __future__ import annotations

from typing import Any, Callable, TypeVar
import asyncio
import logging
import re

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout
from yarl import URL

from awairaio.air_model import AirSample, DeviceConfig
from awairaio.constants import Endpoint, Header, TIMEOUT
from awairaio.exceptions import InvalidBase, InvalidUrl, RequestError


LOGGER = logging.getLogger(__name__)

_T = TypeVar('_T')

_HOST_SCHEMES = frozenset({'http', 'https', 'ws', 'wss', 'ftp'})
_FORBIDDEN_HOST = re.compile(r'[\s#%/<>?@\[\\\]^|]')


class AwairClient:
    """Awair Local API client."""

    def __init__(
        self, base_url: str, session: ClientSession | None = None, timeout: float = TIMEOUT
    ) -> None:
        """Initialize Awair Client.

        base_url: URL of the device's Local API, e.g. http://192.168.1.10
        session: aiohttp.ClientSession or None to create one on first request
        timeout: total seconds allowed for each request
        """

        self._base_url: URL = self._parse_base_url(base_url)
        self._session: ClientSession | None = session
        self._owns_session: bool = session is None
        self.timeout: float = timeout

    @staticmethod
    def _parse_base_url(base_url: str) -> URL:
        """Validate that base_url is absolute and usable as a base for API paths."""

        try:
            url = URL(base_url)
            hosts = (url.raw_host, url.host)
        except (TypeError, ValueError) as url_error:
            raise InvalidUrl(f'Invalid API URL {base_url!r}: {url_error}') from url_error
        if not url.scheme:
            raise InvalidUrl(f'Invalid API URL {base_url!r}: relative URL without a base')
        if url.scheme in _HOST_SCHEMES and not url.raw_host:
            raise InvalidUrl(f'Invalid API URL {base_url!r}: empty host')
        for host in hosts:
            # IPv6 literals have already been validated by yarl
            if host and ':' not in host and _FORBIDDEN_HOST.search(host):
                raise InvalidUrl(f'Invalid API URL {base_url!r}: invalid host {host!r}')
        # Opaque URLs such as mailto: or data: have no hierarchical path to join onto
        if not url.path.startswith('/'):
            raise InvalidBase(base_url)
        return url

    @property
    def base_url(self) -> URL:
        return self._base_url

    async def poll(self) -> AirSample:
        """Poll the Awair for its latest air quality data."""

        return await self._get_endpoint(Endpoint.AIR_DATA, AirSample.from_dict)

    async def config(self) -> DeviceConfig:
        """Fetch the Awair's active device configuration."""

        return await self._get_endpoint(Endpoint.CONFIG, DeviceConfig.from_dict)

    async def close(self) -> None:
        """Close the session if this client created it."""

        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AwairClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _url(self, endpoint: Endpoint) -> URL:
        return self._base_url.join(URL(str(endpoint)))

    async def _get_endpoint(self, endpoint: Endpoint, decode: Callable[[Any], _T]) -> _T:
        """GET an API endpoint and decode its JSON body."""

        url = self._url(endpoint)
        headers = {
            'accept': Header.ACCEPT,
            'user-agent': Header.USER_AGENT,
        }
        if self._session is None:
            self._session = ClientSession()
        LOGGER.debug(
            f'Sending request to endpoint {url}'
        )
        try:
            async with self._session.get(
                url, headers=headers, timeout=ClientTimeout(total=self.timeout)
            ) as resp:
                response = await self._response(resp)
        except (ClientError, asyncio.TimeoutError) as resp_error:
            raise RequestError(f'Request to {url} failed: {resp_error!r}') from resp_error
        try:
            return decode(response)
        except (KeyError, TypeError, ValueError) as decode_error:
            raise RequestError(
                f'Could not decode response from {url}: {decode_error}'
            ) from decode_error

    @staticmethod
    async def _response(resp: ClientResponse) -> Any:
        """Return the JSON body of a successful response."""

        LOGGER.debug(
            f'Response from {resp.url}: status {resp.status}'
        )
        if not 200 <= resp.status < 300:
            raise RequestError(
                f'Awair API error. Status: {resp.status}, Reason: {resp.reason}',
                status=resp.status,
            )
        try:
            return await resp.json(content_type=None)
        except ValueError as resp_error:
            raise RequestError(f'Could not return json: {resp_error}') from resp_error
