from __future__ import annotations

import asyncio
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from awairaio import Endpoint


AIR_DATA: dict[str, Any] = {
    "timestamp": "2020-08-31T22:07:03.831Z",
    "score": 85,
    "dew_point": 11.86,
    "temp": 22.91,
    "humid": 49.72,
    "abs_humid": 10.07,
    "co2": 612,
    "co2_est": 409,
    "co2_est_baseline": 35564,
    "voc": 99,
    "voc_baseline": 38045,
    "voc_h2_raw": 26,
    "voc_ethanol_raw": 38,
    "pm25": 2,
    "pm10_est": 3,
}

CONFIG_DATA: dict[str, Any] = {
    "device_uuid": "awair-element_5366",
    "wifi_mac": "70:88:6B:14:03:A2",
    "ssid": "HomeNet",
    "ip": "192.168.1.10",
    "netmask": "255.255.255.0",
    "gateway": "192.168.1.1",
    "fw_version": "1.1.5",
    "timezone": "America/Los_Angeles",
    "display": "score",
    "led": {"mode": "auto", "brightness": 179},
    "voc_feature_set": 34,
}


@pytest.fixture
def air_payload() -> dict[str, Any]:
    return dict(AIR_DATA)


@pytest.fixture
def config_payload() -> dict[str, Any]:
    payload = dict(CONFIG_DATA)
    payload["led"] = dict(CONFIG_DATA["led"])
    return payload


class FakeAwair:
    """Local API stand-in that records the paths it is asked for."""

    def __init__(self) -> None:
        self.responses: dict[str, tuple[int, Any]] = {
            Endpoint.AIR_DATA.value: (200, AIR_DATA),
            Endpoint.CONFIG.value: (200, CONFIG_DATA),
        }
        self.requests: list[str] = []
        self.headers: list[Any] = []
        self.port: int = 0
        self.delay: float = 0

    @property
    def url(self) -> str:
        return f"http://127.0.0.1:{self.port}"

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append(str(request.rel_url))
        self.headers.append(request.headers)
        if self.delay:
            await asyncio.sleep(self.delay)
        status, body = self.responses.get(request.path, (404, {"error": "not found"}))
        if isinstance(body, str):
            return web.Response(status=status, text=body, content_type="application/json")
        return web.json_response(body, status=status)


@pytest_asyncio.fixture
async def device():
    fake = FakeAwair()
    app = web.Application()
    app.router.add_route("GET", "/{tail:.*}", fake.handle)
    server = TestServer(app, host="127.0.0.1")
    await server.start_server()
    fake.port = server.port
    yield fake
    await server.close()
