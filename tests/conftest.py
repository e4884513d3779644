"""Shared test fixtures for chuk-mcp-naver-maps."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from chuk_mcp_naver_maps.config import Credentials

# Sample Naver Maps API responses
SAMPLE_GEOCODE_RESPONSE = {
    "status": "OK",
    "meta": {"totalCount": 1, "page": 1, "count": 1},
    "addresses": [
        {
            "roadAddress": "서울특별시 강남구 테헤란로 152 강남파이낸스센터",
            "jibunAddress": "서울특별시 강남구 역삼동 737 강남파이낸스센터",
            "englishAddress": "152, Teheran-ro, Gangnam-gu, Seoul, Republic of Korea",
            "addressElements": [],
            "x": "127.0363456",
            "y": "37.5001883",
            "distance": 0.0,
        }
    ],
    "errorMessage": "",
}

SAMPLE_GEOCODE_EMPTY = {
    "status": "OK",
    "meta": {"totalCount": 0, "page": 1, "count": 0},
    "addresses": [],
    "errorMessage": "",
}

SAMPLE_REVERSE_RESPONSE = {
    "status": {"code": 0, "name": "ok", "message": "done"},
    "results": [
        {
            "name": "legalcode",
            "code": {"id": "1168010100", "type": "L", "mappingId": "09680101"},
            "region": {
                "area0": {"name": "kr"},
                "area1": {"name": "서울특별시"},
                "area2": {"name": "강남구"},
                "area3": {"name": "역삼동"},
                "area4": {"name": ""},
            },
        }
    ],
}

SAMPLE_REVERSE_EMPTY = {
    "status": {"code": 3, "name": "no results", "message": "요청한 데이타의 결과가 없습니다."},
    "results": [],
}


def make_route(distance=21500, duration=2_430_000, toll=1800, fuel=2835, taxi=27300):
    return {
        "summary": {
            "start": {"location": [127.0363456, 37.5001883]},
            "goal": {"location": [126.9783882, 37.5666103], "dir": 0},
            "distance": distance,
            "duration": duration,
            "tollFare": toll,
            "taxiFare": taxi,
            "fuelPrice": fuel,
            "departureTime": "2026-10-19T10:00:00",
        },
        "path": [[127.0363456, 37.5001883], [126.9783882, 37.5666103]],
    }


SAMPLE_DIRECTIONS_RESPONSE = {
    "code": 0,
    "message": "길찾기를 성공하였습니다.",
    "currentDateTime": "2026-10-19T10:00:00",
    "route": {"trafast": [make_route()]},
}

SAMPLE_DIRECTIONS_EMPTY = {
    "code": 1,
    "message": "출발지와 도착지가 동일합니다. 확인 후 다시 지정해주세요.",
    "currentDateTime": "2026-10-19T10:00:00",
}

SAMPLE_PNG = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"


@pytest.fixture
def credentials():
    return Credentials(key_id="test-id", key_secret="test-secret")


@pytest.fixture
def mock_naver_client():
    """Mock NaverMapsClient with canned responses."""
    client = AsyncMock()
    client.geocode = AsyncMock(return_value=SAMPLE_GEOCODE_RESPONSE)
    client.reverse_geocode = AsyncMock(return_value=SAMPLE_REVERSE_RESPONSE)
    client.driving = AsyncMock(return_value=SAMPLE_DIRECTIONS_RESPONSE)
    client.static_map = AsyncMock(return_value=SAMPLE_PNG)
    client.static_map_url = MagicMock(
        return_value="https://maps.apigw.ntruss.com/map-static/v2/raster?center=127%2C37"
    )
    return client


@pytest.fixture
def mock_service(mock_naver_client, tmp_path):
    """MapService with mocked NaverMapsClient."""
    from chuk_mcp_naver_maps.core.maps import MapService

    return MapService(client=mock_naver_client, output_dir=str(tmp_path))


@pytest.fixture
def capture_tools():
    """Return a function that registers tools on a fake mcp and returns them."""

    def _capture(register, service):
        tools = {}

        def capture_tool(**kwargs):
            def decorator(fn):
                tools[fn.__name__] = fn
                return fn

            return decorator

        mcp = MagicMock()
        mcp.tool = capture_tool
        register(mcp, service)
        return tools

    return _capture


@pytest.fixture
def registered_mcp(mock_service):
    """A real ChukMCPServer with every tool registered on the mocked service."""
    from chuk_mcp_server import ChukMCPServer

    from chuk_mcp_naver_maps.tools.directions import register_directions_tools
    from chuk_mcp_naver_maps.tools.geocoding import register_geocoding_tools
    from chuk_mcp_naver_maps.tools.static_map import register_static_map_tools

    mcp = ChukMCPServer("chuk-mcp-naver-maps-test")
    register_directions_tools(mcp, mock_service)
    register_geocoding_tools(mcp, mock_service)
    register_static_map_tools(mcp, mock_service)
    return mcp
