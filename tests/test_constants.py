"""Tests for chuk-mcp-naver-maps constants."""

from chuk_mcp_naver_maps.constants import (
    ALL_TOOLS,
    MIME_TYPES,
    ROUTE_OPTION_LABELS,
    ROUTE_PRIORITY,
    Endpoints,
    ErrorMessages,
    Headers,
    MapFormat,
    NaverConfig,
    RouteOption,
    ServerConfig,
    StaticMapLimits,
)


class TestServerConfig:
    def test_name(self):
        assert ServerConfig.NAME == "chuk-mcp-naver-maps"

    def test_version(self):
        assert ServerConfig.VERSION == "0.1.0"


class TestNaverConfig:
    def test_base_url(self):
        assert NaverConfig.BASE_URL == "https://maps.apigw.ntruss.com"

    def test_endpoints_are_paths(self):
        for endpoint in (
            Endpoints.GEOCODE,
            Endpoints.REVERSE_GEOCODE,
            Endpoints.DRIVING,
            Endpoints.STATIC_MAP,
        ):
            assert endpoint.startswith("/")

    def test_headers(self):
        assert Headers.KEY_ID == "x-ncp-apigw-api-key-id"
        assert Headers.KEY == "x-ncp-apigw-api-key"


class TestRouteOptions:
    def test_priority_order(self):
        assert [o.value for o in ROUTE_PRIORITY] == [
            "trafast",
            "traoptimal",
            "tracomfort",
            "trainormal",
        ]

    def test_every_option_labelled(self):
        assert set(ROUTE_OPTION_LABELS) == set(RouteOption)


class TestStaticMapLimits:
    def test_default_level_in_range(self):
        assert StaticMapLimits.MIN_LEVEL <= StaticMapLimits.DEFAULT_LEVEL <= StaticMapLimits.MAX_LEVEL

    def test_max_size(self):
        assert StaticMapLimits.MAX_SIZE == 1280

    def test_every_format_has_mime(self):
        assert set(MIME_TYPES) == set(MapFormat)


class TestToolLists:
    def test_all_tools(self):
        assert ALL_TOOLS == ["directions", "geocode", "reverse_geocode", "static_map"]


class TestMessages:
    def test_failed_prefix(self):
        assert ErrorMessages.FAILED.format("x") == "오류 발생: x"
