"""
Constants for chuk-mcp-naver-maps server.

All magic strings, API metadata, and configuration values live here.
"""

from enum import Enum


class ServerConfig:
    NAME = "chuk-mcp-naver-maps"
    VERSION = "0.1.0"
    DESCRIPTION = "Directions, Geocoding & Static Map MCP Server via Naver Maps"
    DEFAULT_HOST = "localhost"
    DEFAULT_PORT = 8020


class NaverConfig:
    BASE_URL = "https://maps.apigw.ntruss.com"
    USER_AGENT = "chuk-mcp-naver-maps/0.1.0"
    CURRENCY_SUFFIX = "원"


class Endpoints:
    GEOCODE = "/map-geocode/v2/geocode"
    REVERSE_GEOCODE = "/map-reversegeocode/v2/gc"
    DRIVING = "/map-direction/v1/driving"
    STATIC_MAP = "/map-static/v2/raster"


class Headers:
    KEY_ID = "x-ncp-apigw-api-key-id"
    KEY = "x-ncp-apigw-api-key"


class EnvVar:
    MCP_STDIO = "MCP_STDIO"
    NAVER_CLIENT_ID = "NAVER_CLIENT_ID"
    NAVER_CLIENT_SECRET = "NAVER_CLIENT_SECRET"
    NAVER_MAPS_DEBUG = "NAVER_MAPS_DEBUG"
    NAVER_MAPS_BASE_URL = "NAVER_MAPS_BASE_URL"
    NAVER_MAPS_OUTPUT_DIR = "NAVER_MAPS_OUTPUT_DIR"


class RouteOption(str, Enum):
    """Naver driving route profiles."""

    TRAFAST = "trafast"  # fastest, real-time traffic
    TRACOMFORT = "tracomfort"
    TRAOPTIMAL = "traoptimal"
    TRAINORMAL = "trainormal"  # avoids expressways


# Order in which route profiles are read from a directions response.
ROUTE_PRIORITY = [
    RouteOption.TRAFAST,
    RouteOption.TRAOPTIMAL,
    RouteOption.TRACOMFORT,
    RouteOption.TRAINORMAL,
]

ROUTE_OPTION_LABELS = {
    RouteOption.TRAFAST: "실시간 빠른길",
    RouteOption.TRACOMFORT: "편안한길",
    RouteOption.TRAOPTIMAL: "최적경로",
    RouteOption.TRAINORMAL: "일반도로",
}


class MapFormat(str, Enum):
    PNG = "png"
    JPEG = "jpeg"


MIME_TYPES = {
    MapFormat.PNG: "image/png",
    MapFormat.JPEG: "image/jpeg",
}

FILE_EXTENSIONS = {
    MapFormat.PNG: "png",
    MapFormat.JPEG: "jpg",
}


class MapDelivery(str, Enum):
    """How a rendered static map is handed back to the caller."""

    INLINE = "inline"  # base64 image content
    URL = "url"  # raster URL only, nothing fetched
    FILE = "file"  # fetched and written to the output directory


class StaticMapLimits:
    MIN_LEVEL = 1
    MAX_LEVEL = 20
    DEFAULT_LEVEL = 6
    MIN_SIZE = 1
    MAX_SIZE = 1280
    DEFAULT_SIZE = 400


# Tool lists
DIRECTIONS_TOOLS = ["directions"]
GEOCODING_TOOLS = ["geocode", "reverse_geocode"]
STATIC_MAP_TOOLS = ["static_map"]
ALL_TOOLS = DIRECTIONS_TOOLS + GEOCODING_TOOLS + STATIC_MAP_TOOLS


class ErrorMessages:
    FAILED = "오류 발생: {}"
    API_ERROR = "네이버 API 오류: {} {}"
    NETWORK_ERROR = "네이버 API 연결 오류: {}"
    MISSING_CREDENTIALS = "네이버 API 인증 정보(NAVER_CLIENT_ID, NAVER_CLIENT_SECRET)가 설정되지 않았습니다"
    ROUTE_NOT_FOUND = "경로를 찾을 수 없습니다."
    ADDRESS_NOT_FOUND = "주소를 찾을 수 없습니다."
    COORDINATE_NOT_FOUND = "해당 좌표의 주소를 찾을 수 없습니다."
    EMPTY_QUERY = "주소 또는 좌표가 비어 있습니다"
    INVALID_LAT = "위도 {}가 올바르지 않습니다: -90에서 90 사이여야 합니다"
    INVALID_LNG = "경도 {}가 올바르지 않습니다: -180에서 180 사이여야 합니다"
    INVALID_OPTION = "경로 옵션 '{}'이(가) 올바르지 않습니다: {} 중 하나여야 합니다"
    INVALID_LEVEL = "지도 레벨은 {}에서 {} 사이여야 합니다: {}"
    INVALID_SIZE = "지도 {}은(는) {}에서 {} 사이여야 합니다: {}"
    INVALID_FORMAT = "이미지 형식 '{}'이(가) 올바르지 않습니다: {} 중 하나여야 합니다"
    INVALID_DELIVERY = "전달 방식 '{}'이(가) 올바르지 않습니다: {} 중 하나여야 합니다"


class SuccessMessages:
    DIRECTIONS = "🚗 길찾기 결과"
    STATIC_MAP = "🗺️ 정적 지도 이미지가 생성되었습니다."
    STATIC_MAP_INLINE = "이미지가 Base64 형식으로 반환되었습니다."
    STATIC_MAP_URL = "🔗 이미지 URL:\n{}\n\n* 요청 시 네이버 API 인증 헤더가 필요합니다."
    STATIC_MAP_FILE = "💾 저장 위치: {}"
