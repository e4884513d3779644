"""
Runtime configuration for chuk-mcp-naver-maps.

Credentials are read once at startup and never mutated afterwards.
"""

import logging
import os
import tempfile
from dataclasses import dataclass, field

from .constants import EnvVar, NaverConfig

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Credentials:
    """Naver Cloud Platform API key pair."""

    key_id: str
    key_secret: str = field(repr=False)

    @property
    def configured(self) -> bool:
        return bool(self.key_id and self.key_secret)


@dataclass(frozen=True)
class Settings:
    """Process-wide server settings."""

    credentials: Credentials
    debug: bool = False
    base_url: str = NaverConfig.BASE_URL
    output_dir: str = field(default_factory=tempfile.gettempdir)


def parse_bool(value: str | None) -> bool:
    """Interpret an environment variable as a boolean flag."""
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Settings instance; credentials may be empty if not configured
    """
    env = os.environ if environ is None else environ
    credentials = Credentials(
        key_id=env.get(EnvVar.NAVER_CLIENT_ID, ""),
        key_secret=env.get(EnvVar.NAVER_CLIENT_SECRET, ""),
    )
    if not credentials.configured:
        logger.warning(
            "%s / %s not set; Naver API calls will fail",
            EnvVar.NAVER_CLIENT_ID,
            EnvVar.NAVER_CLIENT_SECRET,
        )
    return Settings(
        credentials=credentials,
        debug=parse_bool(env.get(EnvVar.NAVER_MAPS_DEBUG)),
        base_url=env.get(EnvVar.NAVER_MAPS_BASE_URL) or NaverConfig.BASE_URL,
        output_dir=env.get(EnvVar.NAVER_MAPS_OUTPUT_DIR) or tempfile.gettempdir(),
    )
