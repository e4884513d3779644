#!/usr/bin/env python3
"""
Naver Maps MCP Server - Entry Point

Provides driving directions, forward/reverse geocoding, and static map
images via the Naver Maps API.
Runs over stdio (desktop MCP clients) or HTTP.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .constants import EnvVar, ServerConfig

# NAVER_CLIENT_ID / NAVER_CLIENT_SECRET must be in the environment before
# async_server builds its settings.
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)

from .async_server import mcp  # noqa: E402


def resolve_mode(requested: str | None) -> str:
    """Pick the transport: explicit choice, else stdio when piped or MCP_STDIO is set."""
    if requested is not None:
        return requested
    if os.environ.get(EnvVar.MCP_STDIO) or not sys.stdin.isatty():
        return "stdio"
    return "http"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=ServerConfig.NAME, description=ServerConfig.DESCRIPTION)
    parser.add_argument("mode", nargs="?", choices=["stdio", "http"], default=None)
    parser.add_argument("--host", default=ServerConfig.DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=ServerConfig.DEFAULT_PORT)
    return parser


def main() -> None:
    """Main entry point for the MCP server."""
    args = _build_parser().parse_args()
    mode = resolve_mode(args.mode)

    if mode == "stdio":
        print(f"{ServerConfig.NAME} starting in STDIO mode", file=sys.stderr)
        mcp.run(stdio=True)
    else:
        print(f"{ServerConfig.NAME} listening on http://{args.host}:{args.port}", file=sys.stderr)
        mcp.run(host=args.host, port=args.port, stdio=False)


if __name__ == "__main__":
    main()
