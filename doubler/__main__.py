"""Launch the Doubler API server.

Usage:
    python -m doubler                   # Host/port from environment or defaults
    python -m doubler --port 8080       # Use custom port
    python -m doubler --log-level DEBUG
"""

import argparse
from typing import List, Optional

import uvicorn

from doubler.config import Settings
from doubler.main import create_app


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="doubler", description="Run the Doubler API server")
    parser.add_argument("--host", default=None, help="Server host (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Server port (default: PORT or 8000)")
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command line flags taking precedence."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def main(argv: Optional[List[str]] = None) -> None:
    settings = build_settings(parse_args(argv))
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
