"""Runtime settings and command-line parsing."""

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from .constants import GRID_W, GRID_H, REFRESH_RATE_MS, DEFAULT_HOST, DEFAULT_PORT


@dataclass
class Settings:
    grid_width: int = GRID_W
    grid_height: int = GRID_H
    refresh_rate_ms: int = REFRESH_RATE_MS
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-arcade",
        description="A classic Snake game served to the browser",
    )
    parser.add_argument("--refresh-rate", type=positive_int, default=REFRESH_RATE_MS,
                        help="Refresh rate in milliseconds (lower = faster game)")
    parser.add_argument("--width", type=positive_int, default=GRID_W, help="Grid width in cells")
    parser.add_argument("--height", type=positive_int, default=GRID_H, help="Grid height in cells")
    parser.add_argument("--host", default=DEFAULT_HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to listen on")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        type=str.upper, help="Logging verbosity")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Settings:
    args = build_parser().parse_args(argv)
    return Settings(
        grid_width=args.width,
        grid_height=args.height,
        refresh_rate_ms=args.refresh_rate,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )
