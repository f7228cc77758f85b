"""Entry point: ``python -m seedforge``.

Supports two modes:
  - ``python -m seedforge serve``  Launch the FastAPI service (default)
  - ``python -m seedforge cli``    Print draws or a state payload for a seed
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from seedforge.core.enums import Algorithm, DrawKind

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING"]


def _parse_seed(text: str) -> str | int:
    """Integers stay integers; everything else is a string seed."""
    try:
        return int(text)
    except ValueError:
        return text


def _parse_params(pairs: Sequence[str]) -> dict[str, float | int]:
    params: dict[str, float | int] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"expected NAME=VALUE, got {pair!r}")
        try:
            params[name] = int(value)
        except ValueError:
            params[name] = float(value)
    return params


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SeedForge deterministic random generation")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI service (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=_parse_seed, default=42)
    srv.add_argument("--algorithm", type=str, default=Algorithm.XOSHIRO128SS.value)
    srv.add_argument("--max-sessions", type=int, default=None)
    srv.add_argument("--log-level", type=str, default="INFO", choices=_LOG_LEVELS)

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Print draws for a seed")
    cli.add_argument("--seed", type=_parse_seed, default=42)
    cli.add_argument("--algorithm", type=str, default=Algorithm.XOSHIRO128SS.value)
    cli.add_argument("--kind", type=str, default=DrawKind.RANDOM.value, choices=[k.value for k in DrawKind])
    cli.add_argument(
        "--param", action="append", default=[], metavar="NAME=VALUE",
        help="Distribution parameter, e.g. --param shape=2 (repeatable)",
    )
    cli.add_argument("--count", type=int, default=10)
    cli.add_argument("--skip", type=int, default=0, help="Discard this many raw draws first")
    cli.add_argument("--state", action="store_true", help="Print the state payload after drawing")
    cli.add_argument("--log-level", type=str, default="WARNING", choices=_LOG_LEVELS)

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from seedforge.api.app import create_app
    from seedforge.config import ForgeConfig

    config = ForgeConfig().with_overrides(
        default_seed=args.seed,
        default_algorithm=args.algorithm,
        max_sessions=args.max_sessions,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def _run_cli(args: argparse.Namespace) -> int:
    from seedforge.core.errors import ConfigurationError
    from seedforge.systems.rng import SeededRNG
    from seedforge.utils.logging import setup_logging

    setup_logging(args.log_level)

    try:
        rng = SeededRNG(args.seed, args.algorithm)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for _ in range(args.skip):
        rng.random_int()

    draw = getattr(rng, args.kind)
    try:
        params = _parse_params(args.param)
        values = [draw(**params) for _ in range(args.count)]
    except (ValueError, TypeError, ArithmeticError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    for value in values:
        print(value)

    if args.state:
        print(rng.get_state().to_json())
    logger.info("Printed %d %s draw(s) for seed %r", args.count, args.kind, args.seed)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])
    if args.command == "serve":
        _run_server(args)
        return 0
    return _run_cli(args)


if __name__ == "__main__":
    sys.exit(main())
