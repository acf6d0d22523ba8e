"""Command-line interface for intgraph."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from intgraph.codec import decode16_many
from intgraph.config import DEFAULT_CONFIG, EngineConfig, load_config
from intgraph.errors import EngineError
from intgraph.logging import get_logger, level_from_flags, set_global_log_level
from intgraph.service import OCTET_STREAM, Response, ServiceRouter

logger = get_logger(__name__)

_FORMATS = ("raw", "hex", "ints")


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 8) -> str:
    """Format data as a simple ASCII table."""
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[i])) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _render(response: Response, fmt: str) -> bytes:
    """Return the bytes to emit for `response` in output format `fmt`.

    ``ints`` decodes binary bodies as 16-bit words; text bodies pass through.
    """
    if fmt == "raw":
        return response.body
    if fmt == "hex":
        return (response.body.hex() + "\n").encode()
    if response.content_type != OCTET_STREAM:
        return response.body + b"\n"
    if len(response.body) % 2:
        raise ValueError("Response body is not a sequence of 16-bit words")
    words = decode16_many(response.body)
    return (" ".join(str(w) for w in words) + "\n").encode()


def _run_service(
    router: ServiceRouter,
    service: str,
    args: str,
    fmt: str,
    output: Optional[Path],
) -> None:
    """Dispatch one service call and write its rendered body.

    Exits with status 1 on rejected input or an unknown service.
    """
    try:
        response = router.dispatch(service, args)
    except KeyError as e:
        logger.error(f"Unknown service: {service}")
        print(f"ERROR: {e.args[0]}. Run 'intgraph services' for the list.")
        sys.exit(1)
    except EngineError as e:
        logger.error(f"Rejected {service} input: {type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)

    data = _render(response, fmt)
    if not response.body:
        logger.info(f"{service}: no result")

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(data)
        logger.info(f"Wrote {len(data)} bytes to {output}")
        return

    stream = getattr(sys.stdout, "buffer", None)
    if stream is None:
        sys.stdout.write(data.decode("latin-1"))
    else:
        sys.stdout.flush()
        stream.write(data)
        stream.flush()


def _list_services(router: ServiceRouter) -> None:
    rows = [[name, desc] for name, desc in router.services.items()]
    print("Available services:")
    print(_format_table(["Service", "Description"], rows))


def _load_router(config_path: Optional[Path]) -> ServiceRouter:
    config: EngineConfig = DEFAULT_CONFIG
    if config_path is not None:
        try:
            config = load_config(config_path)
        except FileNotFoundError:
            logger.error(f"Config file not found: {config_path}")
            print(f"ERROR: Config file not found: {config_path}")
            sys.exit(1)
        except (ValueError, yaml.YAMLError) as e:
            logger.error(f"Invalid config {config_path}: {e}")
            print(f"ERROR: Invalid config: {e}")
            sys.exit(1)
        except OSError as e:
            logger.error(f"Failed to read config {config_path}: {e}")
            print(f"ERROR: Failed to read config: {e}")
            sys.exit(1)
        logger.debug(f"Loaded config from {config_path}: {config.to_dict()}")
    return ServiceRouter(config)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``intgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="intgraph",
        description="Run integer-array and graph algorithms with binary output.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="YAML file overriding engine limits (max_vertices, max_edge_count, ...)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,services}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Run a service")
    run_parser.add_argument("service", help="Service name (see 'services')")
    run_parser.add_argument(
        "args",
        nargs="?",
        default="",
        help="Slash-delimited integers, e.g. 0/1/1/0",
    )
    run_parser.add_argument(
        "--format",
        "-f",
        choices=_FORMATS,
        default="raw",
        help="Output format: raw bytes, hex digits, or decoded 16-bit integers",
    )
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write output to this file instead of stdout",
    )

    subparsers.add_parser("services", help="List available services")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_from_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    router = _load_router(args.config)

    if args.command == "run":
        _run_service(router, args.service, args.args, args.format, args.output)
    elif args.command == "services":
        _list_services(router)


if __name__ == "__main__":
    main()
