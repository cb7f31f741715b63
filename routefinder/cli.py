"""Command-line interface for routefinder."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import (
    LocationNotFoundError,
    NoRouteFoundError,
    RouteFinderError,
)
from .domain.models import Route
from .logging_setup import configure_logging, set_log_level
from .ports.graph import GraphRepositoryPort, RouteWriterPort
from .services import RoutePlannerService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_QUERY_ERROR = 1
EXIT_INPUT_ERROR = 2

PROMPT = "please enter the route: "
EXIT_WORDS = {"exit", "quit"}


def _exit_code(error: RouteFinderError) -> int:
    if isinstance(error, (LocationNotFoundError, NoRouteFoundError)):
        return EXIT_QUERY_ERROR
    return EXIT_INPUT_ERROR


def _load_planner(container: Container, routes_file: Path) -> RoutePlannerService:
    repository = container.resolve(GraphRepositoryPort)
    repository.load_from(routes_file)
    return container.resolve(RoutePlannerService)


def _record(
    container: Container,
    source: str,
    target: str,
    routes: List[Route],
    output: Optional[Path],
) -> None:
    """Append answered routes when an output file is requested or configured."""
    if output is None and container.config.output.results_file is None:
        return
    writer = container.resolve(RouteWriterPort)
    for route in routes:
        written = writer.write_route(source, target, route, output)
        logger.info("Result recorded", extra={"path": str(written)})


def _run_query(
    container: Container,
    routes_file: Path,
    source: str,
    target: str,
    all_routes: bool,
    output: Optional[Path],
) -> int:
    try:
        planner = _load_planner(container, routes_file)
        if all_routes:
            routes = list(planner.get_all_routes(source, target))
            print(planner.format_route_list(routes))
        else:
            routes = [planner.get_best_route(source, target)]
            print(f"best route: {planner.format_route(routes[0])}")
        _record(container, source, target, routes, output)
    except RouteFinderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return _exit_code(e)
    return EXIT_OK


def _add_connection(
    container: Container,
    routes_file: Path,
    origin: str,
    destination: str,
    cost: int,
) -> int:
    try:
        repository = container.resolve(GraphRepositoryPort)
        repository.load_from(routes_file)
        repository.add_connection(origin, destination, cost)
    except RouteFinderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return _exit_code(e)
    print(f"connection added: {origin} - {destination} > ${cost}")
    return EXIT_OK


def _run_shell(
    container: Container,
    routes_file: Path,
    all_routes: bool,
    output: Optional[Path],
    stdin: TextIO,
) -> int:
    """Answer ``SOURCE-TARGET`` queries read from ``stdin`` until EOF or exit."""
    try:
        planner = _load_planner(container, routes_file)
    except RouteFinderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return _exit_code(e)

    while True:
        print(PROMPT, end="", flush=True)
        line = stdin.readline()
        if not line:
            print()
            break

        query = line.strip()
        if not query:
            continue
        if query.lower() in EXIT_WORDS:
            break

        try:
            source, target = planner.parse_query(query)
        except ValueError as e:
            print(f"Error: {e}")
            continue

        if all_routes:
            routes, error = planner.get_all_routes_safe(source, target)
        else:
            best, error = planner.get_best_route_safe(source, target)
            routes = (best,) if best is not None else ()

        if error is not None:
            print(f"Error: {error}")
            continue

        if all_routes:
            print(planner.format_route_list(routes))
        else:
            print(f"best route: {planner.format_route(routes[0])}")

        try:
            _record(container, source, target, list(routes), output)
        except RouteFinderError as e:
            print(f"Error: {e}", file=sys.stderr)
            return _exit_code(e)

    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="routefinder",
        description="Find the cheapest and all simple routes in a route table.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{best,all,add,shell}",
        help="Available commands",
    )

    best_parser = subparsers.add_parser("best", help="Print the cheapest route")
    all_parser = subparsers.add_parser("all", help="Print every route, cheapest first")
    for p in (best_parser, all_parser):
        p.add_argument("routes_file", type=Path, help="Route table (CSV)")
        p.add_argument("source", help="Source location name")
        p.add_argument("target", help="Target location name")

    add_parser = subparsers.add_parser(
        "add", help="Append a connection to the route table"
    )
    add_parser.add_argument("routes_file", type=Path, help="Route table (CSV)")
    add_parser.add_argument("origin", help="Origin location name")
    add_parser.add_argument("destination", help="Destination location name")
    add_parser.add_argument("cost", type=int, help="Non-negative connection cost")

    shell_parser = subparsers.add_parser(
        "shell", help="Answer SOURCE-TARGET queries interactively"
    )
    shell_parser.add_argument("routes_file", type=Path, help="Route table (CSV)")
    shell_parser.add_argument(
        "--all",
        dest="all_routes",
        action="store_true",
        help="Print every route instead of only the cheapest",
    )

    for p in (best_parser, all_parser, shell_parser):
        p.add_argument(
            "--output",
            "-o",
            type=Path,
            default=None,
            help=(
                "Append answered routes to this file"
                " (default: RF_OUTPUT_RESULTS_FILE when set)"
            ),
        )

    return parser


def main(
    argv: Optional[List[str]] = None,
    config: Optional[AppConfig] = None,
    stdin: Optional[TextIO] = None,
) -> int:
    """Entry point for the ``routefinder`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``,
            ``sys.argv`` is used.
        config: Optional configuration override.
        stdin: Input stream for the ``shell`` command (defaults to sys.stdin).

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    config = config or get_config()
    configure_logging(config.observability)
    if args.verbose:
        set_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_log_level(logging.WARNING)

    container = Container.create_default(config)

    if args.command in ("best", "all"):
        return _run_query(
            container,
            args.routes_file,
            args.source,
            args.target,
            all_routes=args.command == "all",
            output=args.output,
        )
    if args.command == "add":
        return _add_connection(
            container, args.routes_file, args.origin, args.destination, args.cost
        )
    return _run_shell(
        container,
        args.routes_file,
        all_routes=args.all_routes,
        output=args.output,
        stdin=stdin or sys.stdin,
    )


if __name__ == "__main__":
    raise SystemExit(main())
