"""Command-line entry point.

Asks for a source and a destination city (unless given as arguments),
plans the route in the requested mode, writes an HTML map and opens it
in the default browser.
"""

from __future__ import annotations

import argparse
import logging
import sys
import webbrowser
from pathlib import Path
from typing import Callable, List, Optional

from .config import get_config
from .container import Container
from .domain.errors import RouteMapperError
from .logging_setup import configure_logging
from .services import TravelPlannerService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="route-mapper",
        description="Plan a route between two cities and render it on a map.",
    )
    parser.add_argument("source", nargs="?", help="source city")
    parser.add_argument("destination", nargs="?", help="destination city")
    parser.add_argument(
        "--mode",
        choices=("bundled", "driving"),
        default="bundled",
        help="bundled city graph (default) or real driving route",
    )
    parser.add_argument("--output", type=Path, help="HTML map output path")
    parser.add_argument(
        "--no-browser", action="store_true", help="do not open the map"
    )
    parser.add_argument(
        "--no-sample",
        action="store_true",
        help="skip intermediate city sampling (driving mode)",
    )
    return parser


def _ask(value: Optional[str], prompt: str, input_fn: Callable[[str], str]) -> str:
    if value and value.strip():
        return value.strip()
    return input_fn(prompt).strip()


def main(
    argv: Optional[List[str]] = None,
    container: Optional[Container] = None,
    input_fn: Callable[[str], str] = input,
) -> int:
    args = build_parser().parse_args(argv)
    config = container.config if container else get_config()
    configure_logging(config.observability)

    container = container or Container.create_default(config)
    planner: TravelPlannerService = container.resolve(TravelPlannerService)

    try:
        source = _ask(args.source, "Enter source city: ", input_fn)
        destination = _ask(args.destination, "Enter destination city: ", input_fn)
    except EOFError:
        print("No input given.", file=sys.stderr)
        return 1

    output_path: Path = args.output or config.map_output_path

    try:
        if args.mode == "driving":
            driving = planner.plan_driving(
                source, destination, sample_cities=not args.no_sample
            )
            map_path = planner.render_driving(driving, output_path)
            print(planner.format_driving(driving, map_path))
        else:
            route = planner.plan_bundled(source, destination)
            map_path = planner.render_bundled(route, output_path)
            print(planner.format_bundled(route, map_path))
    except RouteMapperError as e:
        logger.debug("Planning failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if map_path and config.map.open_browser and not args.no_browser:
        webbrowser.open(Path(map_path).resolve().as_uri())

    return 0


if __name__ == "__main__":
    sys.exit(main())
