"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import http.server
import logging
import sys
from functools import partial

from weather_explorer import __version__
from weather_explorer.config import get_settings
from weather_explorer.dashboard import Dashboard, parse_unit
from weather_explorer.flows.refresh import refresh_dashboard, site_dir
from weather_explorer.renderers.console import ConsoleView
from weather_explorer.schemas import Unit
from weather_explorer.store import UNIT_KEY, DataStore, PreferenceStore


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-explorer",
        description="Current conditions and 5-day forecast for any city",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'weather' command - one lookup printed to the terminal
    weather_parser = subparsers.add_parser("weather", help="Show weather for a city")
    weather_parser.add_argument(
        "city",
        nargs="?",
        default=None,
        help="City name (default: last searched city)",
    )
    weather_parser.add_argument(
        "--unit",
        choices=[u.value for u in Unit],
        default=None,
        help="Display unit for this lookup (saved as the new preference)",
    )

    # 'unit' command - persist display unit
    unit_parser = subparsers.add_parser("unit", help="Set the display unit")
    unit_parser.add_argument("unit", choices=[u.value for u in Unit])

    subparsers.add_parser("info", help="Show application info")

    # 'refresh' command - fetch data and build site
    refresh_parser = subparsers.add_parser("refresh", help="Fetch weather and build the site")
    refresh_parser.add_argument(
        "cities",
        nargs="*",
        help="Cities to render (default: favorite_cities from settings)",
    )

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def _store() -> DataStore:
    return DataStore(get_settings().data_dir)


def _preferences() -> PreferenceStore:
    return PreferenceStore(_store())


def cmd_weather(args: argparse.Namespace) -> int:
    """Handle the 'weather' command."""
    settings = get_settings()
    view = ConsoleView(slot_count=settings.forecast_slots)
    dashboard = Dashboard.from_settings(settings, view, _preferences())
    if args.unit:
        dashboard.state.unit = parse_unit(args.unit)
        dashboard.preferences.set(UNIT_KEY, dashboard.state.unit.value)

    result = dashboard.get_weather(args.city)
    return 0 if result.success else 1


def cmd_unit(args: argparse.Namespace) -> int:
    """Handle the 'unit' command."""
    unit = parse_unit(args.unit)
    _preferences().set(UNIT_KEY, unit.value)
    print(f"Display unit set to {unit.value}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    preferences = _preferences()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"API key configured: {'yes' if settings.openweather_api_key else 'no'}")
    print(f"Unit: {preferences.get(UNIT_KEY, settings.default_unit)}")
    print(f"Favorites: {', '.join(settings.favorite_cities)}")
    return 0


def cmd_refresh(args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch data then build site."""
    result = refresh_dashboard(args.cities or None)
    failed = [city for city, r in result["cities"].items() if not r["success"]]
    print(f"Built {result['pages']} page(s) in {site_dir(_store())}.")
    if failed:
        print(f"Failed: {', '.join(failed)}", file=sys.stderr)
        return 1
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port

    site = site_dir(DataStore(settings.data_dir))
    if not site.exists():
        print("No site directory found. Run 'weather-explorer refresh' first.", file=sys.stderr)
        return 1

    handler = partial(http.server.SimpleHTTPRequestHandler, directory=str(site))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if (args.debug or settings.debug) else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "weather": cmd_weather,
        "unit": cmd_unit,
        "info": cmd_info,
        "refresh": cmd_refresh,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
