"""Command line interface for searching NaPTAN stops and measuring trips."""

import asyncio
import json
import logging
import sys
from typing import Any

from naptan_stops.adapters.config import AppConfig
from naptan_stops.adapters.formatters import StopFormatter
from naptan_stops.adapters.naptan import FileStopSource, NaptanHttpSource
from naptan_stops.application.services import (
    CsvModuleSplitter,
    GeodesyCalculator,
    StopMatcher,
    TripPlanner,
)
from naptan_stops.domain.errors import DataSourceError, ParseError, ValidationError
from naptan_stops.domain.models import (
    Coordinate,
    StopRecord,
    TravelMode,
    TripSelection,
    TripSummary,
)
from naptan_stops.domain.ports import StopDataSource

logger = logging.getLogger(__name__)

MODE_CHOICES = [mode.value for mode in TravelMode]


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def load_config(config_file: str | None = None) -> AppConfig:
    """Load settings from the environment and an optional TOML file."""
    config = AppConfig(config_file=config_file) if config_file else AppConfig()
    config.load_toml_overrides()
    return config


def build_matcher(config: AppConfig, quote_aware: bool = False) -> StopMatcher:
    splitter = CsvModuleSplitter() if quote_aware or config.quote_aware_csv else None
    return StopMatcher(
        splitter=splitter, max_results=config.max_results, scan_limit=config.scan_limit
    )


def build_source(
    config: AppConfig, file_path: str | None = None, data_format: str | None = None
) -> StopDataSource:
    """Choose a local file source when a path is given, else the NaPTAN API."""
    if file_path:
        return FileStopSource(file_path, data_format=data_format)
    if data_format:
        config.data_format = data_format
    return NaptanHttpSource.from_config(config)


def stop_to_dict(stop: StopRecord) -> dict[str, Any]:
    """Serialise a stop using the dataset's own column names."""
    return {
        "ATCOCode": stop.atco_code,
        "CommonName": stop.common_name,
        "LocalityName": stop.locality_name,
        "StopType": stop.stop_type,
        "Status": stop.status,
        "Latitude": stop.latitude,
        "Longitude": stop.longitude,
    }


def summary_to_dict(summary: TripSummary) -> dict[str, Any]:
    return {
        "from": stop_to_dict(summary.from_stop),
        "to": stop_to_dict(summary.to_stop),
        "distance": {
            "miles": summary.distance.miles,
            "km": summary.distance.kilometres,
        },
        "estimates": {estimate.mode.value: estimate.minutes for estimate in summary.estimates},
    }


def pick_stop(results: list[StopRecord], index: int, query: str) -> StopRecord:
    """Pick the 1-based ``index``-th result of a search.

    Raises:
        ValidationError: If the search found nothing or the index is out of range.
    """
    if not results:
        raise ValidationError("query", "a search term that matches at least one stop", query)
    if index < 1 or index > len(results):
        raise ValidationError("index", f"a result number between 1 and {len(results)}", index)
    return results[index - 1]


async def search_stops(
    source: StopDataSource, matcher: StopMatcher, query: str
) -> list[StopRecord]:
    """Fetch the corpus and return the stops matching the query."""
    corpus = await source.fetch_corpus()
    return matcher.match(corpus, query)


async def plan_trip(
    source: StopDataSource,
    matcher: StopMatcher,
    planner: TripPlanner,
    from_query: str,
    to_query: str,
    from_index: int = 1,
    to_index: int = 1,
    modes: list[str] | None = None,
) -> TripSummary:
    """Search both stops in one corpus download and summarise the trip between them."""
    corpus = await source.fetch_corpus()

    selection = TripSelection()
    from_stop = pick_stop(matcher.match(corpus, from_query), from_index, from_query)
    selection = selection.select(from_stop)
    logger.info(f"'{from_stop.display_label}' set as FROM stop")

    to_stop = pick_stop(matcher.match(corpus, to_query), to_index, to_query)
    selection = selection.select(to_stop)
    logger.info(f"'{to_stop.display_label}' set as TO stop")

    if modes:
        return planner.summarize(selection, modes)
    return planner.summarize(selection)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _build_parser() -> Any:
    import argparse

    parser = argparse.ArgumentParser(
        prog="naptan-stops",
        description="Search UK bus stops (NaPTAN) and measure distances between them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for stops by name or locality
  naptan-stops search "oxford street"

  # Search a locally saved export instead of downloading
  naptan-stops search leeds --file naptan.csv

  # Distance between two coordinates
  naptan-stops distance 51.5074 -0.1278 53.4808 -2.2426 --mode walking --mode bus

  # Distance between the first matches of two searches
  naptan-stops trip "piccadilly gardens" "victoria station" --file naptan.csv
        """,
    )
    parser.add_argument("--config", help="Path to a TOML configuration file")
    parser.add_argument("--log-level", help="Override the log level (e.g. DEBUG)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    def add_source_arguments(sub: Any) -> None:
        sub.add_argument("--file", help="Read stop data from a local CSV/JSON export")
        sub.add_argument("--format", choices=["csv", "json"], help="Feed format")
        sub.add_argument(
            "--quote-aware",
            action="store_true",
            help="Parse quoted CSV fields properly (commas inside quotes)",
        )
        sub.add_argument("--json", action="store_true", help="Output as JSON")

    search_parser = subparsers.add_parser("search", help="Search for stops")
    search_parser.add_argument("query", help="Text to find in stop names or localities")
    add_source_arguments(search_parser)

    distance_parser = subparsers.add_parser("distance", help="Distance between two coordinates")
    distance_parser.add_argument("lat1", type=float)
    distance_parser.add_argument("lon1", type=float)
    distance_parser.add_argument("lat2", type=float)
    distance_parser.add_argument("lon2", type=float)
    distance_parser.add_argument(
        "--mode", action="append", choices=MODE_CHOICES, help="Travel mode (repeatable)"
    )
    distance_parser.add_argument("--json", action="store_true", help="Output as JSON")

    trip_parser = subparsers.add_parser("trip", help="Distance between two searched stops")
    trip_parser.add_argument("from_query", help="Search text for the FROM stop")
    trip_parser.add_argument("to_query", help="Search text for the TO stop")
    trip_parser.add_argument("--from-index", type=int, default=1, help="Result number to use")
    trip_parser.add_argument("--to-index", type=int, default=1, help="Result number to use")
    trip_parser.add_argument(
        "--mode", action="append", choices=MODE_CHOICES, help="Travel mode (repeatable)"
    )
    add_source_arguments(trip_parser)

    return parser


def run_distance(args: Any) -> None:
    calculator = GeodesyCalculator()
    a = Coordinate(latitude=args.lat1, longitude=args.lon1)
    b = Coordinate(latitude=args.lat2, longitude=args.lon2)
    distance = calculator.distance(a, b)
    estimates = calculator.estimate_all(distance.miles, args.mode or MODE_CHOICES)

    if args.json:
        _print_json(
            {
                "miles": distance.miles,
                "km": distance.kilometres,
                "estimates": {e.mode.value: e.minutes for e in estimates},
            }
        )
        return
    print(f"{distance.miles:.2f} miles")
    print(f"{distance.kilometres:.2f} km")
    for estimate in estimates:
        print(f"{estimate.mode.label}: ~{estimate.minutes} minutes")


async def main() -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config(args.config)
        configure_logging(args.log_level.upper() if args.log_level else config.log_level)
        formatter = StopFormatter()

        if args.command == "search":
            source = build_source(config, args.file, args.format)
            stops = await search_stops(source, build_matcher(config, args.quote_aware), args.query)
            if args.json:
                _print_json([stop_to_dict(stop) for stop in stops])
            else:
                print(formatter.format_search_results(stops))
            if not stops:
                sys.exit(1)

        elif args.command == "distance":
            run_distance(args)

        elif args.command == "trip":
            source = build_source(config, args.file, args.format)
            summary = await plan_trip(
                source,
                build_matcher(config, args.quote_aware),
                TripPlanner(),
                args.from_query,
                args.to_query,
                from_index=args.from_index,
                to_index=args.to_index,
                modes=args.mode,
            )
            if args.json:
                _print_json(summary_to_dict(summary))
            else:
                print(formatter.format_trip(summary))

    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ParseError as e:
        print(f"No stop data available: {e}", file=sys.stderr)
        sys.exit(1)
    except DataSourceError as e:
        print(
            f"Failed to search stops. The NaPTAN API may be temporarily unavailable. ({e})",
            file=sys.stderr,
        )
        sys.exit(1)
    except (ValueError, FileNotFoundError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
