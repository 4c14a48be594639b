"""
Command-line interface for the tire pressure and wind recommender.

Usage:
    python -m tirerec make-example [--output rider.json]
    python -m tirerec pressure --input rider.json [--output result.json] [--readable]
    python -m tirerec compensate --input rider.json --temp 5 --elevation 300
    python -m tirerec compensate --input rider.json --lat 39.77 --lon -86.16
    python -m tirerec wind --from 270 --speed 12 [--heading 90] [--allow 300:30]
    python -m tirerec ride --input rider.json --lat 39.77 --lon -86.16
    python -m tirerec serve [--port 8000]
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from tirerec import __version__, config
from tirerec.conditions.exceptions import ConditionsError
from tirerec.conditions.open_meteo import OpenMeteoClient
from tirerec.models.enums import BikePreset, WindUnit
from tirerec.models.inputs import (
    AmbientConditions,
    Coordinates,
    HeadingOptions,
    RiderInputs,
    WindObservation,
)
from tirerec.recommender import HeadingAdvisor, PressureRecommender, recommend_ride
from tirerec.cli.readable_output import print_readable_data


def _interval(text: str) -> tuple[float, float]:
    """Parse an allowed-heading interval given as START:END."""
    try:
        start, end = text.split(":")
        return (float(start), float(end))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected START:END in degrees, got {text!r}")


def _timestamp(text: str) -> datetime:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected an ISO 8601 timestamp, got {text!r}")


def _add_location_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, default=None, help="Latitude for weather lookup")
    parser.add_argument("--lon", type=float, default=None, help="Longitude for weather lookup")
    parser.add_argument(
        "--when",
        type=_timestamp,
        default=None,
        help="ISO timestamp to look conditions up for (default: now, UTC)",
    )


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--readable",
        action="store_true",
        help="Print a compact human-readable summary instead of JSON",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tirerec",
        description="Tire Pressure & Wind Recommender - bicycle tire pressures, "
                    "temperature/elevation compensation and wind-aware headings.",
    )
    parser.add_argument("--version", action="version", version=f"tirerec {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example rider input JSON file",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("example_input.json"),
        help="Output path for example file (default: example_input.json)",
    )
    example_parser.add_argument(
        "--preset",
        choices=[p.value for p in BikePreset],
        default=None,
        help="Bike preset to base the example on",
    )

    # pressure command
    pressure_parser = subparsers.add_parser(
        "pressure",
        help="Recommend baseline front/rear tire pressures",
    )
    pressure_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to JSON input file with rider parameters",
    )
    _add_output_args(pressure_parser)

    # compensate command
    comp_parser = subparsers.add_parser(
        "compensate",
        help="Adjust pressures for ambient temperature and elevation",
    )
    comp_parser.add_argument("--input", "-i", type=Path, required=True, help="Rider JSON input")
    comp_parser.add_argument("--temp", type=float, default=None, help="Ambient temperature (°C)")
    comp_parser.add_argument("--elevation", type=float, default=None, help="Elevation (m)")
    comp_parser.add_argument(
        "--ref-temp",
        type=float,
        default=config.DEFAULT_REF_TEMP_C,
        help=f"Temperature the targets are tuned for (default: {config.DEFAULT_REF_TEMP_C:g} °C)",
    )
    comp_parser.add_argument(
        "--keep-absolute",
        action="store_true",
        help="Hold absolute pressure constant (rarely needed)",
    )
    _add_location_args(comp_parser)
    _add_output_args(comp_parser)

    # wind command
    wind_parser = subparsers.add_parser(
        "wind",
        help="Recommend riding headings for the wind",
    )
    wind_parser.add_argument("--from", dest="wind_from", type=float, default=None,
                             help="Wind direction FROM, degrees")
    wind_parser.add_argument("--speed", type=float, default=None, help="Wind speed")
    wind_parser.add_argument("--gust", type=float, default=None, help="Gust speed")
    wind_parser.add_argument(
        "--unit",
        choices=[u.value for u in WindUnit],
        default=WindUnit.MPH.value,
        help="Wind speed unit (default: mph)",
    )
    wind_parser.add_argument("--heading", type=float, default=None,
                             help="Route heading for a head/tail/crosswind breakdown")
    wind_parser.add_argument("--allow", type=_interval, action="append", default=None,
                             help="Restrict headings to START:END (repeatable, may wrap)")
    wind_parser.add_argument("--resolution", type=float, default=config.DEFAULT_RESOLUTION_DEG)
    wind_parser.add_argument("--penalty", type=float, default=config.DEFAULT_CROSSWIND_PENALTY,
                             help="Crosswind penalty weight")
    wind_parser.add_argument("--min-separation", type=float, default=config.DEFAULT_MIN_SEPARATION_DEG)
    wind_parser.add_argument("--top-k", type=int, default=config.DEFAULT_TOP_K)
    _add_location_args(wind_parser)
    _add_output_args(wind_parser)

    # ride command
    ride_parser = subparsers.add_parser(
        "ride",
        help="Full ride recommendation using live weather",
    )
    ride_parser.add_argument("--input", "-i", type=Path, required=True, help="Rider JSON input")
    ride_parser.add_argument("--heading", type=float, default=None, help="Route heading")
    ride_parser.add_argument(
        "--unit",
        choices=[u.value for u in WindUnit],
        default=WindUnit.MPH.value,
    )
    _add_location_args(ride_parser)
    _add_output_args(ride_parser)

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI web server",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def _load_inputs(path: Path) -> RiderInputs:
    with open(path) as f:
        return RiderInputs(**json.load(f))


def _coords(args: argparse.Namespace) -> Optional[Coordinates]:
    if args.lat is None or args.lon is None:
        return None
    return Coordinates(lat=args.lat, lon=args.lon)


def _when(args: argparse.Namespace) -> datetime:
    return args.when or datetime.now(timezone.utc)


def _emit(model, args: argparse.Namespace) -> None:
    """Write a result model as JSON (file or stdout) or as a readable summary."""
    output_json = model.model_dump_json(indent=2)
    if args.output:
        with open(args.output, "w") as f:
            f.write(output_json)
        print(f"\nResults saved to {args.output}", file=sys.stderr)
    elif args.readable:
        print_readable_data(json.loads(output_json))
    else:
        print(output_json)


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate an example rider input JSON file."""
    if args.preset:
        example = RiderInputs(system_weight=180.0, preset=args.preset)
    else:
        example = RiderInputs()

    with open(args.output, "w") as f:
        f.write(example.model_dump_json(indent=2, exclude_none=True))

    print(f"Created example input file: {args.output}")
    print("\nRun recommendation with:")
    print(f"  python -m tirerec pressure --input {args.output}")

    return 0


def cmd_pressure(args: argparse.Namespace) -> int:
    """Recommend baseline pressures."""
    try:
        inputs = _load_inputs(args.input)

        print("\nTire Pressure Recommender", file=sys.stderr)
        print(f"Weight: {inputs.weight_lbs:.0f} lbs | Width: {inputs.tire_width_mm:g} mm | "
              f"Surface: {inputs.surface.value}", file=sys.stderr)

        result = PressureRecommender(inputs).baseline()
        _emit(result, args)

        print(f"\nSummary: front {result.front.psi:.0f} psi ({result.front.bar:.2f} bar), "
              f"rear {result.rear.psi:.0f} psi ({result.rear.bar:.2f} bar)", file=sys.stderr)
        if result.warnings:
            print("\nWarnings:", file=sys.stderr)
            for w in result.warnings:
                print(f"  - {w}", file=sys.stderr)

        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_compensate(args: argparse.Namespace) -> int:
    """Adjust baseline pressures for temperature and elevation."""
    try:
        inputs = _load_inputs(args.input)
        recommender = PressureRecommender(inputs)

        if args.temp is not None and args.elevation is not None:
            conditions = AmbientConditions(ambient_temp_c=args.temp, elevation_m=args.elevation)
            result = recommender.compensate(conditions, args.ref_temp, args.keep_absolute)
        else:
            coords = _coords(args)
            if coords is None:
                print("Error: give --temp and --elevation, or --lat and --lon", file=sys.stderr)
                return 1
            print(f"Fetching local temperature & elevation for {coords.lat}, {coords.lon}...",
                  file=sys.stderr)
            with OpenMeteoClient() as client:
                recommender.provider = client
                result = recommender.compensate_at(coords, _when(args), args.ref_temp, args.keep_absolute)

        _emit(result, args)

        if result.available:
            print(f"\nAdjusted: front {result.front_psi:.1f} psi, rear {result.rear_psi:.1f} psi "
                  f"(ambient {result.ambient_pressure_psi:.2f} psi)", file=sys.stderr)
        else:
            print(f"\nCompensation unavailable: {result.reason}", file=sys.stderr)
        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_wind(args: argparse.Namespace) -> int:
    """Recommend headings for a given or fetched wind observation."""
    try:
        options = HeadingOptions(
            resolution_deg=args.resolution,
            crosswind_penalty=args.penalty,
            allowed_headings=args.allow,
            min_separation_deg=args.min_separation,
            top_k=args.top_k,
        )
        unit = WindUnit(args.unit)

        if args.wind_from is not None and args.speed is not None:
            observation = WindObservation(
                direction_deg=args.wind_from, speed=args.speed, gust=args.gust, unit=unit
            )
        else:
            coords = _coords(args)
            if coords is None:
                print("Error: give --from and --speed, or --lat and --lon", file=sys.stderr)
                return 1
            try:
                with OpenMeteoClient() as client:
                    observation = client.fetch_wind(coords, _when(args), unit)
            except ConditionsError as e:
                print(f"Wind lookup failed: {e}", file=sys.stderr)
                observation = None

        advisor = HeadingAdvisor(options)
        result = advisor.recommend(observation)
        _emit(result, args)

        if not result.available:
            print(f"\n{result.message}", file=sys.stderr)
        elif result.best is not None:
            print(f"\nBest heading: {result.best.heading_deg:.0f}° ({result.best.heading_label})",
                  file=sys.stderr)

        breakdown = advisor.breakdown(observation, args.heading)
        if breakdown is not None:
            print(f"Course {breakdown.route_heading_deg:g}°: {breakdown.head_or_tail} "
                  f"{breakdown.headwind:.1f} {unit.value}, crosswind {breakdown.crosswind:.1f} "
                  f"{unit.value} from the {breakdown.side}", file=sys.stderr)
        return 0

    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1


def cmd_ride(args: argparse.Namespace) -> int:
    """Full ride recommendation with live conditions."""
    try:
        inputs = _load_inputs(args.input)
        coords = _coords(args)
        if coords is None:
            print("Error: --lat and --lon are required", file=sys.stderr)
            return 1

        with OpenMeteoClient() as client:
            result = recommend_ride(
                inputs,
                client,
                coords,
                _when(args),
                wind_unit=WindUnit(args.unit),
                route_heading_deg=args.heading,
            )
        _emit(result, args)
        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    try:
        import uvicorn

        print("\nStarting Tire Pressure Recommender API", file=sys.stderr)
        print(f"API: http://{args.host}:{args.port}/", file=sys.stderr)
        print(f"Docs: http://{args.host}:{args.port}/docs", file=sys.stderr)
        print("\nPress Ctrl+C to stop\n", file=sys.stderr)

        uvicorn.run(
            "tirerec.api.server:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
        return 0

    except ImportError as e:
        print(f"Error: Missing dependency: {e}", file=sys.stderr)
        print("Install with: pip install uvicorn fastapi", file=sys.stderr)
        return 1


def cli(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config.configure_logging("DEBUG" if args.verbose else None)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "make-example": cmd_make_example,
        "pressure": cmd_pressure,
        "compensate": cmd_compensate,
        "wind": cmd_wind,
        "ride": cmd_ride,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
