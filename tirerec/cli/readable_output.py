"""
Helpers to turn JSON recommendation outputs into a compact, human-readable
console summary. Handles pressure, compensation, heading and whole-ride
results.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def _fmt_float(value: Any, unit: str = "", places: int = 1, default: str = "n/a") -> str:
    """Safely format a float with optional unit suffix."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return default
    suffix = f" {unit}" if unit else ""
    return f"{fval:.{places}f}{suffix}"


def _print_pressures(data: dict[str, Any]) -> None:
    """Render baseline front/rear pressures."""
    for label in ("front", "rear"):
        wheel = data.get(label) or {}
        print(
            f"  {label.title():5} {_fmt_float(wheel.get('psi'), 'psi', 0)} "
            f"({_fmt_float(wheel.get('bar'), 'bar', 2)}) | load {_fmt_float(wheel.get('load_lbs'), 'lbs')}"
        )
    for w in data.get("warnings") or []:
        print(f"  ! {w}")


def _print_compensation(data: dict[str, Any]) -> None:
    """Render the weather/elevation adjustment."""
    if not data.get("available"):
        print(f"  Adjustment unavailable: {data.get('reason') or 'unknown reason'}")
        return
    print(
        f"  Ambient {_fmt_float(data.get('ambient_temp_c'), '°C')} | "
        f"elevation {_fmt_float(data.get('elevation_m'), 'm', 0)} | "
        f"ambient pressure {_fmt_float(data.get('ambient_pressure_psi'), 'psi', 2)}"
    )
    print(
        f"  Adjusted front {_fmt_float(data.get('front_psi'), 'psi')}, "
        f"rear {_fmt_float(data.get('rear_psi'), 'psi')}"
    )
    if data.get("note"):
        print(f"  {data['note']}")


def _print_headings(data: dict[str, Any]) -> None:
    """Render heading suggestions."""
    if not data.get("available"):
        print(f"  {data.get('message') or 'No wind data available.'}")
        return
    unit = data.get("unit") or ""
    print(
        f"  Wind from {_fmt_float(data.get('wind_from_deg'), '°', 0)} ({data.get('wind_from_label', '?')}) "
        f"toward {_fmt_float(data.get('wind_toward_deg'), '°', 0)} ({data.get('wind_toward_label', '?')}) "
        f"at {_fmt_float(data.get('wind_speed'), unit)}"
    )
    for idx, c in enumerate(data.get("candidates") or [], 1):
        print(
            f"  [{idx}] ride {c.get('heading_label', '?'):>3} {_fmt_float(c.get('heading_deg'), '°', 0)} | "
            f"tail {_fmt_float(c.get('tail_component'), unit)} | "
            f"cross {_fmt_float(c.get('cross_component'), unit)} | "
            f"score {_fmt_float(c.get('score'), places=2)}"
        )


def print_readable_data(data: dict[str, Any]) -> None:
    """
    Print a human-friendly summary of a recommendation dict.

    The kind of result is detected from its keys.
    """
    if "pressures" in data:
        print(f"Ride at {data.get('when', '?')}")
        print("Baseline:")
        _print_pressures(data["pressures"])
        print("Weather & elevation adjustment:")
        _print_compensation(data.get("compensation") or {})
        print("Best direction to ride:")
        _print_headings(data.get("headings") or {})
        breakdown = data.get("wind_breakdown")
        if breakdown:
            print(
                f"  Course {_fmt_float(breakdown.get('route_heading_deg'), '°', 0)}: "
                f"{breakdown.get('head_or_tail')} {_fmt_float(breakdown.get('headwind'))}, "
                f"crosswind {_fmt_float(breakdown.get('crosswind'))} ({breakdown.get('side')} side)"
            )
    elif "front" in data and "rear" in data:
        print("Baseline:")
        _print_pressures(data)
    elif "candidates" in data or "message" in data:
        print("Best direction to ride:")
        _print_headings(data)
    elif "available" in data:
        print("Weather & elevation adjustment:")
        _print_compensation(data)
    else:
        print(json.dumps(data, indent=2))


def print_readable_output(json_path: Path) -> None:
    """
    Print a human-friendly summary of a recommendation JSON file.

    Args:
        json_path: Path to the JSON output file.
    """
    print_readable_data(json.loads(Path(json_path).read_text()))
