"""
Command-line entry point for the navcalc measurement tools.

Sets up settings, logging and the anchor-point database, then runs one of:
  convert VALUE FROM TO CATEGORY   convert and print a formatted value
  water TEMPERATURE [--salinity] [--units]
                                   water density / viscosity lookup
  systems                          list unit systems
  seed                             load the ITTC reference anchors
  import FILE                      load anchors from .csv / .xlsx
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Sequence

from navcalc_app.config.settings import Settings, init_logging
from navcalc_app.repositories.database import init_database
from navcalc_app.repositories.water_property_repository import WaterPropertyRepository
from navcalc_app.services.anchor_import import parse_anchor_file
from navcalc_app.services.errors import MeasurementError
from navcalc_app.services.model_conversion import resolve_unit_system
from navcalc_app.services.numeric import plain
from navcalc_app.services.unit_conversion import ConversionEngine
from navcalc_app.services.unit_registry import get_default_registry
from navcalc_app.services.water_properties import WaterPropertyService


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="navcalc", description="Naval-architecture measurement tools")
    sub = parser.add_subparsers(dest="command", required=True)

    p_convert = sub.add_parser("convert", help="Convert a value between unit systems")
    p_convert.add_argument("value")
    p_convert.add_argument("from_system")
    p_convert.add_argument("to_system")
    p_convert.add_argument("category")
    p_convert.add_argument("--locale", default=settings.default_locale)
    p_convert.add_argument("--decimals", type=int, default=2)

    p_water = sub.add_parser("water", help="Water density and kinematic viscosity")
    p_water.add_argument("temperature")
    p_water.add_argument("--salinity", default="35")
    p_water.add_argument("--units", default=settings.default_unit_system, help="Unit system for density")

    p_systems = sub.add_parser("systems", help="List unit systems")
    p_systems.add_argument("--locale", default=settings.default_locale)

    sub.add_parser("seed", help="Seed the ITTC reference anchor points")

    p_import = sub.add_parser("import", help="Import anchor points from .csv or .xlsx")
    p_import.add_argument("path")
    return parser


def _run(args: argparse.Namespace, settings: Settings) -> List[str]:
    engine = ConversionEngine(get_default_registry())

    if args.command == "convert":
        value = engine.convert(args.value, args.from_system, args.to_system, args.category)
        return [engine.format_value(value, args.to_system, args.category, args.locale, args.decimals)]

    if args.command == "systems":
        return [
            f"{info.id}{' (default)' if info.is_default else ''}: {info.name} - {info.description}"
            for info in engine.list_unit_systems(args.locale)
        ]

    session_factory = init_database(settings.db_path)
    with session_factory() as db:
        repo = WaterPropertyRepository(db)
        if args.command == "seed":
            return [f"Seeded {repo.seed_ittc_defaults()} anchor points"]
        if args.command == "import":
            points = parse_anchor_file(args.path)
            for point in points:
                repo.upsert(point)
            return [f"Imported {len(points)} anchor points"]

        props = WaterPropertyService(repo).get_water_properties(args.temperature, args.salinity)
        units = resolve_unit_system(args.units, engine.registry)
        density = engine.convert(props.density, props.units, units, "Density")
        return [
            f"Medium: {props.medium}",
            f"Temperature: {props.temperature_c} °C",
            f"Density: {plain(density)} {engine.get_unit_symbol(units, 'Density')}",
            f"Kinematic viscosity: {props.kinematic_viscosity_m2_s} m²/s",
            f"Source: {props.source_ref}",
        ]


def main(argv: Sequence[str] | None = None) -> int:
    """Bootstraps settings and logging, then dispatches one command."""
    settings = Settings.default()
    init_logging(settings)

    args = _build_parser(settings).parse_args(argv)
    try:
        lines = _run(args, settings)
    except (MeasurementError, ValueError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
