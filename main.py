"""
Unit Converter (Length & Weight)

Entry point for the application.

Usage:
    python main.py                              # Interactive menu
    python main.py --list                       # Show unit tables
    python main.py --convert length 5 mi km     # One-shot conversion
    python main.py --test                       # Run quick self-check
"""

import argparse
import sys
from typing import Optional, Sequence

from src.core.constants import APP_NAME, APP_VERSION, DEFAULT_DECIMALS
from src.core.tables import BASE_UNITS, UNIT_DEFS
from src.core.types import InvalidUnitError, UnitCategory


def run_shell(decimals: int, pause: bool) -> int:
    """Launch the interactive menu."""
    from src.ui.shell import ConverterShell

    shell = ConverterShell(decimals=decimals, pause=pause)
    try:
        return shell.run()
    except KeyboardInterrupt:
        print("\nExiting Unit Converter. Goodbye!")
        return 130


def run_list() -> int:
    """Print every unit with its menu number and scale factor."""
    for category in UnitCategory:
        base = UNIT_DEFS[category][BASE_UNITS[category]]
        print(f"{category.value.capitalize()} Units (base: {base.display_name}):")
        for number, unit_def in enumerate(UNIT_DEFS[category], start=1):
            print(f"  {number}) {unit_def.display_name:<18} "
                  f"1 {unit_def.symbol} = {unit_def.factor:.10g} {base.symbol}")
        print()
    return 0


def run_single_conversion(
    category_name: str,
    value_text: str,
    from_token: str,
    to_token: str,
    decimals: int
) -> int:
    """Convert one value given on the command line."""
    from src.core.units import convert, format_value, parse_unit

    try:
        category = UnitCategory(category_name.lower())
    except ValueError:
        print(f"Error: unknown category '{category_name}' "
              f"(choose from: {', '.join(c.value for c in UnitCategory)})",
              file=sys.stderr)
        return 2

    try:
        if "_" in value_text:
            raise ValueError(value_text)
        value = float(value_text)
    except ValueError:
        print(f"Error: '{value_text}' is not a numeric value.", file=sys.stderr)
        return 2

    try:
        from_unit = parse_unit(from_token, category)
        to_unit = parse_unit(to_token, category)
    except InvalidUnitError as e:
        print(f"Conversion error: {e}", file=sys.stderr)
        return 2

    outcome = convert(value, from_unit, to_unit, category)
    if not outcome.is_valid:
        print("Conversion error: invalid units.", file=sys.stderr)
        return 2

    print(f"{format_value(value, from_unit, category, decimals)} = "
          f"{format_value(outcome.result, to_unit, category, decimals)}")
    return 0


def run_self_test() -> int:
    """Run a quick validation test of the conversion engine."""
    print(f"{APP_NAME} - Engine Self-Check")
    print("=" * 40)

    from src.core.types import LengthUnit, WeightUnit
    from src.core.units import convert_length, convert_weight, unit_name
    from src.core.validation import validate_all_tables

    failures = 0

    tables = validate_all_tables()
    if tables.is_valid:
        print("\n✓ Factor tables valid")
    else:
        failures += 1
        print("\n⚠ Factor table problems:")
        print(tables)

    checks = [
        ("1 m -> cm", convert_length(1, LengthUnit.METER, LengthUnit.CENTIMETER), 100.0),
        ("1 km -> m", convert_length(1, LengthUnit.KILOMETER, LengthUnit.METER), 1000.0),
        ("1 mi -> m", convert_length(1, LengthUnit.MILE, LengthUnit.METER), 1609.344),
        ("5 mi -> km", convert_length(5, LengthUnit.MILE, LengthUnit.KILOMETER), 8.04672),
        ("1 kg -> g", convert_weight(1, WeightUnit.KILOGRAM, WeightUnit.GRAM), 1000.0),
        ("1 lb -> kg", convert_weight(1, WeightUnit.POUND, WeightUnit.KILOGRAM), 0.45359237),
        ("16 oz -> lb", convert_weight(16, WeightUnit.OUNCE, WeightUnit.POUND), 1.0),
    ]

    print("\nKnown conversions:")
    for label, outcome, expected in checks:
        error_rel = abs(outcome.result - expected) / abs(expected)
        if error_rel < 1e-6:
            print(f"  ✓ {label:<12} = {outcome.result:.8g}")
        else:
            failures += 1
            print(f"  ⚠ {label:<12} = {outcome.result:.8g} (expected {expected})")

    print("\nInvalid unit handling:")
    bad = convert_length(1.0, LengthUnit.METER, len(LengthUnit))
    if not bad.is_valid and bad.result is None:
        print("  ✓ Out-of-range unit rejected")
    else:
        failures += 1
        print("  ⚠ Out-of-range unit produced a value")

    fallback = unit_name(-1, UnitCategory.WEIGHT)
    print(f"  ✓ Fallback name: '{fallback}'")

    print("\n" + "=" * 40)
    if failures:
        print(f"⚠ {failures} check(s) failed\n")
        return 1
    print("✓ Conversion engine operational!")
    print("  Run 'pytest tests/' for full test suite.\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description=f"{APP_NAME} - convert lengths and weights",
        prog="unitconv"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--list",
        action="store_true",
        help="List available units and exit"
    )
    mode.add_argument(
        "--convert",
        nargs=4,
        metavar=("CATEGORY", "VALUE", "FROM", "TO"),
        help="Convert a single value, e.g. --convert length 5 mi km"
    )
    mode.add_argument(
        "--test",
        action="store_true",
        help="Run quick self-check"
    )
    parser.add_argument(
        "--decimals",
        type=int,
        default=DEFAULT_DECIMALS,
        help=f"Decimal places in printed results (default: {DEFAULT_DECIMALS})"
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Do not wait for ENTER after each conversion"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )

    args = parser.parse_args(argv)

    if args.decimals < 0:
        parser.error("--decimals must be zero or positive")

    if args.test:
        return run_self_test()
    if args.list:
        return run_list()
    if args.convert:
        return run_single_conversion(*args.convert, decimals=args.decimals)
    return run_shell(args.decimals, pause=not args.no_pause)


if __name__ == "__main__":
    sys.exit(main())
