"""
Interactive text shell for the unit converter.

Reads menu choices and values line by line from a text stream, calls the
conversion engine and prints the results. Streams are injectable so the
shell can be driven from tests with ``io.StringIO``.
"""

import re
import sys
from typing import Optional, TextIO

from src.core.constants import APP_NAME, DEFAULT_DECIMALS
from src.core.types import UnitCategory
from src.core.units import (
    convert,
    format_value,
    unit_count,
    unit_name,
    units_for_category,
)

# Main menu option -> category
MENU_CATEGORIES = {
    1: UnitCategory.LENGTH,
    2: UnitCategory.WEIGHT,
}

_INTEGER_RE = re.compile(r"[+-]?\d+")


class ConverterShell:
    """
    Menu-driven conversion loop.

    Usage:
        shell = ConverterShell()
        status = shell.run()   # 0 on normal exit, 1 if input ran out
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        decimals: int = DEFAULT_DECIMALS,
        pause: bool = True,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.decimals = decimals
        self.pause = pause

    # -------------------------------------------------------------------------
    # Main Loop
    # -------------------------------------------------------------------------

    def run(self) -> int:
        """Run until the user picks Exit or input ends."""
        while True:
            self._print_banner()
            self._print_main_menu()

            choice = self.prompt_int("Select an option: ", 0, len(MENU_CATEGORIES))
            if choice is None:
                return 1

            if choice == 0:
                self._write("Exiting Unit Converter. Goodbye!")
                return 0

            self.run_conversion(MENU_CATEGORIES[choice])

            if self.pause:
                self._write("Press ENTER to continue...", end="")
                self._read_line()

    def run_conversion(self, category: UnitCategory) -> bool:
        """
        Prompt for units and a value, then print the conversion.

        Returns:
            True if a result was printed
        """
        self._print_units(category)
        count = unit_count(category)

        from_index = self.prompt_int("Select source unit (number): ", 1, count)
        if from_index is None:
            return False

        to_index = self.prompt_int("Select target unit (number): ", 1, count)
        if to_index is None:
            return False

        value = self.prompt_float("Enter value to convert: ")
        if value is None:
            return False

        from_unit = from_index - 1
        to_unit = to_index - 1
        outcome = convert(value, from_unit, to_unit, category)

        if not outcome.is_valid:
            self._write("Conversion error: invalid units.")
            return False

        d = self.decimals
        self._write("\nResult:")
        self._write(
            f"  {format_value(value, from_unit, category, d)} = "
            f"{format_value(outcome.result, to_unit, category, d)}\n"
        )
        return True

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def prompt_int(self, prompt: str, low: int, high: int) -> Optional[int]:
        """Ask until an integer in [low, high] is entered. None on end of input."""
        while True:
            self._write(prompt, end="")
            text = self._read_line()
            if text is None:
                self._error("Error: failed to read input.")
                return None

            if not _INTEGER_RE.fullmatch(text):
                self._write("Invalid input. Please enter an integer.")
                continue

            value = int(text)
            if value < low or value > high:
                self._write(f"Please enter a value between {low} and {high}.")
                continue

            return value

    def prompt_float(self, prompt: str) -> Optional[float]:
        """Ask until a number is entered. None on end of input."""
        while True:
            self._write(prompt, end="")
            text = self._read_line()
            if text is None:
                self._error("Error: failed to read input.")
                return None

            # strtod-style parsing: no digit-group underscores
            if "_" in text:
                self._write("Invalid input. Please enter a numeric value.")
                continue

            try:
                return float(text)
            except ValueError:
                self._write("Invalid input. Please enter a numeric value.")

    def _read_line(self) -> Optional[str]:
        line = self.stdin.readline()
        if line == "":
            return None
        return line.strip()

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def _write(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.stdout, flush=True)

    def _error(self, text: str) -> None:
        print(text, file=self.stderr, flush=True)

    def _print_banner(self) -> None:
        self._write("=" * 60)
        self._write(APP_NAME.center(60).rstrip())
        self._write("=" * 60)

    def _print_main_menu(self) -> None:
        self._write("\nMain Menu:")
        self._write("  1) Length conversion")
        self._write("  2) Weight conversion")
        self._write("  0) Exit\n")

    def _print_units(self, category: UnitCategory) -> None:
        self._write(f"\n{category.value.capitalize()} Units:")
        for number, unit in enumerate(units_for_category(category), start=1):
            self._write(f"  {number}) {unit_name(unit, category)}")
        self._write()
