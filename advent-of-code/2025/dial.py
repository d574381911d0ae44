"""
Safe dial simulator.

The dial has 100 positions (0-99) and starts pointing at 50. Each rotation
moves it one click at a time; the password is the number of clicks that
leave the dial pointing at 0.
"""
import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

DIAL_SIZE = 100
START_POSITION = 50

# Magnitudes are signed 32-bit values
MAX_MAGNITUDE = 2**31 - 1
MIN_MAGNITUDE = -(2**31)

# Optional sign followed by ASCII digits, nothing else.
_MAGNITUDE_RE = re.compile(r"[+-]?[0-9]+")


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Command:
    """
    One rotation read from the input.

    Attributes:
        direction (Direction): Which way to turn the dial.
        magnitude (int): Number of clicks. Negative values are kept as
            parsed and result in no movement.
    """
    direction: Direction
    magnitude: int


# -------------------------------------------------------------
# Parse errors
# -------------------------------------------------------------

class ParseError(ValueError):
    """Base class for a line that is not a valid rotation."""

    def __init__(self, line: str, message: str):
        super().__init__(message)
        self.line = line


class TooShortError(ParseError):
    def __init__(self, line: str):
        super().__init__(line, f"Line too short: '{line}'")


class InvalidDirectionError(ParseError):
    def __init__(self, line: str):
        super().__init__(line, f"Invalid direction in '{line}'")


class InvalidMagnitudeError(ParseError):
    def __init__(self, line: str, detail: str):
        super().__init__(line, f"Invalid number in '{line}': {detail}")
        self.detail = detail


# -------------------------------------------------------------
# Core Operations
# -------------------------------------------------------------

def parse_rotation(line: str) -> Command:
    """
    Parse a stripped, non-blank line such as ``R3`` or ``L120``.

    Args:
        line (str): The line to parse.

    Returns:
        Command: The parsed direction and magnitude.

    Raises:
        TooShortError: The line has fewer than two characters.
        InvalidDirectionError: The first character is not ``L`` or ``R``.
        InvalidMagnitudeError: The rest of the line is not an integer, or
            does not fit in a signed 32-bit integer.
    """
    if len(line) < 2:
        raise TooShortError(line)

    try:
        direction = Direction(line[0])
    except ValueError:
        raise InvalidDirectionError(line) from None

    digits = line[1:]
    # int() alone would also take " 5", "1_000" and non-ASCII digits
    if not _MAGNITUDE_RE.fullmatch(digits):
        raise InvalidMagnitudeError(line, f"invalid base-10 integer {digits!r}")

    magnitude = int(digits)
    if magnitude > MAX_MAGNITUDE:
        raise InvalidMagnitudeError(line, "number too large to fit in a 32-bit integer")
    if magnitude < MIN_MAGNITUDE:
        raise InvalidMagnitudeError(line, "number too small to fit in a 32-bit integer")

    return Command(direction, magnitude)


def step_rotation(position: int, direction: Direction, magnitude: int) -> Tuple[int, int]:
    """
    Turn the dial one click at a time and count clicks that land on 0.

    Args:
        position (int): Current position, in ``[0, DIAL_SIZE)``.
        direction (Direction): Which way to turn.
        magnitude (int): Number of clicks; zero or negative means none.

    Returns:
        tuple[int, int]: The new position and the number of zero hits.
    """
    current = position
    zero_hits = 0

    for _ in range(magnitude):
        if direction is Direction.RIGHT:
            current = (current + 1) % DIAL_SIZE
        else:
            current = (current - 1 + DIAL_SIZE) % DIAL_SIZE

        if current == 0:
            zero_hits += 1

    return current, zero_hits


def _print_warning(message: str) -> None:
    print(message, file=sys.stderr)


def solve_puzzle(
    input_text: str,
    warn: Callable[[str], None] = _print_warning,
    on_rotation: Optional[Callable[[str, int, int], None]] = None,
) -> int:
    """
    Run every rotation in ``input_text`` and return the password.

    Blank lines are skipped. Lines that fail to parse are reported through
    ``warn`` and skipped without touching the dial.

    Args:
        input_text (str): The whole puzzle input.
        warn: Called with a message for each malformed line.
        on_rotation: If given, called as ``(line, position, zero_hits)``
            after each rotation is applied.

    Returns:
        int: Total number of clicks that landed on 0.
    """
    position = START_POSITION
    count = 0

    for raw in input_text.splitlines():
        line = raw.strip()
        if not line:
            continue

        try:
            command = parse_rotation(line)
        except ParseError as exc:
            warn(f"Warning: Invalid rotation '{line}': {exc}")
            continue

        position, zero_hits = step_rotation(position, command.direction, command.magnitude)
        count += zero_hits

        if on_rotation is not None:
            on_rotation(line, position, zero_hits)

    return count
