import argparse
import sys

from dial import START_POSITION, solve_puzzle
from file_errors import EXIT_OK, read_input_file, report_file_error

DEFAULT_INPUT = "input.txt"


def solve_safe_dial(input_text, verbose=False):
    """
    Solve the safe dial puzzle.
    Returns the number of clicks that leave the dial pointing at 0.
    """
    on_rotation = None

    if verbose:
        print(f"The dial starts by pointing at {START_POSITION}")

        def on_rotation(line, position, zero_hits):
            print(f"After {line}: position = {position} (zero hits: {zero_hits})")

    return solve_puzzle(input_text, on_rotation=on_rotation)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Advent of Code 2025 day 1: safe dial password")
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Puzzle input file (default: {DEFAULT_INPUT})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print the dial after every rotation")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        input_text = read_input_file(args.input)
    except OSError as exc:
        return report_file_error(exc, args.input)

    password = solve_safe_dial(input_text, verbose=args.verbose)
    print(f"Password: {password}")
    return EXIT_OK


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
