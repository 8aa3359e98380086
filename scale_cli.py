#!/usr/bin/env python3
"""Command-line interface for balancing nested scales."""

import argparse
import sys
import logging

from balance_controller import BalanceConfig, BalanceController
from scales import DEFAULT_SCALE_SELF_MASS


def _read_input(controller: BalanceController, input_file: str | None) -> None:
    """Load the scale table into the controller from a file or stdin.

    Precondition:
        input_file is None, "-" or a file path

    Postcondition:
        controller input text holds the whole input

    Raises:
        OSError: if the file cannot be read
    """
    if input_file and input_file != "-":
        controller.load_file(input_file)
    else:
        controller.set_input_text(sys.stdin.read())


def _output_report(controller: BalanceController, output_file: str | None) -> None:
    """Write records to file or stdout.

    Postcondition:
        one line per scale is written to output_file, or stdout if None
        success message is printed to stderr if file written
    """
    if output_file:
        controller.save_report(output_file)
        print(f"Report written to {output_file}", file=sys.stderr)
    else:
        for record in controller.get_report_lines():
            print(record)


def _output_graphviz(controller: BalanceController, graphviz_file: str) -> None:
    """Write graphviz source of the balanced network to graphviz_file."""
    with open(graphviz_file, "w", encoding="utf-8") as f:
        f.write(controller.get_graphviz_source())
    print(f"Graphviz written to {graphviz_file}", file=sys.stderr)


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the CLI argument parser.

    Returns:
        ArgumentParser instance ready to parse command-line arguments
    """
    parser = argparse.ArgumentParser(
        description="Compute the counterweights that balance a network of nested scales",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format, one scale per line (lines starting with # are comments):
  name,left,right
where left and right are either a weight or the name of another scale.

Examples:
  # Balance scales read from a file
  %(prog)s scales.txt

  # Read from stdin and write the report to a file
  %(prog)s < scales.txt --output-file balanced.txt

  # Also write a graphviz diagram of the network
  %(prog)s scales.txt --graphviz-file scales.dot
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Scale table to read (default: stdin)",
    )

    parser.add_argument(
        "--output-file", "-f", help="Write the report to file instead of stdout"
    )

    parser.add_argument(
        "--graphviz-file", "-g", help="Also write graphviz source of the balanced network"
    )

    parser.add_argument(
        "--self-mass",
        type=int,
        default=DEFAULT_SCALE_SELF_MASS,
        help=f"Mass of each scale itself (default: {DEFAULT_SCALE_SELF_MASS})",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log each balanced scale"
    )

    return parser


def main():
    """Main CLI function.

    Precondition:
        command-line arguments are available via sys.argv

    Postcondition:
        one record per scale is written to stdout or the output file
        rejected input lines are reported on stderr without failing the run
        returns 0 on success, 1 on error

    Returns:
        exit code (0=success, 1=error)
    """
    parser = _create_argument_parser()
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(message)s')

    try:
        controller = BalanceController(BalanceConfig(scale_self_mass=args.self_mass))
        _read_input(controller, args.input)
        controller.generate()

        _output_report(controller, args.output_file)
        if args.graphviz_file:
            _output_graphviz(controller, args.graphviz_file)

        return 0

    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
