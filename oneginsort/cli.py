"""Command line interface for onegin-sort.

Usage:
    onegin-sort poem.txt                  # forward scan, tree sort
    onegin-sort poem.txt --r              # backward scan (rhyme order)
    onegin-sort poem.txt -a qsort -o sorted.txt --append-original
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .api import sort_file
from .config import DEFAULT_ENCODING, DEFAULT_OUTPUT, EmissionFilter, SortAlgorithm, SortConfig
from .errors import (
    AllocationFailure,
    ConfigurationError,
    EmptyInputError,
    InputFileError,
    OutputFileError,
)

logger = logging.getLogger(__name__)

BANNER = (
    "Eugene Onegin sort\n\n"
    "Poem lines from the input file are sorted, ignoring everything but letters,\n"
    "and written to the output file. Lines are compared from their start (default)\n"
    "or from their end (--r / -reversed).\n"
)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_ALLOCATION_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="onegin-sort",
        description="Sort the lines of a text by their letters alone.",
    )
    parser.add_argument("input", help="Text file to sort")
    parser.add_argument(
        "--r", "-reversed", "--reversed",
        dest="reversed",
        action="store_true",
        help="Compare lines from their last letter backwards",
    )
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_OUTPUT,
        help=f"Output file, truncated if it exists (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "-a", "--algorithm",
        choices=[algorithm.value for algorithm in SortAlgorithm],
        default=SortAlgorithm.TREE.value,
        help="Sort algorithm (default: %(default)s)",
    )
    parser.add_argument(
        "--filter",
        choices=[emission_filter.value for emission_filter in EmissionFilter],
        default=EmissionFilter.NON_EMPTY.value,
        help="Which sorted lines to write (default: %(default)s)",
    )
    parser.add_argument(
        "--append-original",
        action="store_true",
        help="Write the original text after the sorted lines",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Encoding of input and output files (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line; returns the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    print(BANNER)

    try:
        config = SortConfig.from_namespace(args)
        report = sort_file(config)
    except EmptyInputError:
        print("Input file was empty, so output file wasn't created")
        return EXIT_OK
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except (InputFileError, OutputFileError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_IO_ERROR
    except AllocationFailure as e:
        logger.debug("Allocation failed after %d lines", e.inserted)
        if e.index is not None:
            e.index.teardown()
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_ALLOCATION_ERROR

    print(
        f"Sorted {report.lines_read} lines ({report.algorithm.value}, "
        f"{report.direction.value}); wrote {report.lines_written} to {report.output_path}"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
