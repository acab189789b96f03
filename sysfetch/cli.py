#!/usr/bin/env python3
"""
sysfetch CLI

Prints a short hardware/software summary of the current machine: host model,
OS pretty name, kernel version and installed package count.

----------------------------------------
Command-Line Argument Formatting Rules:
----------------------------------------
1. Every flag has a full-length version beginning with '--'.
2. Every flag also has a single-character abbreviation beginning with '-'.
3. Abbreviated versions are not combined (use '-m -k', not '-mk').
"""

import argparse
import json
import sys

from . import debug_utils
from .system_utils import SystemUtils
from .summary import FIELDS, FIELD_LABELS, collect_summary
from .standard_ui import set_verbose, log_info, log_error, print_fields, print_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sysfetch",
        description="Show the machine model, OS, kernel and package count."
    )
    parser.add_argument("--model", "-m", action="store_true",
                        help="Show the hardware model.")
    parser.add_argument("--os", "-o", action="store_true",
                        help="Show the operating system pretty name.")
    parser.add_argument("--kernel", "-k", action="store_true",
                        help="Show the kernel version.")
    parser.add_argument("--packages", "-p", action="store_true",
                        help="Show the installed package count.")
    parser.add_argument("--json", "-j", action="store_true",
                        help="Print the selected fields as a JSON object.")
    parser.add_argument("--table", "-t", action="store_true",
                        help="Print the selected fields as a table.")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Print lookup decisions to stderr.")
    parser.add_argument("--log-file", "-l", action="store_true",
                        help="Also write debug logs to the log directory.")
    return parser


def selected_fields(args: argparse.Namespace) -> list:
    flags = {"model": args.model, "os_name": args.os, "kernel": args.kernel, "packages": args.packages}
    # If no field flag is provided, show all
    if not any(flags.values()):
        return list(FIELDS)
    return [name for name in FIELDS if flags[name]]


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    set_verbose(args.verbose)
    try:
        if args.verbose:
            debug_utils.set_console_verbosity("Debug")
        if args.log_file:
            path = debug_utils.enable_file_logging()
            log_info(f"Logging to {path}")
    except (ValueError, OSError) as e:
        log_error(f"Logging setup failed: {e}")
        return 2

    results = collect_summary(SystemUtils(), selected_fields(args)).as_dict()

    if args.json:
        print(json.dumps(results, indent=2))
    elif args.table:
        print_table(["Field", "Value"], [(FIELD_LABELS[k], v) for k, v in results.items()])
    else:
        print_fields((FIELD_LABELS[k], v) for k, v in results.items())
    return 0


if __name__ == "__main__":
    sys.exit(main())
