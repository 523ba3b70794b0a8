# Prints the names of the modules bundled with the running interpreter, skipping
# private ones. The output is also what std_modules_set.py loads back when it
# classifies imports, so keep it to one bare name per line.
from __future__ import annotations

import argparse
import logging
import sys

from typing import Iterable, List, Optional

from stdmods.atomic import atomic_write_text
from stdmods.timing import measure_time

# Names starting with this are internal to the interpreter.
RESERVED_PREFIX = "_"


def get_registry() -> Iterable[str]:
    # sys.stdlib_module_names already includes sys.builtin_module_names. An
    # interpreter without it fails here, and that failure is left uncaught.
    return sys.stdlib_module_names


def is_public_module(name: str) -> bool:
    return not name.startswith(RESERVED_PREFIX)


def list_public_modules(registry: Optional[Iterable[str]] = None) -> List[str]:
    """Returns the public module names of `registry`, sorted by code point.

    `registry` defaults to the running interpreter's module names. Ordering is
    plain string comparison, so "Buffer" sorts before "fs".
    """
    if registry is None:
        registry = get_registry()
    names = list(registry)
    modules = sorted(name for name in names if is_public_module(name))
    logging.debug(
        "registry has %d names, %d private skipped",
        len(names),
        len(names) - len(modules),
    )
    return modules


def format_modules(modules: Iterable[str]) -> str:
    return "\n".join(modules)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Print the public standard library module names, one per line"
    )
    parser.add_argument(
        "-o",
        "--output-file",
        help="write the list to this file instead of stdout",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log debug info to stderr"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    with measure_time("list_public_modules"):
        text = format_modules(list_public_modules())

    if args.output_file:
        atomic_write_text(args.output_file, text)
        logging.debug("wrote %s", args.output_file)
    else:
        sys.stdout.write(text)


if __name__ == "__main__":
    main()
