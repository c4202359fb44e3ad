"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.control import (
    Control,
    compute_disorder,
    parse_flags,
    parse_int,
    select_strategy,
)
from pushswap.sorting import dispatch_sort
from pushswap.stacks import Stacks

_DISORDER_PREFIX = "Initial disorder:"


def _write_report(report: str) -> None:
    for line in report.splitlines(keepends=True):
        stream = sys.stderr if line.startswith(_DISORDER_PREFIX) else sys.stdout
        stream.write(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers given on the command line and print the operations."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    bench, start = parse_flags(args)
    if start >= len(args):
        return 0
    values = [parse_int(arg) for arg in args[start:]]
    control = Control(
        bench=bench,
        strategy=select_strategy(args),
        disorder=compute_disorder(values),
        size_a=len(values),
        size_b=0,
    )
    stacks = Stacks(values, control, sys.stdout)
    dispatch_sort(stacks)
    if control.bench:
        _write_report(control.bench_report())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())