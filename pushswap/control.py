"""Run control: strategies, operation counters, flags and disorder metrics."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import combinations, takewhile
from typing import Iterable, Sequence

OPERATIONS = (
    "ra", "rb", "rr", "rra", "rrb", "rrr", "pa", "pb", "sa", "sb", "ss",
)

FLAGS = {
    "--bench": None,
    "--simple": "SIMPLE",
    "--medium": "MEDIUM",
    "--complex": "COMPLEX",
    "--adaptive": "ADAPTIVE",
}

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


class Strategy(IntEnum):
    """Sorting strategies that can be requested or executed."""

    SIMPLE = 0
    MEDIUM = 1
    COMPLEX = 2
    ADAPTIVE = 3


_NAMES = {
    Strategy.SIMPLE: "SIMPLE",
    Strategy.MEDIUM: "MEDIUM",
    Strategy.COMPLEX: "COMPLEX",
    Strategy.ADAPTIVE: "ADAPTIVE",
}

_COMPLEXITIES = {
    Strategy.SIMPLE: "O(n²)",
    Strategy.MEDIUM: "O(n√n)",
    Strategy.COMPLEX: "O(n log n)",
}


def strategy_name(strategy: int) -> str:
    """Display name of a strategy, or ``UNKNOWN``."""
    try:
        return _NAMES[Strategy(strategy)]
    except ValueError:
        return "UNKNOWN"


def strategy_complexity(strategy: int) -> str:
    """Complexity label of a concrete strategy, or ``?``."""
    try:
        return _COMPLEXITIES.get(Strategy(strategy), "?")
    except ValueError:
        return "?"


def compute_disorder(values: Iterable[int]) -> int:
    """Share of inverted pairs, in hundredths of a percent (0..10000)."""
    items = list(values)
    pairs = 0
    mistakes = 0
    for left, right in combinations(items, 2):
        pairs += 1
        if left > right:
            mistakes += 1
    if pairs == 0:
        return 0
    return mistakes * 10000 // pairs


def format_disorder(disorder: int) -> str:
    """Render a disorder value as ``Initial disorder: X.YY%``."""
    disorder = int(disorder)
    integer_part = int(disorder / 100)
    fraction_part = disorder - integer_part * 100
    padding = "0" if fraction_part < 10 else ""
    return f"Initial disorder: {integer_part}.{padding}{fraction_part}%"


def is_flag(arg: str) -> bool:
    """Whether ``arg`` is one of the recognised command-line flags."""
    return arg in FLAGS


def find_first_number(args: Sequence[str]) -> int:
    """Index in ``args`` of the first argument that is not a flag."""
    return sum(1 for _ in takewhile(is_flag, args))


def parse_flags(args: Sequence[str]) -> tuple[bool, int]:
    """Return the bench switch and the index of the first number.

    Benchmarking is enabled only when ``--bench`` is the very first argument.
    """
    if not args:
        return False, 0
    bench = args[0] == "--bench"
    return bench, find_first_number(args)


def select_strategy(
    args: Iterable[str], default: Strategy = Strategy.ADAPTIVE
) -> Strategy:
    """Strategy named by the last strategy flag in ``args``, else ``default``."""
    chosen = Strategy(default)
    for arg in args:
        name = FLAGS.get(arg)
        if name is not None:
            chosen = Strategy[name]
    return chosen


def _wrap_int(value: int) -> int:
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def parse_int(text: str) -> int:
    """Lenient integer parse: leading whitespace, one sign, then digits.

    Parsing stops at the first non-digit; text without digits gives 0.
    The result wraps like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    result = 0
    for digit in digits:
        result = _wrap_int(result * 10 + int(digit))
    return _wrap_int(result * sign)


@dataclass
class Control:
    """State of one run: flags, chosen strategy and operation counters."""

    bench: bool = False
    strategy: Strategy = Strategy.ADAPTIVE
    executed_strategy: Strategy = Strategy.SIMPLE
    disorder: int = 0
    size_a: int = 0
    size_b: int = 0
    operations: int = 0
    counts: Counter = field(default_factory=Counter)

    def record(self, op: str) -> None:
        """Count one executed operation."""
        if op not in OPERATIONS:
            raise ValueError(f"unknown operation: {op!r}")
        self.counts[op] += 1
        self.operations += 1

    def bench_report(self) -> str:
        """Text of the benchmark summary."""
        lines = [
            "",
            "========== BENCH ==========",
            f"Operations executed: {self.operations}",
        ]
        lines.extend(
            f"{op.upper()} operations: {self.counts[op]}" for op in OPERATIONS
        )
        lines.append(f"Stack A size: {self.size_a}")
        lines.append(format_disorder(self.disorder))
        if self.strategy == Strategy.ADAPTIVE:
            detail = (
                f"{strategy_name(self.executed_strategy)} | "
                f"{strategy_complexity(self.executed_strategy)}"
            )
        else:
            detail = strategy_complexity(self.strategy)
        lines.append(f"Strategy used: {strategy_name(self.strategy)} | {detail}")
        return "\n".join(lines) + "\n"