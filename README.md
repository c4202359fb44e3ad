# pushswap

`pushswap` sorts a list of integers using two stacks, `a` and `b`, and a
fixed set of operations. It prints one operation per line to standard
output. Applied in order, those operations leave stack `a` sorted in
ascending order from top to bottom.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb` | swap the top two elements of `a` / `b` |
| `pa`, `pb` | push the top of `b` onto `a` / the top of `a` onto `b` |
| `ra`, `rb` | rotate `a` / `b` up, so the first element becomes the last |
| `rra`, `rrb`, `rrr` | rotate `a` / `b` / both down, so the last element becomes the first |

An operation that cannot apply (for example `sa` on a stack with fewer than
two elements) does nothing and prints nothing.

## Installation

```
pip install .
```

## Usage

```
pushswap [--bench] [--simple | --medium | --complex | --adaptive] NUMBERS...
```

Examples:

```
pushswap 3 2 1
pushswap --complex 5 9 1 7 3 8
pushswap --bench --adaptive 42 -7 13 0 99 21
```

Flags must come before the numbers. If several strategy flags are given,
the last one wins. If no numbers are given, nothing is printed.
`python -m pushswap.cli` runs the same command.

### Strategies

| Flag | Algorithm | Complexity |
|------|-----------|------------|
| `--simple` | dedicated sorts for two and three elements; beyond that, the minimum is pushed to `b` until three remain, then everything is pushed back | O(n²) |
| `--medium` | chunk pushes to `b`, then the maximum is pulled back each time (five elements or fewer use `simple`) | O(n√n) |
| `--complex` | binary radix sort on the ranks of the values | O(n log n) |
| `--adaptive` (default) | picks one of the three from the initial disorder | depends on the input |

The adaptive strategy measures the initial disorder, which is the share of
pairs that are out of order. It uses `simple` up to 30%, `medium` up to 60%,
and `complex` above that. Stacks of five elements or fewer always use
`simple`.

### Benchmark

Put `--bench` first to print a summary after the operations. The summary
gives the total number of operations, the count for each operation, the
size of stack `a`, the initial disorder and the strategy that was used.
The initial-disorder line is written to standard error; the rest of the
summary goes to standard output.

## Library use

The package can also be used from Python:

```python
import io

from pushswap.control import Control, Strategy
from pushswap.stacks import Stacks
from pushswap.sorting import dispatch_sort

control = Control(strategy=Strategy.COMPLEX)
out = io.StringIO()
stacks = Stacks([3, 1, 2], control, out)
dispatch_sort(stacks)
assert stacks.is_sorted()
print(out.getvalue(), end="")
print(control.bench_report())
```

Modules:

- `pushswap.control` – `Strategy`, `Control` (counters and `bench_report()`),
  `compute_disorder`, `format_disorder`, flag helpers and `parse_int`.
- `pushswap.stacks` – `Stacks` with the operations above, `Node` and
  `index_values`.
- `pushswap.sorting` – `sort_three`, `sort_five`, `sort_simple`,
  `sort_medium`, `sort_complex`, `sort_adaptive`, `dispatch_sort` and their
  helpers.
- `pushswap.cli` – the `main` entry point.

## What it does not do

- Input is not validated. Each argument is read leniently: leading
  whitespace and one sign are accepted, reading stops at the first
  non-digit, text without digits reads as 0, and values wrap as 32-bit
  integers. Duplicates are not rejected and no `Error` message is printed.
- There is no checker command that reads operations and verifies a result.

## Running the tests

```
pip install ".[test]"
pytest
```