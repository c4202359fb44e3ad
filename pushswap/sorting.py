"""Sorting strategies built from the stack operations."""

from __future__ import annotations

from math import isqrt
from typing import Iterable

from pushswap.control import Strategy, compute_disorder
from pushswap.stacks import Node, Stacks

_SIMPLE_LIMIT = 3000
_MEDIUM_LIMIT = 6000
_SMALL_STACK = 5


def _update_sizes(stacks: Stacks) -> None:
    stacks.control.size_a = len(stacks.a)
    stacks.control.size_b = len(stacks.b)


def sort_three(stacks: Stacks) -> None:
    """Order the three top elements of ``a`` with at most two operations."""
    if len(stacks.a) < 3:
        return
    f, s, t = (stacks.a[i].index for i in range(3))
    if f > s and s < t and f < t:
        stacks.sa()
    elif f > s and s > t:
        stacks.sa()
        stacks.rra()
    elif f > s and s < t and f > t:
        stacks.ra()
    elif f < s and s > t and f < t:
        stacks.sa()
        stacks.ra()
    elif f < s and s > t and f > t:
        stacks.rra()


def _min_position(nodes: Iterable[Node]) -> int:
    best_pos = 0
    best = None
    for pos, node in enumerate(nodes):
        if best is None or node.index < best:
            best = node.index
            best_pos = pos
    return best_pos


def sort_five(stacks: Stacks) -> None:
    """Push the minima to ``b`` until three remain, sort them, push back."""
    size = len(stacks.a)
    while size > 3:
        pos = _min_position(stacks.a)
        if pos <= size // 2:
            for _ in range(pos):
                stacks.ra()
        else:
            for _ in range(size - pos):
                stacks.rra()
        stacks.pb()
        size -= 1
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def sort_simple(stacks: Stacks) -> None:
    """Sort small stacks directly; larger ones by repeated minimum extraction."""
    if not stacks.a:
        return
    stacks.control.executed_strategy = Strategy.SIMPLE
    size = len(stacks.a)
    if size <= 1:
        return
    if size == 2:
        if stacks.a[0].index > stacks.a[1].index:
            stacks.sa()
    elif size == 3:
        sort_three(stacks)
    else:
        sort_five(stacks)
    _update_sizes(stacks)


def int_sqrt(n: int) -> int:
    """Smallest non-negative integer whose square is at least ``n``."""
    if n <= 0:
        return 0
    root = isqrt(n)
    return root if root * root == n else root + 1


def chunk_size(size: int) -> int:
    """Chunk width used by the medium strategy: ceil(sqrt(size)), at least 1."""
    return max(1, int_sqrt(size))


def push_chunks(stacks: Stacks, chunk: int) -> None:
    """Push ``a`` onto ``b`` chunk by chunk of increasing ranks."""
    pushed = 0
    target = chunk
    while stacks.a:
        if stacks.a[0].index < target:
            stacks.pb()
            pushed += 1
            if pushed == target:
                target += chunk
        else:
            stacks.ra()


def _max_node(nodes: Iterable[Node]) -> Node:
    best: Node | None = None
    for node in nodes:
        if best is None or node.index > best.index:
            best = node
    if best is None:
        raise ValueError("empty stack has no maximum")
    return best


def push_back(stacks: Stacks) -> None:
    """Bring the highest rank of ``b`` to the top, the shorter way, and push it."""
    while stacks.b:
        top = _max_node(stacks.b)
        pos = next(i for i, node in enumerate(stacks.b) if node is top)
        rotate = stacks.rb if pos <= len(stacks.b) // 2 else stacks.rrb
        while stacks.b[0] is not top:
            rotate()
        stacks.pa()


def sort_chunks(stacks: Stacks, chunk: int) -> None:
    """Push ``a`` onto ``b`` in a sliding window of ranks of width ``chunk``."""
    if len(stacks.a) <= 1:
        return
    pushed = 0
    while stacks.a:
        index = stacks.a[0].index
        if index <= pushed:
            stacks.pb()
            stacks.rb()
            pushed += 1
        elif index <= pushed + chunk:
            stacks.pb()
            pushed += 1
        else:
            stacks.ra()


def max_bits(indices: Iterable[int]) -> int:
    """Number of bits needed for the highest (non-negative) rank."""
    return max(0, *indices).bit_length() if indices else 0


def sort_medium(stacks: Stacks) -> None:
    """Chunked sort: push ranks by chunks, then pull maxima back."""
    if not stacks.a:
        return
    size = len(stacks.a)
    if size <= _SMALL_STACK:
        sort_simple(stacks)
        return
    push_chunks(stacks, chunk_size(size))
    push_back(stacks)
    _update_sizes(stacks)


def sort_complex(stacks: Stacks) -> None:
    """Binary radix sort on the ranks."""
    size = len(stacks.a)
    if size == 0:
        return
    bits = (size - 1).bit_length()
    for bit in range(bits):
        for _ in range(size):
            if (stacks.a[0].index >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def _choose_adaptive(stacks: Stacks) -> Strategy:
    control = stacks.control
    disorder = compute_disorder(stacks.values_a())
    control.disorder = disorder
    if disorder <= _SIMPLE_LIMIT:
        control.strategy = Strategy.SIMPLE
    elif disorder <= _MEDIUM_LIMIT:
        control.strategy = Strategy.MEDIUM
    else:
        control.strategy = Strategy.COMPLEX
    return control.strategy


def sort_adaptive(stacks: Stacks) -> None:
    """Pick a strategy from the measured disorder and run it."""
    if not stacks.a:
        return
    control = stacks.control
    control.executed_strategy = _choose_adaptive(stacks)
    if len(stacks.a) <= _SMALL_STACK:
        control.executed_strategy = Strategy.SIMPLE
    if control.executed_strategy == Strategy.SIMPLE:
        sort_simple(stacks)
    elif control.executed_strategy == Strategy.MEDIUM:
        sort_medium(stacks)
    else:
        sort_complex(stacks)
    _update_sizes(stacks)


def dispatch_sort(stacks: Stacks) -> None:
    """Run the strategy requested in the stacks' control."""
    control = stacks.control
    if control.strategy == Strategy.SIMPLE:
        control.executed_strategy = Strategy.SIMPLE
        sort_simple(stacks)
    elif control.strategy == Strategy.MEDIUM:
        control.executed_strategy = Strategy.MEDIUM
        sort_medium(stacks)
    elif control.strategy == Strategy.COMPLEX:
        control.executed_strategy = Strategy.COMPLEX
        sort_complex(stacks)
    else:
        sort_adaptive(stacks)