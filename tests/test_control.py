import pytest

from pushswap.control import (
    Control,
    Strategy,
    compute_disorder,
    find_first_number,
    format_disorder,
    is_flag,
    parse_flags,
    parse_int,
    select_strategy,
    strategy_complexity,
    strategy_name,
)


@pytest.mark.parametrize(
    "strategy, name",
    [
        (Strategy.SIMPLE, "SIMPLE"),
        (Strategy.MEDIUM, "MEDIUM"),
        (Strategy.COMPLEX, "COMPLEX"),
        (Strategy.ADAPTIVE, "ADAPTIVE"),
        (42, "UNKNOWN"),
    ],
)
def test_strategy_name(strategy, name):
    assert strategy_name(strategy) == name


@pytest.mark.parametrize(
    "strategy, label",
    [
        (Strategy.SIMPLE, "O(n²)"),
        (Strategy.MEDIUM, "O(n√n)"),
        (Strategy.COMPLEX, "O(n log n)"),
        (Strategy.ADAPTIVE, "?"),
        (-1, "?"),
    ],
)
def test_strategy_complexity(strategy, label):
    assert strategy_complexity(strategy) == label


def test_disorder_of_sorted_and_reversed():
    assert compute_disorder([1, 2, 3, 4]) == 0
    assert compute_disorder([4, 3, 2, 1]) == 10000


def test_disorder_of_short_inputs_is_zero():
    assert compute_disorder([]) == 0
    assert compute_disorder([7]) == 0


def test_disorder_stays_in_range_and_complements():
    values = [5, 1, 4, 2, 3]
    forward = compute_disorder(values)
    backward = compute_disorder(list(reversed(values)))
    assert 0 <= forward <= 10000
    assert forward + backward in (9999, 10000)


def test_format_disorder_pads_fraction():
    assert format_disorder(5) == "Initial disorder: 0.05%"
    assert format_disorder(10000) == "Initial disorder: 100.00%"


def test_format_disorder_round_trip_of_parts():
    text = format_disorder(compute_disorder([2, 1, 3]))
    number = text.removeprefix("Initial disorder: ").removesuffix("%")
    whole, frac = number.split(".")
    assert int(whole) * 100 + int(frac) == compute_disorder([2, 1, 3])


def test_is_flag():
    for flag in ("--bench", "--simple", "--medium", "--complex", "--adaptive"):
        assert is_flag(flag)
    assert not is_flag("--fast")
    assert not is_flag("3")


def test_find_first_number():
    assert find_first_number(["--bench", "--simple", "3", "1"]) == 2
    assert find_first_number(["3", "--simple"]) == 0
    assert find_first_number(["--medium"]) == 1


def test_parse_flags_bench_first():
    assert parse_flags(["--bench", "--complex", "2", "1"]) == (True, 2)


def test_parse_flags_bench_later_is_ignored():
    assert parse_flags(["--simple", "--bench", "2"]) == (False, 2)


def test_parse_flags_empty():
    assert parse_flags([]) == (False, 0)


def test_select_strategy_last_wins():
    args = ["prog", "--simple", "--complex", "1", "2"]
    assert select_strategy(args) is Strategy.COMPLEX


def test_select_strategy_default():
    assert select_strategy(["prog", "1", "2"]) is Strategy.ADAPTIVE
    assert select_strategy(["1"], Strategy.MEDIUM) is Strategy.MEDIUM


def test_parse_int_lenient():
    assert parse_int("  -42abc") == -42
    assert parse_int("+17") == 17
    assert parse_int("+-42") == 0
    assert parse_int("abc") == 0


def test_parse_int_round_trip():
    for value in (0, 1, -1, 2147483647, -2147483648, 123456):
        assert parse_int(str(value)) == value


def test_parse_int_wraps_32_bit():
    assert parse_int("2147483648") == -2147483648


def test_record_counts_operations():
    control = Control()
    for op in ("sa", "ra", "ra", "pb"):
        control.record(op)
    assert control.operations == 4
    assert control.counts["ra"] == 2
    assert control.counts["sa"] == 1
    assert control.counts["rrb"] == 0


def test_record_rejects_unknown_operation():
    with pytest.raises(ValueError):
        Control().record("xx")


def test_bench_report_fixed_strategy():
    control = Control(strategy=Strategy.MEDIUM, size_a=3, disorder=5)
    control.record("pb")
    control.record("pa")
    lines = control.bench_report().splitlines()
    assert lines[1] == "========== BENCH =========="
    assert "Operations executed: 2" in lines
    assert "PA operations: 1" in lines
    assert "Stack A size: 3" in lines
    assert "Initial disorder: 0.05%" in lines
    assert lines[-1] == "Strategy used: MEDIUM | O(n√n)"


def test_bench_report_adaptive_shows_executed():
    control = Control(
        strategy=Strategy.ADAPTIVE, executed_strategy=Strategy.COMPLEX
    )
    report = control.bench_report()
    assert report.endswith(
        "Strategy used: ADAPTIVE | COMPLEX | O(n log n)\n"
    )
    assert report.startswith("\n")