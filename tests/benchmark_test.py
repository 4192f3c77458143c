import os
import sys
import csv
import random

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from priority_queue import benchmark


def test_generate_random_list_is_reproducible_with_rng():
    a = benchmark.generate_random_list(20, random.Random(1))
    b = benchmark.generate_random_list(20, random.Random(1))
    assert a == b
    assert len(a) == 20
    assert all(0 <= x <= 1000000 for x in a)


def test_bench_operations_leave_expected_heaps():
    data = [5, 3, 8, 1]
    assert benchmark.bench_insert(data).snapshot() == [1, 3, 8, 5]
    assert benchmark.bench_extract(data).is_empty()
    assert benchmark.bench_peek(data).size() == 4


def test_measure_operation_time_single_iteration_has_zero_std():
    avg, std = benchmark.measure_operation_time(benchmark.bench_insert, 10, iterations=1)
    assert avg >= 0.0
    assert std == 0.0


def test_measure_space_counts_heap_contents():
    full = benchmark.measure_space_efficiency(benchmark.bench_insert, 50, iterations=1)
    empty = benchmark.measure_space_efficiency(benchmark.bench_extract, 50, iterations=1)
    assert full > empty > 0


def test_run_benchmarks_writes_csv(tmp_path, capsys):
    out = tmp_path / "bench.csv"
    rows = benchmark.run_benchmarks(str(out), base_input=4, rounds=2, iterations=2, seed=0)

    with open(out, newline="") as f:
        written = list(csv.reader(f))

    assert written[0] == benchmark.CSV_HEADER
    assert len(written) == 1 + len(benchmark.OPERATIONS) * 2
    assert [int(r[0]) for r in written[1:3]] == [4, 8]
    assert {r[1] for r in written[1:]} == set(benchmark.OPERATIONS)
    assert [list(map(str, r)) for r in rows] == written[1:]
    assert "Benchmark completed" in capsys.readouterr().out


@pytest.mark.parametrize("kwargs", [
    {"base_input": 0},
    {"rounds": 0},
    {"iterations": -1},
])
def test_run_benchmarks_rejects_bad_parameters(tmp_path, kwargs):
    with pytest.raises(ValueError):
        benchmark.run_benchmarks(str(tmp_path / "x.csv"), **kwargs)
