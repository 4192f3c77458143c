"""
Empirical timing and memory measurements for MinHeap operations.

Each operation is run over random integer inputs whose sizes double from
``base_input``; averages and standard deviations are written to a CSV file
and echoed to stdout as they complete.

Usage:
    python -m priority_queue.cli bench --path heap_bench.csv
"""

from __future__ import annotations

import csv
import random
import statistics
import sys
import time
from typing import Callable, Dict, List, Optional

from .heap import MinHeap

DEFAULT_BASE_INPUT = 100
DEFAULT_ROUNDS = 12
DEFAULT_ITERATIONS = 5

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Generate a list of random integers of given size."""
    rng = rng or random.Random()
    return [rng.randint(0, 1000000) for _ in range(size)]


def measure_operation_time(operation, input_size: int, iterations: int = 5, rng=None):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size, rng)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def measure_space_efficiency(operation, input_size: int, iterations: int = 3, rng=None):
    """Return average memory held by the heap an operation leaves behind (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size, rng)
        heap = operation(data)
        total_size = sys.getsizeof(heap) + sys.getsizeof(heap.snapshot())
        for item in heap:
            total_size += sys.getsizeof(item)
        sizes.append(total_size)
    return statistics.mean(sizes)


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_insert(data) -> MinHeap[int]:
    heap: MinHeap[int] = MinHeap()
    for item in data:
        heap.insert(item)
    return heap


def bench_extract(data) -> MinHeap[int]:
    heap = bench_insert(data)
    while not heap.is_empty():
        heap.extract_min()
    return heap


def bench_peek(data) -> MinHeap[int]:
    heap = bench_insert(data)
    for _ in range(min(3, len(data))):
        heap.peek_min()
    return heap


OPERATIONS: Dict[str, Callable[[List[int]], MinHeap[int]]] = {
    "insert": bench_insert,
    "extract_min": bench_extract,
    "peek_min": bench_peek,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str,
    base_input: int = DEFAULT_BASE_INPUT,
    rounds: int = DEFAULT_ROUNDS,
    iterations: int = DEFAULT_ITERATIONS,
    seed: Optional[int] = None,
) -> List[list]:
    """Run exponential performance tests for MinHeap operations.

    Returns the data rows written to *output_file* (header excluded).
    """
    if base_input <= 0:
        raise ValueError("base_input must be positive")
    if rounds <= 0:
        raise ValueError("rounds must be positive")
    if iterations <= 0:
        raise ValueError("iterations must be positive")

    rng = random.Random(seed)
    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    rows = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations, rng)
                avg_space = measure_space_efficiency(op_func, size, rng=rng)
                row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                print(f"{op_name:<12} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows
