"""
Priority Queue Command-Line Interface (CLI)

Small front end over MinHeap for trying it out and measuring it:
- drain: insert values and print them in extraction order
- show:  print the heap's backing store for diagnostics
- bench: write timing/memory measurements to CSV

Usage examples:
    python -m priority_queue.cli drain 5 3 8 1 9 2
    python -m priority_queue.cli show --type str pear apple fig
    python -m priority_queue.cli bench --path heap_bench.csv --rounds 6
"""

import argparse
import math
import sys

from .heap import MinHeap
from . import benchmark

# Accepted element types for values given on the command line
VALUE_TYPES = {"int": int, "float": float, "str": str}


def build_heap(args) -> MinHeap:
    """Convert raw CLI values and insert them one at a time."""
    convert = VALUE_TYPES[args.type]
    heap = MinHeap()
    for raw in args.values:
        try:
            value = convert(raw)
        except ValueError:
            value = None
        # NaN has no place in a total order
        if value is None or (isinstance(value, float) and math.isnan(value)):
            raise ValueError(f"invalid {args.type} value: {raw!r}")
        heap.insert(value)
    return heap


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------

def cmd_drain(args):
    """Print values in the order extract_min yields them."""
    heap = build_heap(args)
    print(" ".join(str(v) for v in heap.drain()))


def cmd_show(args):
    """Print the backing store (array order) plus summary facts."""
    heap = build_heap(args)
    print(f"store: {heap}")
    print(f"size: {heap.size()}")
    print(f"min: {heap.peek_min()}")
    print(f"valid: {heap.is_valid()}")


def cmd_bench(args):
    """Run the MinHeap benchmark suite and save results to CSV."""
    benchmark.run_benchmarks(
        args.path,
        base_input=args.base,
        rounds=args.rounds,
        iterations=args.iterations,
        seed=args.seed,
    )


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m priority_queue.cli", description="MinHeap priority queue CLI")
    sub = p.add_subparsers(dest="cmd", required=True)

    for name, func, help_text in (
        ("drain", cmd_drain, "Print values in priority order"),
        ("show", cmd_show, "Show the heap's backing store"),
    ):
        s = sub.add_parser(name, help=help_text)
        s.add_argument("values", nargs="*")
        s.add_argument("--type", choices=sorted(VALUE_TYPES), default="int")
        s.set_defaults(func=func)

    s = sub.add_parser("bench", help="Benchmark heap operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base", type=int, default=benchmark.DEFAULT_BASE_INPUT)
    s.add_argument("--rounds", type=int, default=benchmark.DEFAULT_ROUNDS)
    s.add_argument("--iterations", type=int, default=benchmark.DEFAULT_ITERATIONS)
    s.add_argument("--seed", type=int, default=None)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m priority_queue.cli`."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
