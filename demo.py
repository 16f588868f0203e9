"""
Binary Heap Demo -- Console walkthrough, randomized consistency run, and
construction cost analysis (bulk heapify vs repeated enqueue).

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import BinaryHeap, natural_order

SEED = 42
N = 20
STRESS_ITERATIONS = 10_000
SIZES = [16, 64, 256, 1024, 4096, 16384]

VIZ_DIR = Path(__file__).parent / "viz"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


def _emit(lines: List[str], line: str, verbose: bool) -> None:
    lines.append(line)
    if verbose:
        print(line)


# ---------------------------------------------------------------------------
# Example 1: Basic usage
# ---------------------------------------------------------------------------
def basic_usage(n: int = N, verbose: bool = True) -> List[str]:
    """Enqueue an interleaved sequence, then drain the heap.

    Prints the heap in buffer order after every step and returns the lines.
    """
    heap: BinaryHeap[int] = BinaryHeap()
    lines: List[str] = []

    for i in range(n):
        num = i if i % 2 == 0 else n - i
        heap.enqueue(num)
        _emit(lines, f"{num}\t=>\tPQ [{heap}]", verbose)

    _emit(lines, "", verbose)

    while not heap.is_empty():
        smallest = heap.dequeue()
        _emit(lines, f"{smallest}\t<=\tPQ [{heap}]", verbose)

    return lines


# ---------------------------------------------------------------------------
# Example 2: Randomized consistency run
# ---------------------------------------------------------------------------
def stress_test(iterations: int = STRESS_ITERATIONS, seed: int = SEED) -> List[str]:
    """Apply random enqueue/dequeue operations, checking the heap property
    after each one. Returns a message per failed check."""
    rng = np.random.default_rng(seed)
    heap: BinaryHeap[int] = BinaryHeap()
    failures: List[str] = []

    for i in range(iterations):
        operation = int(rng.integers(2))
        num = -1

        if operation == 0:
            num = int(rng.integers(100_000))
            heap.enqueue(num)
        elif heap.size() > 0:
            num = heap.dequeue()

        if not heap._is_consistent():
            action = "Enqueueing" if operation == 0 else "Dequeueing"
            failures.append(f"Test failed at iteration {i} while {action} {num}")

    return failures


# ---------------------------------------------------------------------------
# Example 3: Construction cost
# ---------------------------------------------------------------------------
def count_comparisons(values: Sequence[int], bulk: bool) -> int:
    """Number of comparator calls needed to build a heap over ``values``."""
    calls = 0

    def counting(a, b):
        nonlocal calls
        calls += 1
        return natural_order(a, b)

    if bulk:
        BinaryHeap.from_array(values, counting)
    else:
        heap: BinaryHeap[int] = BinaryHeap(counting, capacity=len(values))
        for v in values:
            heap.enqueue(v)
    return calls


def construction_costs(sizes: Sequence[int] = SIZES, seed: int = SEED) -> Tuple[np.ndarray, np.ndarray]:
    rng = np.random.default_rng(seed)
    bulk = np.zeros(len(sizes), dtype=np.int64)
    incremental = np.zeros(len(sizes), dtype=np.int64)
    for k, n in enumerate(sizes):
        values = rng.integers(0, 1_000_000, size=n).tolist()
        bulk[k] = count_comparisons(values, bulk=True)
        incremental[k] = count_comparisons(values, bulk=False)
    return bulk, incremental


def drain_timings(sizes: Sequence[int] = SIZES, seed: int = SEED) -> np.ndarray:
    """Seconds to heap-sort a random array of each size (build + full drain)."""
    rng = np.random.default_rng(seed)
    timings = np.zeros(len(sizes))
    for k, n in enumerate(sizes):
        values = rng.integers(0, 1_000_000, size=n).tolist()
        start = time.perf_counter()
        heap = BinaryHeap.from_array(values)
        out = [heap.dequeue() for _ in range(n)]
        timings[k] = time.perf_counter() - start
        assert out == sorted(values), "drain order violated"
    return timings


def example_3_construction_cost(pdf: Optional[PdfPages] = None) -> None:
    print("=" * 60)
    print("Example 3: Construction Cost (heapify vs enqueue)")
    print("=" * 60)

    sizes = np.array(SIZES)
    bulk, incremental = construction_costs(SIZES)
    timings = drain_timings(SIZES)

    for n, b, inc, t in zip(sizes, bulk, incremental, timings):
        print(f"  n={n:>6}: from_array {b:>9,} cmp ({b / n:.2f}/elem), "
              f"enqueue {inc:>9,} cmp ({inc / n:.2f}/elem), drain {t * 1e3:8.2f} ms")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    axes[0].plot(sizes, bulk / sizes, "o-", color=COLORS["green"], label="from_array (heapify)")
    axes[0].plot(sizes, incremental / sizes, "s-", color=COLORS["red"], label="repeated enqueue")
    axes[0].set_xscale("log", base=2)
    axes[0].set_xlabel("n")
    axes[0].set_ylabel("Comparisons per element")
    axes[0].set_title("Build cost: O(n) heapify vs enqueue", fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes, timings * 1e3, "o-", color=COLORS["blue"], label="measured")
    reference = sizes * np.log2(sizes)
    axes[1].plot(sizes, reference / reference[-1] * timings[-1] * 1e3, "--",
                 color=COLORS["dark"], label="n log n (scaled)")
    axes[1].set_xscale("log", base=2)
    axes[1].set_yscale("log")
    axes[1].set_xlabel("n")
    axes[1].set_ylabel("Build + drain time (ms)")
    axes[1].set_title("Heap sort by draining", fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    VIZ_DIR.mkdir(exist_ok=True)
    fig.savefig(VIZ_DIR / "construction_cost.png", dpi=150, bbox_inches="tight")
    if pdf is not None:
        pdf.savefig(fig)
    plt.close(fig)


def main() -> None:
    print("=" * 60)
    print("Example 1: Basic Usage")
    print("=" * 60)
    basic_usage()
    print()

    print("=" * 60)
    print("Example 2: Randomized Consistency Run")
    print("=" * 60)
    failures = stress_test()
    for message in failures:
        print(f"  {message}")
    print(f"  {STRESS_ITERATIONS:,} operations, {len(failures)} failures")
    print()

    with PdfPages(Path(__file__).parent / "report.pdf") as pdf:
        example_3_construction_cost(pdf)

    print(f"\nSaved charts to {VIZ_DIR} and report.pdf")


if __name__ == "__main__":
    main()
