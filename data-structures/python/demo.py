"""
ArrayQueue Demo -- Scripted walkthrough, growth trace, and dequeue cost comparison.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Combined PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from array_queue import ArrayQueue
from circular_queue import CircularQueue

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)
REPORT_PATH = Path(__file__).parent / "report.pdf"

COLORS = {
    "array": "#e74c3c",
    "circular": "#3498db",
    "size": "#27ae60",
}

GROWTH_ENQUEUES = 40
DRAIN_SIZES = [250, 500, 1000, 2000, 4000, 8000]
REPEATS = 3


# ---------------------------------------------------------------------------
# Example 1: Scripted walkthrough
# ---------------------------------------------------------------------------
def example_1_walkthrough():
    print("=" * 60)
    print("Example 1: Scripted Walkthrough")
    print("=" * 60)

    queue = ArrayQueue(2)
    print(f"\n  ArrayQueue(2) -> size={queue.size()}, capacity={queue.capacity()}")

    queue.enqueue(5)
    queue.enqueue(50)
    print(f"  enqueue(5), enqueue(50) -> {queue!r}, capacity={queue.capacity()}")

    queue.enqueue("Hello!")
    print(f"  enqueue('Hello!')       -> {queue!r}, capacity={queue.capacity()}")

    print(f"  dequeue() -> {queue.dequeue()!r}")
    print(f"  dequeue() -> {queue.dequeue()!r}")
    print(f"  peek()    -> {queue.peek()!r}")
    print(f"  size()    -> {queue.size()}")


# ---------------------------------------------------------------------------
# Example 2: Growth trace from zero capacity
# ---------------------------------------------------------------------------
def example_2_growth_trace():
    print("\n" + "=" * 60)
    print("Example 2: Growth Trace From Zero Capacity")
    print("=" * 60)

    queue = ArrayQueue(0)
    sizes = np.zeros(GROWTH_ENQUEUES, dtype=int)
    capacities = np.zeros(GROWTH_ENQUEUES, dtype=int)
    growth_points = []
    for i in range(GROWTH_ENQUEUES):
        before = queue.capacity()
        queue.enqueue(i)
        sizes[i] = queue.size()
        capacities[i] = queue.capacity()
        if capacities[i] != before:
            growth_points.append((i + 1, before, int(capacities[i])))

    print(f"\n  {'Enqueue #':>10} {'Old Cap':>10} {'New Cap':>10}")
    print(f"  {'-'*32}")
    for n, old, new in growth_points:
        print(f"  {n:>10} {old:>10} {new:>10}")

    copies = sum(old for _, old, _ in growth_points)
    print(f"\n  Element copies during growth: {copies} for {GROWTH_ENQUEUES} enqueues "
          f"({copies / GROWTH_ENQUEUES:.2f} per enqueue)")

    fig, ax = plt.subplots(figsize=(10, 5))
    steps = np.arange(1, GROWTH_ENQUEUES + 1)
    ax.step(steps, capacities, where="post", color=COLORS["array"], linewidth=2,
            label="capacity")
    ax.plot(steps, sizes, color=COLORS["size"], linewidth=2, label="size")
    for n, _, new in growth_points:
        ax.axvline(n, color="gray", alpha=0.2, linestyle="--")
    ax.set_xlabel("Enqueue count")
    ax.set_ylabel("Slots")
    ax.set_title("ArrayQueue capacity doubling (initial capacity 0)", fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_growth_trace.png", dpi=150)
    plt.close(fig)
    print(f"\n  Saved: viz/01_growth_trace.png")


# ---------------------------------------------------------------------------
# Example 3: Dequeue cost, shifting vs circular
# ---------------------------------------------------------------------------
def _time_drain(queue_cls, n):
    timings = []
    for _ in range(REPEATS):
        queue = queue_cls(n)
        for value in np.random.randint(0, 1000, size=n).tolist():
            queue.enqueue(value)
        start = time.perf_counter()
        while not queue.is_empty():
            queue.dequeue()
        timings.append(time.perf_counter() - start)
    return float(np.median(timings)) * 1000


def example_3_dequeue_cost():
    print("\n" + "=" * 60)
    print("Example 3: Dequeue Cost (ArrayQueue vs CircularQueue)")
    print("=" * 60)

    array_ms = np.array([_time_drain(ArrayQueue, n) for n in DRAIN_SIZES])
    circular_ms = np.array([_time_drain(CircularQueue, n) for n in DRAIN_SIZES])

    print(f"\n  {'Elements':>10} {'Array (ms)':>14} {'Circular (ms)':>15} {'Ratio':>10}")
    print(f"  {'-'*52}")
    for n, a, c in zip(DRAIN_SIZES, array_ms, circular_ms):
        print(f"  {n:>10} {a:>14.2f} {c:>15.2f} {a / max(c, 1e-9):>9.1f}x")

    # quadratic drain for the shifting queue should give a log-log slope near 2
    slope_array = np.polyfit(np.log(DRAIN_SIZES), np.log(array_ms), 1)[0]
    slope_circular = np.polyfit(np.log(DRAIN_SIZES), np.log(circular_ms), 1)[0]
    print(f"\n  Log-log slope: ArrayQueue {slope_array:.2f}, CircularQueue {slope_circular:.2f}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    ax = axes[0]
    ax.plot(DRAIN_SIZES, array_ms, "o-", color=COLORS["array"], linewidth=2,
            label="ArrayQueue (shift)")
    ax.plot(DRAIN_SIZES, circular_ms, "s-", color=COLORS["circular"], linewidth=2,
            label="CircularQueue")
    ax.set_xlabel("Elements drained")
    ax.set_ylabel("Time (ms)")
    ax.set_title("Total drain time", fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    sizes = np.array(DRAIN_SIZES)
    ax.loglog(sizes, array_ms / sizes * 1000, "o-", color=COLORS["array"], linewidth=2,
              label="ArrayQueue (shift)")
    ax.loglog(sizes, circular_ms / sizes * 1000, "s-", color=COLORS["circular"],
              linewidth=2, label="CircularQueue")
    ax.set_xlabel("Elements drained")
    ax.set_ylabel("Time per dequeue (us)")
    ax.set_title("Per-dequeue cost", fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3, which="both")

    fig.suptitle("O(n) shifting dequeue vs O(1) circular dequeue", fontsize=13,
                 fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_dequeue_cost.png", dpi=150)
    plt.close(fig)
    print(f"\n  Saved: viz/02_dequeue_cost.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    viz_files = sorted(VIZ_DIR.glob("*.png"))
    with PdfPages(REPORT_PATH) as pdf:
        fig, ax = plt.subplots(figsize=(10, 7))
        ax.axis("off")
        ax.text(0.5, 0.65, "ArrayQueue", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.5, "Growth policy and dequeue cost", fontsize=16,
                ha="center", va="center", transform=ax.transAxes, color="gray")
        ax.text(0.5, 0.35, f"Seed: {SEED}  |  Repeats per size: {REPEATS}",
                fontsize=11, ha="center", va="center", transform=ax.transAxes,
                color="#888888")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.96])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("ArrayQueue Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_walkthrough()
    example_2_growth_trace()
    example_3_dequeue_cost()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {REPORT_PATH}")
    print("=" * 60)


if __name__ == "__main__":
    main()
