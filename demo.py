"""
BalancedSet Demo -- Height growth against the AVL bound, randomized workload
validation, and a gallery of the four rotation cases.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

_root = str(Path(__file__).resolve().parent)
if _root not in sys.path:
    sys.path.insert(0, _root)

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from src.balanced_set import BalancedSet

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

GROWTH_SIZES = [2 ** k for k in range(1, 15)]
WORKLOAD_STEPS = 5000
KEY_RANGE = 1000


def avl_bound(n):
    return 1.45 * np.log2(np.asarray(n) + 2)


def example_1_height_growth():
    """Sorted inserts: AVL height vs the theoretical bound and a degenerate BST."""
    print("=" * 60)
    print("Example 1: Height Growth Under Sorted Insertion")
    print("=" * 60)

    heights = []
    timings = []
    for n in GROWTH_SIZES:
        tree: BalancedSet[int] = BalancedSet()
        start = time.perf_counter()
        for i in range(n):
            tree.insert(i)
        timings.append(time.perf_counter() - start)
        heights.append(tree.height())
        print(f"  n = {n:6d}  height = {tree.height():3d}  bound = {avl_bound(n):6.2f}  "
              f"balanced = {tree.is_balanced()}")

    sizes = np.array(GROWTH_SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(14, 6))

    ax = axes[0]
    ax.plot(sizes, heights, "o-", color="steelblue", linewidth=2, label="BalancedSet height")
    ax.plot(sizes, avl_bound(sizes), "r--", linewidth=2, label="1.45 log2(n + 2)")
    ax.plot(sizes, np.floor(np.log2(sizes)), "g:", linewidth=2, label="floor(log2 n)")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("n (keys inserted in increasing order)")
    ax.set_ylabel("Height (edges)")
    ax.set_title("AVL Height vs Bound")
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    ax.loglog(sizes, sizes - 1, "k--", linewidth=2, label="Unbalanced BST height (n - 1)")
    ax.loglog(sizes, np.maximum(heights, 1), "o-", color="steelblue", linewidth=2,
              label="BalancedSet height")
    ax.set_xlabel("n")
    ax.set_ylabel("Height")
    ax.set_title("Rebalancing vs Degenerate Chain")
    ax.legend()
    ax.grid(True, alpha=0.3, which="both")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_height_growth.png", dpi=150)
    plt.close(fig)

    return fig, heights, timings


def example_2_random_workload():
    """Seeded insert/remove mix, validating every invariant after each step."""
    print("\n" + "=" * 60)
    print("Example 2: Randomized Insert/Remove Workload")
    print("=" * 60)

    np.random.seed(SEED)
    keys = np.random.randint(0, KEY_RANGE, size=WORKLOAD_STEPS)
    actions = np.random.rand(WORKLOAD_STEPS) < 0.65

    tree: BalancedSet[int] = BalancedSet()
    model = set()
    sizes = np.zeros(WORKLOAD_STEPS, dtype=int)
    heights = np.zeros(WORKLOAD_STEPS, dtype=int)
    violations = 0

    for step, (key, is_insert) in enumerate(zip(keys.tolist(), actions.tolist())):
        if is_insert:
            tree.insert(key)
            model.add(key)
        else:
            tree.remove(key)
            model.discard(key)
        if not tree.is_valid() or tree.size() != len(model):
            violations += 1
        sizes[step] = tree.size()
        heights[step] = tree.height()

    print(f"Final size:        {tree.size()}")
    print(f"Final height:      {tree.height()}")
    print(f"Enumeration sorted and matches model: {tree.enumerate() == sorted(model)}")
    print(f"Invariant violations: {violations}")

    steps = np.arange(WORKLOAD_STEPS)
    fig, ax1 = plt.subplots(figsize=(10, 6))
    ax1.plot(steps, sizes, color="steelblue", linewidth=1.5, label="size")
    ax1.set_xlabel("Operation")
    ax1.set_ylabel("Size", color="steelblue")
    ax2 = ax1.twinx()
    ax2.plot(steps, heights, color="darkorange", linewidth=1.5, label="height")
    ax2.plot(steps, avl_bound(np.maximum(sizes, 1)), "r--", linewidth=1, label="AVL bound")
    ax2.set_ylabel("Height", color="darkorange")
    ax1.set_title(f"Random Workload ({WORKLOAD_STEPS} ops, {violations} invariant violations)")
    lines = ax1.get_lines() + ax2.get_lines()
    ax1.legend(lines, [line.get_label() for line in lines], loc="lower right")
    ax1.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_random_workload.png", dpi=150)
    plt.close(fig)

    return fig, violations


def _node_positions(tree):
    positions = {}
    edges = []

    def walk(node, depth, counter):
        if node is None:
            return counter
        counter = walk(node.left, depth + 1, counter)
        positions[id(node)] = (counter, -depth, node.value)
        counter += 1
        counter = walk(node.right, depth + 1, counter)
        for child in (node.left, node.right):
            if child is not None:
                edges.append((id(node), id(child)))
        return counter

    walk(tree.root, 0, 0)
    return positions, edges


def _draw_tree(ax, tree, title):
    positions, edges = _node_positions(tree)
    for parent, child in edges:
        x0, y0, _ = positions[parent]
        x1, y1, _ = positions[child]
        ax.plot([x0, x1], [y0, y1], "-", color="gray", zorder=1)
    for x, y, value in positions.values():
        ax.scatter([x], [y], s=700, color="lightsteelblue", edgecolors="navy", zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", fontsize=11, zorder=3)
    ax.set_title(title)
    ax.set_xlim(-1, max(len(positions), 1))
    ax.set_ylim(-tree.height() - 0.7, 0.7)
    ax.axis("off")


def example_3_rotation_gallery():
    """The four imbalance cases and the shape each one settles into."""
    print("\n" + "=" * 60)
    print("Example 3: Rotation Gallery")
    print("=" * 60)

    cases = [
        ("LL -> right rotation", [30, 20, 10]),
        ("RR -> left rotation", [10, 20, 30]),
        ("LR -> left-right rotation", [30, 10, 20]),
        ("RL -> right-left rotation", [10, 30, 20]),
        ("Successor promotion: remove 5", [5, 3, 8, 1, 4, 7, 9]),
    ]

    fig, axes = plt.subplots(1, len(cases), figsize=(4 * len(cases), 4))
    for ax, (title, values) in zip(axes, cases):
        tree: BalancedSet[int] = BalancedSet()
        for v in values:
            tree.insert(v)
        if title.startswith("Successor"):
            tree.remove(5)
        print(f"  {title:32s} inserted {values} -> pre-order {tree.pre_order()}")
        _draw_tree(ax, tree, title)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_rotation_gallery.png", dpi=150)
    plt.close(fig)

    return fig


def example_4_insert_cost(timings):
    """Per-insert cost of the sorted-insert runs from Example 1."""
    print("\n" + "=" * 60)
    print("Example 4: Insert Cost")
    print("=" * 60)

    sizes = np.array(GROWTH_SIZES)
    per_insert_us = np.array(timings) / sizes * 1e6
    for n, cost in zip(GROWTH_SIZES, per_insert_us):
        print(f"  n = {n:6d}  {cost:8.2f} us/insert")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, per_insert_us, "o-", color="purple", linewidth=2, label="measured")
    ax.plot(sizes, per_insert_us[-1] * np.log2(sizes) / np.log2(sizes[-1]), "k--",
            linewidth=1.5, label="O(log n) reference")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("n")
    ax.set_ylabel("Microseconds per insert")
    ax.set_title("Amortized Insert Cost")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_insert_cost.png", dpi=150)
    plt.close(fig)

    return fig


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "BalancedSet", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "AVL-Backed Ordered Set", fontsize=24, ha="center")
        fig.text(0.5, 0.35, "Demonstration & Analysis Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")

        summary_text = """
This report exercises an ordered set backed by an AVL tree.

• Operations:
  - insert / remove with recursive rebalancing
  - exists, min, max
  - in-order enumeration

• Invariants checked:
  - BST ordering at every node
  - balance factor in {-1, 0, 1} at every node
  - cached heights (empty = -1, leaf = 0)
  - size matches the number of reachable values

Key Findings:
  1. Sorted insertion stays well under 1.45 log2(n + 2)
  2. Randomized insert/remove never breaks an invariant
  3. Per-insert cost grows logarithmically
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, image in figures_data:
            fig_copy = plt.figure(figsize=(11, 8.5))
            fig_copy.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            img = plt.imread(VIZ_DIR / image)
            ax = fig_copy.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig_copy)
            plt.close(fig_copy)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 21 + "BALANCED SET DEMO" + " " * 20 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    _, _, timings = example_1_height_growth()
    example_2_random_workload()
    example_3_rotation_gallery()
    example_4_insert_cost(timings)

    generate_pdf_report([
        ("Example 1: Height Growth", "01_height_growth.png"),
        ("Example 2: Random Workload", "02_random_workload.png"),
        ("Example 3: Rotation Gallery", "03_rotation_gallery.png"),
        ("Example 4: Insert Cost", "04_insert_cost.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
