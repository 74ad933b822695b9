"""
Ordered Tree Demo -- Tree shape under different build orders, removal churn,
and the copy/equality behaviour.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from ordered_tree import OrderedTree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


def _insert_all(values):
    tree = OrderedTree()
    for value in values:
        tree.insert(int(value))
    return tree


# ---------------------------------------------------------------------------
# Example 1: Height by build order
# ---------------------------------------------------------------------------
def example_1_height_by_build_order():
    """Compare bisection build, sorted insertion and random insertion."""
    print("=" * 60)
    print("Example 1: Height by Build Order")
    print("=" * 60)

    sizes = np.arange(1, 301, 10)
    trials = 20
    bulk_heights = []
    sorted_heights = []
    random_means = []
    random_stds = []

    for n in sizes:
        values = np.arange(n)
        bulk_heights.append(OrderedTree(values.tolist()).height())
        sorted_heights.append(_insert_all(values).height())
        heights = [_insert_all(np.random.permutation(n)).height() for _ in range(trials)]
        random_means.append(np.mean(heights))
        random_stds.append(np.std(heights))

    random_means = np.array(random_means)
    random_stds = np.array(random_stds)

    for n, b, r in zip(sizes[::6], bulk_heights[::6], random_means[::6]):
        print(f"  n={n:4d}  bisection height={b:3d}  random mean height={r:6.2f}")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(sizes, sorted_heights, color=COLORS["red"], label="sorted insertion")
    ax.plot(sizes, random_means, color=COLORS["orange"], label=f"random insertion (mean of {trials})")
    ax.fill_between(sizes, random_means - random_stds, random_means + random_stds,
                    color=COLORS["orange"], alpha=0.2)
    ax.plot(sizes, bulk_heights, color=COLORS["green"], label="bisection build")
    ax.plot(sizes, np.ceil(np.log2(sizes + 1)), "--", color=COLORS["dark"], label="ceil(log2(n+1))")
    ax.set_xlabel("number of keys")
    ax.set_ylabel("tree height")
    ax.set_yscale("log")
    ax.set_title("Tree height by build order")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_height_by_order.png", dpi=150)
    plt.close(fig)
    print()
    return fig, bulk_heights


# ---------------------------------------------------------------------------
# Example 2: Removal churn
# ---------------------------------------------------------------------------
def example_2_removal_churn():
    """Random inserts and removes; size tracks a set and the tree stays valid."""
    print("=" * 60)
    print("Example 2: Removal Churn")
    print("=" * 60)

    tree = OrderedTree(range(0, 512, 2))
    model = set(range(0, 512, 2))
    steps = 4000
    sizes = []
    heights = []
    valid = True

    for _ in range(steps):
        value = int(np.random.randint(0, 512))
        if np.random.rand() < 0.5:
            tree.insert(value)
            model.add(value)
        else:
            tree.remove(value)
            model.discard(value)
        sizes.append(tree.size())
        heights.append(tree.height())
        valid = valid and tree.is_valid() and tree.size() == len(model)

    print(f"  Steps: {steps}")
    print(f"  Final size: {tree.size()}  final height: {tree.height()}")
    print(f"  Tree valid and in sync with set at every step: {valid}")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 5))
    ax1.plot(sizes, color=COLORS["blue"])
    ax1.set_xlabel("step")
    ax1.set_ylabel("size")
    ax1.set_title("Size during churn")
    ax1.grid(True, alpha=0.3)
    ax2.plot(heights, color=COLORS["red"])
    ax2.plot(np.ceil(np.log2(np.array(sizes) + 1)), "--", color=COLORS["dark"], label="minimal height")
    ax2.set_xlabel("step")
    ax2.set_ylabel("height")
    ax2.set_title("Height drift without rebalancing")
    ax2.legend()
    ax2.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_removal_churn.png", dpi=150)
    plt.close(fig)
    print()
    return fig, valid


# ---------------------------------------------------------------------------
# Example 3: Copy, move and structural equality
# ---------------------------------------------------------------------------
def example_3_copy_and_equality():
    """Equality compares shapes; copy rebuilds the shape from pre-order."""
    print("=" * 60)
    print("Example 3: Copy, Move and Equality")
    print("=" * 60)

    keys = [1, 2, 3, 4, 5, 6, 7]
    bulk = OrderedTree(keys)
    chain = _insert_all(keys)

    print("\n  Bisection build of 1..7:")
    bulk.print()
    print("\n  Sorted insertion of 1..7:")
    chain.print()

    clone = bulk.copy()
    print(f"\n  bulk == chain:        {bulk == chain}  (same keys, different shape)")
    print(f"  bulk == bulk.copy():  {bulk == clone}")

    moved = clone.move()
    print(f"  after move: source size={clone.size()}, moved size={moved.size()}")
    print()
    return bulk == clone


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    pdf_path = Path(__file__).parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.92, "Ordered Tree", fontsize=24, ha="center", fontweight="bold")
        summary_text = """
Unbalanced binary search tree used as an ordered set.

• Operations:
  - insert / remove / contains return booleans
  - bisection build from an unsorted collection
  - pre-order copy, ownership move, shape-sensitive equality

Key Findings:
  1. Bisection build always reaches the minimal height ceil(log2(n+1))
  2. Sorted insertion degenerates into a chain of height n
  3. Random churn keeps the tree valid but lets height drift upward
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, image_name in figures_data:
            fig_copy = plt.figure(figsize=(11, 8.5))
            fig_copy.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            img = plt.imread(VIZ_DIR / image_name)
            ax = fig_copy.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig_copy)
            plt.close(fig_copy)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 21 + "ORDERED TREE DEMO" + " " * 20 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_height_by_build_order()
    example_2_removal_churn()
    example_3_copy_and_equality()

    generate_pdf_report([
        ("Example 1: Height by Build Order", "01_height_by_order.png"),
        ("Example 2: Removal Churn", "02_removal_churn.png"),
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
