"""
Binary Search Tree Demo — traversal orders, successor deletion, and skew.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).parent / "src"))

from binary_search_tree import BinarySearchTree, Traversal
from sortable_list import sorted_values

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)


def node_positions(tree):
    """Map each value to (x, y): x is its in-order rank, y its negated depth."""
    positions = {}
    rank = 0
    stack = []
    node, depth = tree.root, 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        positions[node.value] = (rank, -depth)
        rank += 1
        node, depth = node.right, depth + 1
    return positions


def draw_tree(ax, tree, title, highlight=None):
    positions = node_positions(tree)
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        x, y = positions[node.value]
        for child in (node.left, node.right):
            if child is not None:
                cx, cy = positions[child.value]
                ax.plot([x, cx], [y, cy], "-", color="gray", linewidth=1, zorder=1)
                stack.append(child)
    for value, (x, y) in positions.items():
        color = "orange" if value == highlight else "steelblue"
        ax.scatter([x], [y], s=600, color=color, zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", color="white", fontweight="bold", zorder=3)
    ax.set_title(title)
    ax.axis("off")


def example_1_traversal_orders():
    """Pre-, in- and post-order on a small tree."""
    print("=" * 60)
    print("Example 1: Traversal Orders")
    print("=" * 60)

    tree = BinarySearchTree()
    for value in [5, 3, 8, 1, 4, 7, 9]:
        tree.insert(value)

    for order in Traversal:
        print(f"{order.value:<12}: {tree.traverse(order)}")

    fig, ax = plt.subplots(figsize=(8, 5))
    draw_tree(ax, tree, "Tree built from [5, 3, 8, 1, 4, 7, 9]")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_traversal_orders.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_2_successor_deletion():
    """Removing a node with two children promotes the leftmost of its right subtree."""
    print("\n" + "=" * 60)
    print("Example 2: Deletion by Successor Join")
    print("=" * 60)

    before = BinarySearchTree()
    for value in [5, 3, 8, 1, 4, 7, 9]:
        before.insert(value)
    after = before.copy()
    after.remove(5)

    print(f"Before: in-order {before.in_order()}, root {before.root.value}")
    print(f"After removing 5: in-order {after.in_order()}, root {after.root.value}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    draw_tree(axes[0], before, "Before remove(5)", highlight=7)
    draw_tree(axes[1], after, "After remove(5): successor 7 promoted", highlight=7)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_successor_deletion.png", dpi=150)
    plt.close(fig)

    return fig, after


def example_3_insertion_order_skew(n=500):
    """Tree height under random vs sorted insertion order."""
    print("\n" + "=" * 60)
    print("Example 3: Height vs Insertion Order (no balancing)")
    print("=" * 60)

    np.random.seed(SEED)
    orders = {
        "random": np.random.permutation(n).tolist(),
        "sorted": list(range(n)),
    }

    heights = {}
    for name, values in orders.items():
        tree = BinarySearchTree()
        trace = []
        for value in values:
            tree.insert(value)
            trace.append(tree.height())
        heights[name] = np.array(trace)
        print(f"{name:<8}: final height {trace[-1]} for {n} values")

    sizes = np.arange(1, n + 1)
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, heights["sorted"], "r-", linewidth=2, label="Sorted input")
    ax.plot(sizes, heights["random"], "b-", linewidth=2, label="Random input")
    ax.plot(sizes, np.log2(sizes) + 1, "g--", linewidth=1.5, label="log2(n) + 1")
    ax.set_xlabel("Values inserted")
    ax.set_ylabel("Tree height")
    ax.set_title("Unbalanced BST Height")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_height_skew.png", dpi=150)
    plt.close(fig)

    return fig, heights


def example_4_tree_sort():
    """Sorting through the tree collapses duplicates."""
    print("\n" + "=" * 60)
    print("Example 4: Tree Sort")
    print("=" * 60)

    np.random.seed(SEED)
    values = np.random.randint(0, 50, size=40).tolist()
    result = sorted_values(values)

    print(f"Input ({len(values)} values): {values}")
    print(f"Sorted ({len(result)} distinct): {result}")
    print(f"Matches sorted(set(...)): {result == sorted(set(values))}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 4))
    axes[0].bar(range(len(values)), values, color="steelblue")
    axes[0].set_title("Input order")
    axes[1].bar(range(len(result)), result, color="seagreen")
    axes[1].set_title("In-order output (duplicates collapsed)")
    for ax in axes:
        ax.set_xlabel("Position")
        ax.set_ylabel("Value")
        ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_tree_sort.png", dpi=150)
    plt.close(fig)

    return fig, result


def generate_pdf_report(figures_data):
    """Collect the saved figures into report.pdf."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = Path(__file__).parent / "report.pdf"
    with PdfPages(pdf_path) as pdf:
        for title, image_name in figures_data:
            page = plt.figure(figsize=(11, 8.5))
            page.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = page.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(VIZ_DIR / image_name))
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 17 + "BINARY SEARCH TREE DEMO" + " " * 18 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_traversal_orders()
    example_2_successor_deletion()
    example_3_insertion_order_skew()
    example_4_tree_sort()

    generate_pdf_report([
        ("Example 1: Traversal Orders", "01_traversal_orders.png"),
        ("Example 2: Successor Deletion", "02_successor_deletion.png"),
        ("Example 3: Height Skew", "03_height_skew.png"),
        ("Example 4: Tree Sort", "04_tree_sort.png"),
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
