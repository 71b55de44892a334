"""
Computation graph utilities.
Print and analyse the graph hanging off a root GradVal.
"""

from collections import Counter
from typing import Dict, List

from .engine import topological_order
from .formatting import sci
from .node import Node


def collect_nodes(root) -> List[Node]:
    """Reachable nodes, operands first, root last."""
    return topological_order(root)


def get_graph_stats(root) -> Dict:
    """
    Graph statistics (no printing).

    Returns:
        dict with nodes, edges, leaves, max_fan_in, max_fan_out and the
        per-operation counts keyed by tag name.
    """
    nodes = collect_nodes(root)
    fan_out = Counter()
    for node in nodes:
        for p in node.origin.operands:
            fan_out[id(p)] += 1

    fan_ins = [len(node.origin.operands) for node in nodes]
    return {
        'nodes': len(nodes),
        'edges': sum(fan_ins),
        'leaves': sum(1 for node in nodes if node.is_leaf),
        'max_fan_in': max(fan_ins),
        'max_fan_out': max(fan_out.values()) if fan_out else 0,
        'operations': dict(Counter(node.origin.tag.name for node in nodes)),
    }


def print_graph_summary(root) -> Dict:
    """Print the statistics from get_graph_stats and return them."""
    stats = get_graph_stats(root)

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_type:6s}: {count:6,} ({pct:5.1f}%)")
    print("="*70 + "\n")

    return stats


def print_computation_graph(root, max_nodes: int = 20) -> None:
    """
    Print the graph, one node per line, operands before consumers:

        Node    0: NOOP   ( 3e+00) [leaf]  grad=6e+00
        Node    1: MUL    ( 9e+00) <- [Node0, Node0]  grad=1e+00
    """
    nodes = collect_nodes(root)
    index = {id(node): i for i, node in enumerate(nodes)}

    print("\n" + "="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)

    for i, node in enumerate(nodes[:max_nodes]):
        grad = "-" if node.grad is None else sci(node.grad)
        if node.is_leaf:
            links = "[leaf]"
        else:
            links = "<- [" + ", ".join(f"Node{index[id(p)]}" for p in node.origin.operands) + "]"
        print(f"Node {i:4d}: {node.origin.tag.name:6s} ({sci(node.value):>14s}) {links}  grad={grad}")

    if len(nodes) > max_nodes:
        print(f"... ({len(nodes) - max_nodes} more nodes)")

    print("="*70 + "\n")
