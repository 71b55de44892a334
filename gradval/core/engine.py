# gradval/core/engine.py
from __future__ import annotations
import logging
from typing import Dict, List, Tuple, Union

import numpy as np

from .config import get_config, float32_errstate
from .node import Node
from .op import OpTag
from .var import GradVal
from ..errors import NonFiniteError

logger = logging.getLogger(__name__)

_ONE = np.float32(1.0)


def _as_node(root: Union[GradVal, Node]) -> Node:
    if isinstance(root, GradVal):
        return root.node
    if isinstance(root, Node):
        return root
    raise TypeError(f"expected GradVal or Node, got {type(root)}")


def topological_order(root: Union[GradVal, Node]) -> List[Node]:
    """
    All nodes reachable from `root` through operand links, each exactly once,
    operands before the nodes that consume them (root last).

    Iterative DFS, so long chains do not hit the recursion limit.
    """
    root = _as_node(root)
    order: List[Node] = []
    visited = set()
    stack: List[Tuple[Node, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            # every operand is already in `order`
            order.append(node)
            continue
        if id(node) in visited:
            continue
        visited.add(id(node))
        stack.append((node, True))
        for p in reversed(node.origin.operands):
            if id(p) not in visited:
                stack.append((p, False))
    return order


def reset_grads(root: Union[GradVal, Node]) -> int:
    """
    Reset phase: set grad = None on every node reachable from `root`.
    Returns the number of nodes visited.
    """
    root = _as_node(root)
    seen = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue  # shared antecedent, already reset
        seen.add(id(node))
        node.grad = None
        stack.extend(node.origin.operands)
    logger.debug("reset_grads: %d node(s) cleared", len(seen))
    return len(seen)


def _local_partials(node: Node, g: np.float32) -> Tuple[np.float32, ...]:
    """
    Gradient contributions pushed from `node` to each of its operands, given
    the upstream gradient `g` arriving at `node`. Both binary contributions
    are computed from the (immutable) operand values before anything is
    applied.
    """
    tag = node.origin.tag
    ops = node.origin.operands

    if tag is OpTag.NOOP:
        return ()
    if tag is OpTag.NEG:
        return (-g,)
    if tag is OpTag.EXP:
        return (g * np.exp(ops[0].value),)
    if tag is OpTag.LOG:
        return (g / ops[0].value,)

    a, b = ops[0].value, ops[1].value
    if tag is OpTag.ADD:
        return (g, g)
    if tag is OpTag.SUB:
        return (g, -g)
    if tag is OpTag.MUL:
        return (g * b, g * a)
    if tag is OpTag.DIV:
        return (g / b, g * (-a / (b * b)))
    if tag is OpTag.POW:
        da = b * np.power(a, b - _ONE)
        db = np.power(a, b) * np.log(a)  # NaN for a <= 0
        logger.debug("pow partials: d/da=%r d/db=%r upstream=%r", da, db, g)
        return (g * da, g * db)

    raise AssertionError(f"unhandled operation {tag!r}")


def accumulate(root: Union[GradVal, Node], seed: float = 1.0) -> None:
    """
    Accumulate phase: push `seed` into `root` and propagate contributions to
    every ancestor, adding (never overwriting) into each node's grad.

    A node reached along several paths receives the sum of the path
    contributions. Nodes are processed in reverse topological order so each
    node forwards the complete incoming gradient of this pass exactly once.
    """
    root = _as_node(root)
    raise_nonfinite = get_config().nonfinite == "raise"

    def checked(tag: OpTag, g) -> np.float32:
        g = np.float32(g)
        if raise_nonfinite and not np.isfinite(g):
            raise NonFiniteError(tag.name, "gradient", g)
        return g

    with float32_errstate():
        incoming: Dict[int, np.float32] = {id(root): checked(root.origin.tag, seed)}
        for node in reversed(topological_order(root)):
            tag = node.origin.tag
            g = incoming.pop(id(node))
            node.grad = g if node.grad is None else checked(tag, node.grad + g)
            contributions = _local_partials(node, g)
            for p, c in zip(node.origin.operands, contributions):
                c = checked(tag, c)
                prev = incoming.get(id(p))
                # sums of finite contributions can still overflow
                incoming[id(p)] = c if prev is None else checked(tag, prev + c)


def backward(root: Union[GradVal, Node], seed: float = 1.0) -> None:
    """
    Reverse-mode pass from a scalar root:
        1) reset every reachable grad to None
        2) accumulate d(root)/d(node) into every reachable node, seeding the
           root with `seed` (1.0: d root / d root).
    Calling it again, on the same or a different root, starts from a fresh
    reset of that root's subgraph.
    """
    node = _as_node(root)
    n = reset_grads(node)
    logger.debug("backward: root=%s, %d node(s), seed=%r", node, n, seed)
    accumulate(node, seed=seed)
