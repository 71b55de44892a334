# gradval/core/node.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .config import float32_errstate
from .op import Operation, NOOP


@dataclass(eq=False)
class Node:
    """
    One vertex of the computation graph.

    Attributes
    ----------
    value  : np.float32
        Forward value. Computed eagerly when the node is created and never
        changed afterwards.
    grad   : Optional[np.float32]
        Partial derivative of the last backward root with respect to this
        node. None until a backward pass reaches the node; reset to None at
        the start of every pass.
    origin : Operation
        The operation that produced this node (NOOP for leaves).

    Nodes hash and compare by identity: two nodes with equal values are
    still different vertices.
    """
    value: np.float32
    grad: Optional[np.float32] = None
    origin: Operation = field(default=NOOP, repr=False)

    def __post_init__(self):
        with float32_errstate():
            self.value = np.float32(self.value)

    @classmethod
    def leaf(cls, value) -> "Node":
        return cls(value)

    @classmethod
    def from_op(cls, value, origin: Operation) -> "Node":
        return cls(value, origin=origin)

    @property
    def is_leaf(self) -> bool:
        return not self.origin.operands

    def __str__(self):
        from .formatting import render
        return render(self)
