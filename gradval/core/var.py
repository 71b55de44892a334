# gradval/core/var.py
from __future__ import annotations
import numbers
from typing import Optional

import numpy as np

from .config import get_config
from .node import Node
from ..errors import NonFiniteError


class GradVal:
    """
    Public handle on one scalar node of the computation graph.

    Arithmetic on handles records a new node eagerly; `backward()` on a
    result populates `grad` on every node that contributed to it.

    Handles are references: `y = x` or `copy.copy(x)` gives a second handle
    on the *same* node, which is what makes `x * x` receive two gradient
    contributions.

    Attributes
    ----------
    value : float
        Forward value (stored as float32).
    grad  : Optional[float]
        d(root)/d(self) after a backward pass that reached this node,
        otherwise None.
    """

    __slots__ = ("_node",)

    def __init__(self, val):
        # Only real scalars; bool is rejected even though it is an int
        if isinstance(val, bool) or not isinstance(val, numbers.Real):
            raise TypeError(
                f"GradVal only accepts real scalars (int, float, numpy scalar), "
                f"but got {type(val)}"
            )
        node = Node.leaf(val)
        # a finite input that overflows float32 is a non-finite value too
        if (get_config().nonfinite == "raise" and not np.isfinite(node.value)
                and np.isfinite(val)):
            raise NonFiniteError("NOOP", "value", node.value)
        self._node = node

    @classmethod
    def _from_node(cls, node: Node) -> "GradVal":
        out = cls.__new__(cls)
        out._node = node
        return out

    # ---------------- accessors ----------------
    @property
    def node(self) -> Node:
        return self._node

    @property
    def value(self) -> float:
        return float(self._node.value)

    @property
    def grad(self) -> Optional[float]:
        g = self._node.grad
        return None if g is None else float(g)

    @property
    def is_leaf(self) -> bool:
        return self._node.is_leaf

    def __float__(self):
        return self.value

    def __repr__(self):
        return f"GradVal({self.value!r}, grad={self.grad!r})"

    def __str__(self):
        return str(self._node)

    # ---------------- backward ----------------
    def backward(self, seed: float = 1.0) -> None:
        """Differentiate with this handle as the root (d self / d self = seed)."""
        from .engine import backward
        backward(self, seed=seed)

    # ---------------- comparisons (by current value only) ----------------
    def _cmp_value(self, other):
        if isinstance(other, GradVal):
            return other._node.value
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return other
        return NotImplemented

    def __eq__(self, other):
        v = self._cmp_value(other)
        return v if v is NotImplemented else bool(self._node.value == v)

    def __ne__(self, other):
        v = self._cmp_value(other)
        return v if v is NotImplemented else bool(self._node.value != v)

    def __lt__(self, other):
        v = self._cmp_value(other)
        return v if v is NotImplemented else bool(self._node.value < v)

    def __le__(self, other):
        v = self._cmp_value(other)
        return v if v is NotImplemented else bool(self._node.value <= v)

    def __gt__(self, other):
        v = self._cmp_value(other)
        return v if v is NotImplemented else bool(self._node.value > v)

    def __ge__(self, other):
        v = self._cmp_value(other)
        return v if v is NotImplemented else bool(self._node.value >= v)

    __hash__ = None  # value-based equality

    # ---------------- operator overloading ----------------
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)

    # ---------------- named operations ----------------
    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def log(self):
        from ..ops.transcendental import log
        return log(self)

    def sqrt(self):
        from ..ops.transcendental import sqrt
        return sqrt(self)

    def pow(self, exponent: "GradVal"):
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    def pow_scalar(self, exponent: float):
        from ..ops.arithmetic import pow_scalar
        return pow_scalar(self, exponent)
