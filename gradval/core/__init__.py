# gradval/core/__init__.py

"""
Core public API for the gradval package.

This module exposes the minimal set of symbols that users of the engine
should import from `gradval.core`. Keeping this surface small makes it easier
to change internals (node layout, traversal order) without breaking user code.

Exports:
    GradVal       : The differentiable scalar handle.
    Node          : One vertex of the computation graph (value, grad, origin).
    Operation     : How a Node was produced (tag + operand nodes).
    OpTag         : The closed set of operation kinds.
    backward      : Reset, then accumulate gradients from a root.
    reset_grads   : Reset phase only.
    grad, grads   : Convenience: derivatives of a function at a point.
    value         : Convenience: extract the value from a GradVal.
"""

from .var import GradVal
from .node import Node
from .op import Operation, OpTag
from .engine import backward, reset_grads, accumulate, topological_order
from .config import EngineConfig, engine_config, get_config, use_config
from .seeds import grad, grads, grads_list, value

__all__ = [
    "GradVal", "Node", "Operation", "OpTag",
    "backward", "reset_grads", "accumulate", "topological_order",
    "EngineConfig", "engine_config", "get_config", "use_config",
    "grad", "grads", "grads_list", "value",
]
