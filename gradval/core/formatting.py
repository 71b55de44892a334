# gradval/core/formatting.py
import numpy as np


def sci(x) -> str:
    """Shortest scientific notation of a float32, e.g. 6e+00, 1.5e+00, -2.5e-01."""
    x = np.float32(x)
    if not np.isfinite(x):
        return str(float(x))
    return np.format_float_scientific(x, trim="-")


def render(node) -> str:
    """
    Debug rendering of a node:
        "<op>(<operand values>) = <value>[, grad: <g>]"
    Leaves render their value only.
    """
    from .op import OpTag
    parts = []
    if node.origin.tag is not OpTag.NOOP:
        parts.append(f"{node.origin} = ")
    parts.append(sci(node.value))
    if node.grad is not None:
        parts.append(f", grad: {sci(node.grad)}")
    return "".join(parts)
