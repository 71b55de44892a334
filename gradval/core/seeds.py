# gradval/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .var import GradVal
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a GradVal; pass through plain numbers unchanged."""
    return x.value if isinstance(x, GradVal) else x


def _ensure_gv(v: Any) -> GradVal:
    """Wrap a plain value as GradVal if needed; otherwise return the GradVal itself."""
    return v if isinstance(v, GradVal) else GradVal(v)


def _run(y: Any, xs: Iterable[GradVal]) -> List[float]:
    xs = list(xs)
    # A plain-number output is a constant function: every partial is zero
    if not isinstance(y, GradVal):
        return [0.0 for _ in xs]
    # grads left over from an earlier pass must not leak into this one
    for x in xs:
        x.node.grad = None
    backward(y)
    # Inputs that never reached y keep grad None: their partial is zero
    return [x.grad if x.grad is not None else 0.0 for x in xs]


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[GradVal], GradVal], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0 (single input).
    Runs one backward pass from y.
    """
    x = _ensure_gv(x0)
    return _run(f(x), [x])[0]


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, GradVal]], GradVal],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE backward pass to obtain all dy/dvar simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: GradVal} and returning a GradVal
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    vars_gv: Dict[str, GradVal] = {k: _ensure_gv(v) for k, v in inputs.items()}
    partials = _run(f(vars_gv), vars_gv.values())
    return dict(zip(vars_gv.keys(), partials))


def grads_list(f: Callable[[List[GradVal]], GradVal],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[GradVal] = [_ensure_gv(v) for v in x0_list]
    return _run(f(xs), xs)
