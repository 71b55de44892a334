# gradval/ops/transcendental.py
import numpy as np

from ..core.op import OpTag
from ..core.config import float32_errstate
from .arithmetic import _as_gv, _record, pow_scalar


def exp(x):
    x = _as_gv(x)
    with float32_errstate():
        ex = np.exp(x.node.value)
    return _record(OpTag.EXP, ex, x)


def log(x):
    """Natural logarithm. Non-positive inputs give -inf/NaN (unguarded)."""
    x = _as_gv(x)
    with float32_errstate():
        lx = np.log(x.node.value)
    return _record(OpTag.LOG, lx, x)


def sqrt(x):
    # Composite: recorded as POW(x, 0.5) so the operation set stays closed
    return pow_scalar(x, 0.5)
