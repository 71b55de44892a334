"""
Finite-difference ("bumping") check of analytic gradients.

Formula (per input x_i, all other inputs held fixed):
    dy/dx_i ~ [f(x_i + eps) - f(x_i - eps)] / (2 eps)

The forward evaluations run through GradVal (float32); the difference
quotient is taken in float64.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import numpy as np

from .core.config import get_config
from .core.seeds import grads, value
from .core.var import GradVal

logger = logging.getLogger(__name__)


@dataclass
class GradientCheckResult:
    """
    Attributes:
        analytic (dict): partials from the backward pass
        numeric (dict): centered finite-difference estimates
        max_error (float): largest scaled error over all inputs
        tolerance (float): tolerance used for the comparison
        passed (bool): max_error <= tolerance
    """
    analytic: Dict[str, float]
    numeric: Dict[str, float]
    max_error: float
    tolerance: float
    passed: bool


def _evaluate(f, point: Dict[str, float]) -> float:
    return float(value(f({k: GradVal(v) for k, v in point.items()})))


def central_difference(f: Callable[[Dict[str, GradVal]], GradVal],
                       inputs: Dict[str, float],
                       eps: Optional[float] = None) -> Dict[str, float]:
    """
    Centered finite-difference estimate of every partial of f at `inputs`.

    Args:
        f: function taking {name: GradVal} and returning a GradVal (or number)
        inputs: {name: numeric} evaluation point
        eps: bump size (default: EngineConfig.fd_step)

    Returns:
        {name: estimate} in the key order of `inputs`
    """
    eps = get_config().fd_step if eps is None else eps
    base = {k: float(v) for k, v in inputs.items()}
    out = {}
    for k in base:
        up = {**base, k: base[k] + eps}
        dn = {**base, k: base[k] - eps}
        # Use the bumps actually representable in float32 as the step
        h = float(np.float32(up[k])) - float(np.float32(dn[k]))
        out[k] = (_evaluate(f, up) - _evaluate(f, dn)) / h
    return out


def check_gradients(f: Callable[[Dict[str, GradVal]], GradVal],
                    inputs: Dict[str, float],
                    eps: Optional[float] = None,
                    tol: Optional[float] = None) -> GradientCheckResult:
    """
    Compare backward-pass partials against centered finite differences.

    The error for each input is |analytic - numeric| / max(1, |analytic|, |numeric|),
    i.e. absolute for small derivatives and relative for large ones.
    """
    tol = get_config().fd_tolerance if tol is None else tol
    analytic = grads(f, inputs)
    numeric = central_difference(f, inputs, eps)

    errors = []
    for k in inputs:
        a, n = analytic[k], numeric[k]
        err = abs(a - n) / max(1.0, abs(a), abs(n))
        if not err <= tol:
            logger.warning("gradient mismatch for %r: analytic=%r numeric=%r", k, a, n)
        errors.append(err)

    # np.max propagates NaN, so a NaN partial fails the check
    max_error = float(np.max(errors)) if errors else 0.0

    return GradientCheckResult(
        analytic=analytic,
        numeric=numeric,
        max_error=max_error,
        tolerance=tol,
        passed=bool(max_error <= tol),
    )
