# gradval/ops/arithmetic.py
import logging

import numpy as np

from ..core.var import GradVal
from ..core.node import Node
from ..core.op import Operation, OpTag
from ..core.config import get_config, float32_errstate
from ..errors import DivisionByZeroError, NonFiniteError

logger = logging.getLogger(__name__)


def _as_gv(x):
    """Ensure x is a GradVal; otherwise wrap it as a fresh leaf."""
    return x if isinstance(x, GradVal) else GradVal(x)


def _record(tag: OpTag, value, *operands: GradVal) -> GradVal:
    """
    Create the output node of a primitive:
      - value is coerced to float32
      - origin records the tag and the operand nodes (shared, not copied)
    """
    value = np.float32(value)
    if not np.isfinite(value) and get_config().nonfinite == "raise":
        raise NonFiniteError(tag.name, "value", value)
    origin = Operation(tag, tuple(x.node for x in operands))
    return GradVal._from_node(Node.from_op(value, origin))


def _binary(x, y, f, tag: OpTag) -> GradVal:
    """
    Generic binary primitive:
      - wraps raw numbers as leaves
      - computes out.value = f(x.value, y.value) in float32
    """
    x = _as_gv(x)
    y = _as_gv(y)
    with float32_errstate():
        val = f(x.node.value, y.node.value)
    return _record(tag, val, x, y)


def add(x, y): return _binary(x, y, lambda a, b: a + b, OpTag.ADD)
def sub(x, y): return _binary(x, y, lambda a, b: a - b, OpTag.SUB)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, OpTag.MUL)


def div(x, y):
    """
    Division. A divisor whose current value is exactly 0.0 raises
    DivisionByZeroError and records nothing.
    """
    x = _as_gv(x)
    y = _as_gv(y)
    if y.node.value == 0.0:
        logger.debug("div: zero divisor, numerator=%r", x.value)
        raise DivisionByZeroError(x.value)
    return _binary(x, y, lambda a, b: a / b, OpTag.DIV)


def neg(x):
    x = _as_gv(x)
    return _record(OpTag.NEG, -x.node.value, x)


def pow(x, y):
    """
    Power with a differentiable exponent:
      out.value = x.value ** y.value

    Local partials (applied in the backward pass):
      d/dx = y * x^(y-1)
      d/dy = x^y * ln(x)     (NaN for x <= 0, see EngineConfig.nonfinite)
    """
    return _binary(x, y, np.power, OpTag.POW)


def pow_scalar(x, exponent):
    """x ** exponent where exponent is a plain number, wrapped as a leaf."""
    if isinstance(exponent, GradVal):
        raise TypeError("pow_scalar expects a plain number; use pow() for GradVal exponents")
    return pow(x, GradVal(exponent))
