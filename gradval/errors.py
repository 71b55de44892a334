# gradval/errors.py
"""Exceptions raised by the gradval engine."""


class GradValError(Exception):
    """Base class for every error raised by gradval."""


class DivisionByZeroError(GradValError, ZeroDivisionError):
    """
    Raised by `div` when the divisor's current value is exactly 0.0.

    This is a contract violation rather than an expected runtime case:
    callers must guard before dividing. No graph node is created.
    """

    def __init__(self, numerator):
        self.numerator = numerator
        super().__init__(f"division by zero (numerator {numerator!r})")


class NonFiniteError(GradValError, FloatingPointError):
    """
    Raised when a value or gradient becomes NaN/inf and the engine runs
    with `nonfinite="raise"`.
    """

    def __init__(self, op_tag: str, where: str, result):
        self.op_tag = op_tag
        self.where = where
        self.result = result
        super().__init__(f"non-finite {where} in {op_tag}: {result!r}")
