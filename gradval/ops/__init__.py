# gradval/ops/__init__.py

# Convenience re-exports so users can do: from gradval.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg, pow, pow_scalar
from .transcendental import exp, log, sqrt

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow", "pow_scalar",
    "exp", "log", "sqrt",
]
