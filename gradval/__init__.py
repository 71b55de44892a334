# gradval/__init__.py
# Scalar reverse-mode automatic differentiation

import logging

from .core.var import GradVal
from .core.node import Node
from .core.op import Operation, OpTag
from .core.config import EngineConfig, engine_config, get_config, use_config
from .core.engine import (
    backward,
    reset_grads,
    accumulate,
)
from .core.seeds import value, grad, grads, grads_list
from .core.graph_utils import get_graph_stats, print_graph_summary, print_computation_graph
from .ops import add, sub, mul, div, neg, pow, pow_scalar, exp, log, sqrt
from .errors import GradValError, DivisionByZeroError, NonFiniteError

# Finite-difference checker
from . import bumping
from .bumping import GradientCheckResult, central_difference, check_gradients

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core
    'GradVal',
    'Node',
    'Operation',
    'OpTag',
    # Config
    'EngineConfig',
    'engine_config',
    'get_config',
    'use_config',
    # Engine
    'backward',
    'reset_grads',
    'accumulate',
    # Helpers
    'value',
    'grad',
    'grads',
    'grads_list',
    # Operators
    'add', 'sub', 'mul', 'div', 'neg', 'pow', 'pow_scalar',
    'exp', 'log', 'sqrt',
    # Graph utilities
    'get_graph_stats',
    'print_graph_summary',
    'print_computation_graph',
    # Errors
    'GradValError',
    'DivisionByZeroError',
    'NonFiniteError',
    # Bumping
    'bumping',
    'GradientCheckResult',
    'central_difference',
    'check_gradients',
]
