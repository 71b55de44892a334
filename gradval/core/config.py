# gradval/core/config.py
"""
Engine configuration.

A single module-level `engine_config` is read by the operators and the
backward engine. Use `use_config(...)` to switch settings for a block:

    with use_config(nonfinite="raise"):
        y = x.log()          # raises NonFiniteError if x <= 0
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace

import numpy as np

NONFINITE_POLICIES = ("propagate", "raise")


@dataclass(frozen=True)
class EngineConfig:
    """
    Attributes
    ----------
    nonfinite : str
        "propagate" lets NaN/inf flow through values and gradients (IEEE
        semantics). "raise" turns any non-finite value or gradient
        contribution into a NonFiniteError.
    fd_step : float
        Default bump size for the centered finite-difference checker.
    fd_tolerance : float
        Default relative tolerance for the finite-difference checker.
    """
    nonfinite: str = "propagate"
    fd_step: float = 1e-2
    fd_tolerance: float = 1e-3

    def __post_init__(self):
        if self.nonfinite not in NONFINITE_POLICIES:
            raise ValueError(
                f"nonfinite must be one of {NONFINITE_POLICIES}, got {self.nonfinite!r}"
            )
        if not self.fd_step > 0:
            raise ValueError(f"fd_step must be positive, got {self.fd_step!r}")
        if not self.fd_tolerance > 0:
            raise ValueError(f"fd_tolerance must be positive, got {self.fd_tolerance!r}")


engine_config = EngineConfig()


def get_config() -> EngineConfig:
    """Return the active configuration."""
    return engine_config


@contextmanager
def use_config(**overrides):
    """
    Temporarily override fields of the active configuration:
        with use_config(nonfinite="raise"):
            ...
    """
    global engine_config
    known = {f.name for f in fields(EngineConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"unknown config option(s): {sorted(unknown)}")
    prev = engine_config
    try:
        engine_config = replace(prev, **overrides)
        yield engine_config
    finally:
        engine_config = prev


def float32_errstate():
    """numpy error state used for all engine arithmetic: never warn, never raise."""
    return np.errstate(all="ignore")
