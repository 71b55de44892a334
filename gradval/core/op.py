# gradval/core/op.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, TYPE_CHECKING

from .formatting import sci

if TYPE_CHECKING:
    from .node import Node


class OpTag(Enum):
    """
    Closed set of operations a Node can originate from.
    Each member carries (display symbol, number of operands).
    """
    NOOP = ("NOOP", 0)
    NEG = ("-", 1)
    EXP = ("exp", 1)
    LOG = ("log", 1)
    POW = ("^", 2)
    ADD = ("+", 2)
    SUB = ("-", 2)
    MUL = ("*", 2)
    DIV = ("/", 2)

    def __init__(self, symbol: str, arity: int):
        self.symbol = symbol
        self.arity = arity

    @property
    def is_unary(self) -> bool:
        return self.arity == 1

    @property
    def is_binary(self) -> bool:
        return self.arity == 2


@dataclass(frozen=True, eq=False)
class Operation:
    """
    How a Node was produced.

    Attributes
    ----------
    tag      : OpTag
        Which operation.
    operands : tuple of Node
        Shared references to the antecedent Nodes, in operand order
        (`a` first, then `b`). The same Node may appear twice, e.g. x * x.
    """
    tag: OpTag
    operands: Tuple["Node", ...] = ()

    def __post_init__(self):
        if len(self.operands) != self.tag.arity:
            raise ValueError(
                f"{self.tag.name} takes {self.tag.arity} operand(s), got {len(self.operands)}"
            )

    def __str__(self):
        if self.tag is OpTag.NOOP:
            return self.tag.symbol
        args = ", ".join(sci(p.value) for p in self.operands)
        return f"{self.tag.symbol}({args})"


NOOP = Operation(OpTag.NOOP)
