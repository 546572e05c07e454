"""Core enums used throughout quantstream."""

from __future__ import annotations

from enum import Enum


# ─── Moving Averages ───────────────────────────────────────────────────────────


class MovingAverageType(str, Enum):
    """Moving-average variants selectable for a band's middle line."""

    SIMPLE = "SIMPLE"
    EXPONENTIAL = "EXPONENTIAL"
    WILDERS = "WILDERS"
    LINEAR_WEIGHTED = "LINEAR_WEIGHTED"


# ─── Composition ───────────────────────────────────────────────────────────────


class ArithmeticOperator(str, Enum):
    """Binary operator applied by an arithmetic combinator."""

    ADD = "ADD"
    SUBTRACT = "SUBTRACT"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"

    @property
    def symbol(self) -> str:
        return _OPERATOR_SYMBOLS[self]


_OPERATOR_SYMBOLS: dict[ArithmeticOperator, str] = {
    ArithmeticOperator.ADD: "+",
    ArithmeticOperator.SUBTRACT: "-",
    ArithmeticOperator.MULTIPLY: "*",
    ArithmeticOperator.DIVIDE: "/",
}
