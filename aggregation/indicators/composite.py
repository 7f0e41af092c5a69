"""Binary arithmetic combinators over two indicators."""

import operator
from typing import Callable, Dict, Optional, Union

from shared.schemas.models import IndicatorDataPoint, Number
from shared.utils.errors import ConfigurationError

from .base import ConstantIndicator, IndicatorBase


def _safe_divide(left: float, right: float) -> float:
    # a zero denominator yields zero rather than raising mid-stream
    if right == 0:
        return 0.0
    return left / right


OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "plus": operator.add,
    "minus": operator.sub,
    "times": operator.mul,
    "over": _safe_divide,
}

SYMBOLS = {"plus": "+", "minus": "-", "times": "*", "over": "/"}


class CompositeIndicator(IndicatorBase):
    """Indicator whose value is ``composer(left.value, right.value)``.

    On each update the sample is first forwarded to both operands, so the
    recomputation always sees operand values for the same sample. Operands
    already updated with that sample by their owner are not fed twice.
    """

    def __init__(
        self,
        name: str,
        left: IndicatorBase,
        right: IndicatorBase,
        composer: Callable[[float, float], float],
    ):
        super().__init__(name)
        self.left = left
        self.right = right
        self.composer = composer

    @classmethod
    def combine(
        cls,
        left: IndicatorBase,
        right: Union[IndicatorBase, Number],
        op: str,
        name: Optional[str] = None,
    ) -> "CompositeIndicator":
        """Build a combinator for one of the named operators."""
        if op not in OPERATORS:
            raise ConfigurationError(f"Unknown operator: {op}", config_key="operator", config_value=op)
        if not isinstance(right, IndicatorBase):
            right = ConstantIndicator(str(right), right)
        name = name or f"{left.name}{SYMBOLS[op]}{right.name}"
        return cls(name, left, right, OPERATORS[op])

    def compute_next_value(self, sample: IndicatorDataPoint) -> float:
        self.left.update(sample)
        self.right.update(sample)
        return self.composer(self.left.value, self.right.value)

    def _check_ready(self) -> bool:
        return self.left.is_ready and self.right.is_ready

    def reset(self) -> None:
        super().reset()
        self.left.reset()
        self.right.reset()
