from decimal import Decimal
from typing import Optional
from absl import logging as absl_logging
from .base import IShippingStrategy, Number, to_decimal


class StrategyNotSetError(RuntimeError):
    """Raised when a cost is requested before any strategy was selected."""


class DeliveryContext:
    """
    Holds the selected shipping strategy (or none) and delegates to it.
    No rounding happens here; presentation is the caller's job.
    """
    def __init__(self, strategy: Optional[IShippingStrategy] = None) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[IShippingStrategy]:
        return self._strategy

    def set_strategy(self, strategy: IShippingStrategy) -> None:
        absl_logging.debug("Shipping strategy -> %s", strategy.name)
        self._strategy = strategy

    def calculate_cost(self, weight: Number, distance: Number) -> Decimal:
        if self._strategy is None:
            raise StrategyNotSetError("Shipping strategy is not set.")
        return self._strategy.calculate(to_decimal(weight), to_decimal(distance))
