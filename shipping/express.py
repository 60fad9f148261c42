from decimal import Decimal
from .base import IShippingStrategy

class ExpressShipping(IShippingStrategy):
    name = "Express shipping"

    def calculate(self, weight: Decimal, distance: Decimal) -> Decimal:
        return (weight * Decimal("0.75") + distance * Decimal("0.2")) + Decimal("10")
