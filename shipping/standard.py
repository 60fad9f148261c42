from decimal import Decimal
from .base import IShippingStrategy

class StandardShipping(IShippingStrategy):
    name = "Standard shipping"

    def calculate(self, weight: Decimal, distance: Decimal) -> Decimal:
        return weight * Decimal("0.5") + distance * Decimal("0.1")
