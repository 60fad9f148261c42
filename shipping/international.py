from decimal import Decimal
from .base import IShippingStrategy

class InternationalShipping(IShippingStrategy):
    name = "International shipping"

    def calculate(self, weight: Decimal, distance: Decimal) -> Decimal:
        return weight * Decimal("1.0") + distance * Decimal("0.5") + Decimal("15")
