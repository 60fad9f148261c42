from decimal import Decimal
from .base import IShippingStrategy

NIGHT_FEE = Decimal("7.5")

class NightShipping(IShippingStrategy):
    name = "Night shipping"

    def __init__(self, fee: Decimal = NIGHT_FEE) -> None:
        self.fee = fee

    def calculate(self, weight: Decimal, distance: Decimal) -> Decimal:
        base_cost = weight * Decimal("0.5") + distance * Decimal("0.1")
        return base_cost + self.fee
