from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Union

Number = Union[int, float, str, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal; floats go through str so 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


class IShippingStrategy(ABC):
    name: str

    @abstractmethod
    def calculate(self, weight: Decimal, distance: Decimal) -> Decimal:
        """Return the shipping cost for the given weight (kg) and distance (km)."""
