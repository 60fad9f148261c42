from typing import Callable, Dict, List, Tuple
from .base import IShippingStrategy
from .standard import StandardShipping
from .express import ExpressShipping
from .international import InternationalShipping
from .night import NightShipping

# menu id -> (label, factory)
STRATEGIES: Dict[str, Tuple[str, Callable[[], IShippingStrategy]]] = {
    "1": ("Standard", StandardShipping),
    "2": ("Express", ExpressShipping),
    "3": ("International", InternationalShipping),
    "4": ("Night (new)", NightShipping),
}


def create(variant_id: str) -> IShippingStrategy:
    """Build a fresh strategy for a menu id. Raises KeyError for unknown ids."""
    _, factory = STRATEGIES[variant_id.strip()]
    return factory()


def label(variant_id: str) -> str:
    return STRATEGIES[variant_id.strip()][0]


def describe() -> List[Tuple[str, str]]:
    return [(key, lbl) for key, (lbl, _) in STRATEGIES.items()]
