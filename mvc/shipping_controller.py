from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Callable, Optional
from absl import logging as absl_logging
from shipping import catalog
from shipping.context import DeliveryContext, StrategyNotSetError

MENU = """
Choose an action:
1 - Choose shipping strategy
2 - Calculate cost with current strategy
3 - Show available strategies
0 - Exit"""

COST_PLACES = Decimal("0.01")
# largest amount the console accepts (28-digit money range)
MAX_AMOUNT = Decimal("79228162514264337593543950335")


def parse_amount(raw: str) -> Optional[Decimal]:
    """Parse a plain non-negative decimal; None when the text is not one."""
    text = raw.strip().replace(",", ".")
    if "e" in text.lower():
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite() or value < 0 or value > MAX_AMOUNT:
        return None
    return value


class ShippingController:
    """Console loop around a DeliveryContext."""
    def __init__(self,
                 context: DeliveryContext,
                 read: Callable[[str], str] = input) -> None:
        self.context = context
        self.read = read

    def run(self) -> None:
        print(" Shipping cost calculator ")
        while True:
            print(MENU)
            try:
                choice = self.read("Your choice: ").strip()
            except EOFError:
                break
            if choice == "0":
                break
            try:
                self.dispatch(choice)
            except EOFError:
                break
        print("Exiting.")

    def dispatch(self, choice: str) -> None:
        absl_logging.debug("Shipping command %r", choice)
        if choice == "1":
            self.choose_strategy()
        elif choice == "2":
            self.calculate()
        elif choice == "3":
            self.show_strategies()
        else:
            print("Invalid choice, try again.")

    def show_strategies(self) -> None:
        print("\nAvailable strategies:")
        for key, label in catalog.describe():
            print(f"{key} - {label}")

    def choose_strategy(self) -> None:
        self.show_strategies()
        choice = self.read("Strategy number: ").strip()
        try:
            strategy = catalog.create(choice)
        except KeyError:
            print("Invalid strategy choice.")
            return
        self.context.set_strategy(strategy)
        print(f"Strategy set: {catalog.label(choice)}")

    def calculate(self) -> None:
        weight = parse_amount(self.read("Parcel weight (kg): "))
        if weight is None:
            print("Error: weight must be a number >= 0.")
            return
        distance = parse_amount(self.read("Delivery distance (km): "))
        if distance is None:
            print("Error: distance must be a number >= 0.")
            return
        try:
            cost = self.context.calculate_cost(weight, distance)
            shown = cost.quantize(COST_PLACES, rounding=ROUND_HALF_UP)
        except StrategyNotSetError as e:
            print(f"Error: {e}")
            return
        except Exception as e:
            absl_logging.exception("Cost calculation failed")
            print(f"Unexpected error: {e}")
            return
        print(f"Shipping cost: {shown}")
