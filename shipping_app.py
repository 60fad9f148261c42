# shipping_app.py
from absl import logging as absl_logging
from mvc.shipping_controller import ShippingController
from shipping.context import DeliveryContext

LOG_VERBOSITY = absl_logging.WARNING


def main():
    absl_logging.set_verbosity(LOG_VERBOSITY)
    # Context starts with no strategy; the user picks one from the menu
    ShippingController(DeliveryContext()).run()


if __name__ == "__main__":
    main()
