# weather_app.py
from absl import logging as absl_logging
from mvc.model import WeatherStation
from mvc.view import EmailAlert, WeatherDisplay
from mvc.weather_controller import WeatherController

LOG_VERBOSITY = absl_logging.WARNING

SEED_DISPLAYS = ("Mobile app", "Billboard")
SEED_EMAIL = ("Email alert", "user@example.com")


def build_station() -> WeatherStation:
    # Model
    station = WeatherStation()

    # Views (Observers)
    for name in SEED_DISPLAYS:
        station.attach(WeatherDisplay(name))
    station.attach(EmailAlert(*SEED_EMAIL))
    return station


def main():
    absl_logging.set_verbosity(LOG_VERBOSITY)
    WeatherController(build_station()).run()


if __name__ == "__main__":
    main()
