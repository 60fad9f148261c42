from typing import Callable, Optional
from absl import logging as absl_logging
from mvc.model import WeatherStation
from mvc.view import EmailAlert, SoundAlarm, WeatherDisplay

MENU = """
Choose an action:
1 - Set temperature (notify everyone)
2 - Add observer
3 - Remove observer
4 - List observers
5 - Register test alarm
0 - Exit"""


class WeatherController:
    """
    Controller:
      - reads commands from a line source (input() by default)
      - adds / removes observers on the station
      - pushes new temperatures into the Model
    Returns from run() on "0" or end of input.
    """
    def __init__(self,
                 station: WeatherStation,
                 read: Callable[[str], str] = input,
                 test_alarm: Optional[SoundAlarm] = None) -> None:
        self.station = station
        self.read = read
        self.test_alarm = test_alarm or SoundAlarm("Sound alarm")

    def run(self) -> None:
        print(" Weather monitoring system ")
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
        absl_logging.debug("Weather command %r", choice)
        if choice == "1":
            self._set_temperature()
        elif choice == "2":
            self._add_observer()
        elif choice == "3":
            self._remove_observer()
        elif choice == "4":
            self.station.list_observers()
        elif choice == "5":
            self.station.attach(self.test_alarm)
        else:
            print("Invalid choice.")

    def _set_temperature(self) -> None:
        raw = self.read("Enter temperature (°C): ")
        try:
            temperature = float(raw.strip().replace(",", "."))
        except ValueError:
            print("Error: invalid temperature value.")
            return
        self.station.set(temperature)

    def _add_observer(self) -> None:
        print("Choose observer type: 1-Display, 2-Email, 3-Sound")
        kind = self.read("Type: ").strip()
        if kind == "1":
            self.station.attach(WeatherDisplay(self.read("Display name: ")))
        elif kind == "2":
            name = self.read("Name (e.g. Email-1): ")
            email = self.read("Email: ")
            self.station.attach(EmailAlert(name, email))
        elif kind == "3":
            self.station.attach(SoundAlarm(self.read("Alarm name: ")))
        else:
            print("Invalid observer type.")

    def _remove_observer(self) -> None:
        self.station.list_observers()
        name = self.read("Observer name to remove: ")
        found = self.station.find_by_name(name)
        if found is None:
            print(f"Observer named '{name}' not found.")
            return
        self.station.detach(found)
