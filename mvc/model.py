from typing import List, Optional
from absl import logging as absl_logging
from notifier.observer import ISubject, IObserver

MIN_SANE_TEMPERATURE = -100.0
MAX_SANE_TEMPERATURE = 100.0


class WeatherStation(ISubject):
    """Observable model holding the current temperature."""
    def __init__(self, temperature: float = 0.0):
        self._temperature = temperature
        self._observers: List[IObserver] = []

    def _index(self, observer: IObserver) -> int:
        # identity, not equality
        for i, obs in enumerate(self._observers):
            if obs is observer:
                return i
        return -1

    def attach(self, observer: IObserver) -> bool:
        if self._index(observer) >= 0:
            print(f"Observer '{observer.name}' is already registered.")
            return False
        self._observers.append(observer)
        print(f"Observer '{observer.name}' added.")
        return True

    def detach(self, observer: IObserver) -> bool:
        i = self._index(observer)
        if i < 0:
            print(f"Error: observer '{observer.name}' not found.")
            return False
        del self._observers[i]
        print(f"Observer '{observer.name}' removed.")
        return True

    def find_by_name(self, name: str) -> Optional[IObserver]:
        wanted = name.casefold()
        for obs in self._observers:
            if obs.name.casefold() == wanted:
                return obs
        return None

    def notify(self) -> None:
        for obs in list(self._observers):
            try:
                obs.update(self._temperature)
            except Exception as e:
                print(f"Error while notifying '{obs.name}': {e}")
                absl_logging.warning("Observer %r failed: %s", obs.name, e)

    def set(self, temperature: float) -> None:
        if temperature < MIN_SANE_TEMPERATURE or temperature > MAX_SANE_TEMPERATURE:
            print("Warning: unusual temperature value entered.")
        self._temperature = temperature
        print(f"\n[WeatherStation] Temperature set to {temperature}°C. Notifying observers...")
        absl_logging.debug("Notifying %d observers", len(self._observers))
        self.notify()

    def get(self) -> float:
        return self._temperature

    def observer_names(self) -> List[str]:
        return [obs.name for obs in self._observers]

    def list_observers(self) -> List[str]:
        """Print registered observers 1-indexed and return their names."""
        names = self.observer_names()
        print("\nRegistered observers:")
        if not names:
            print("  (none)")
        for i, name in enumerate(names, start=1):
            print(f"  {i}. {name}")
        return names
