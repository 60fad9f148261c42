# mvc/view.py
from notifier.observer import IObserver

ALARM_THRESHOLD = 35.0


class WeatherDisplay(IObserver):
    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, temperature: float) -> None:
        print(f"{self.name} shows temperature: {temperature}°C")


class EmailAlert(IObserver):
    """Observer that simulates sending an email with the new temperature."""
    def __init__(self, name: str, email: str) -> None:
        self.name = name
        self.email = email

    def update(self, temperature: float) -> None:
        print(f"{self.name} ({self.email}): email notification sent. "
              f"Current temperature: {temperature}°C")


class SoundAlarm(IObserver):
    """Observer that sounds only above ALARM_THRESHOLD (strictly greater)."""
    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, temperature: float) -> bool:
        if temperature > ALARM_THRESHOLD:
            print(f"{self.name}: Warning! High temperature {temperature}°C - sound alarm ON!")
            return True
        print(f"{self.name}: Temperature {temperature}°C - sound alarm not needed.")
        return False
