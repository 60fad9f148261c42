# notifier/observer.py
from abc import ABC, abstractmethod


class IObserver(ABC):
    name: str

    @abstractmethod
    def update(self, temperature: float) -> None:
        """Called when the subject (WeatherStation) has a new temperature."""
        ...


class ISubject(ABC):
    @abstractmethod
    def attach(self, observer: IObserver) -> bool: ...
    @abstractmethod
    def detach(self, observer: IObserver) -> bool: ...
    @abstractmethod
    def notify(self) -> None: ...
