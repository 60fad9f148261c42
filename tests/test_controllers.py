from decimal import Decimal
from mvc.model import WeatherStation
from mvc.shipping_controller import ShippingController, parse_amount
from mvc.view import WeatherDisplay
from mvc.weather_controller import WeatherController
from shipping.context import DeliveryContext
from shipping.night import NightShipping
import weather_app


def scripted(*lines):
    """Line source that raises EOFError when exhausted, like input()."""
    it = iter(lines)

    def read(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


def test_weather_add_set_and_remove_by_name(capsys):
    station = WeatherStation()
    WeatherController(station, scripted(
        "2", "1", "Lobby",
        "2", "2", "Email-1", "ops@example.com",
        "1", "22",
        "3", "LOBBY",
        "0",
    )).run()
    assert station.observer_names() == ["Email-1"]
    out = capsys.readouterr().out
    assert "Lobby shows temperature: 22.0°C" in out
    assert "ops@example.com" in out
    assert "Observer 'Lobby' removed." in out


def test_weather_remove_unknown_name(capsys):
    station = WeatherStation()
    station.attach(WeatherDisplay("Lobby"))
    WeatherController(station, scripted("3", "Nope")).run()
    assert station.observer_names() == ["Lobby"]
    assert "Observer named 'Nope' not found." in capsys.readouterr().out


def test_weather_test_alarm_registers_once(capsys):
    station = WeatherStation()
    WeatherController(station, scripted("5", "5", "1", "36")).run()
    assert station.observer_names() == ["Sound alarm"]
    out = capsys.readouterr().out
    assert "already registered" in out
    assert "sound alarm ON" in out


def test_weather_bad_input_keeps_looping(capsys):
    station = WeatherStation()
    WeatherController(station, scripted("1", "hot", "9", "2", "7", "4")).run()
    out = capsys.readouterr().out
    assert "invalid temperature" in out
    assert "Invalid choice." in out
    assert "Invalid observer type." in out
    assert "(none)" in out


def test_weather_app_seeds_three_observers():
    station = weather_app.build_station()
    assert station.observer_names() == ["Mobile app", "Billboard", "Email alert"]


def test_shipping_calculate_without_strategy(capsys):
    ShippingController(DeliveryContext(), scripted("2", "1", "1", "0")).run()
    assert "Error: Shipping strategy is not set." in capsys.readouterr().out


def test_shipping_choose_and_calculate(capsys):
    ctx = DeliveryContext()
    ShippingController(ctx, scripted("1", "4", "2", "10", "20")).run()
    assert isinstance(ctx.strategy, NightShipping)
    out = capsys.readouterr().out
    assert "Strategy set: Night (new)" in out
    assert "Shipping cost: 14.50" in out


def test_shipping_rejects_negative_and_garbage(capsys):
    ctx = DeliveryContext()
    ShippingController(ctx, scripted("1", "7", "2", "-1", "2", "5", "far")).run()
    assert ctx.strategy is None
    out = capsys.readouterr().out
    assert "Invalid strategy choice." in out
    assert "weight must be a number >= 0" in out
    assert "distance must be a number >= 0" in out


def test_parse_amount():
    assert parse_amount(" 2,5 ") == Decimal("2.5")
    assert parse_amount("0") == Decimal("0")
    assert parse_amount("-0.1") is None
    assert parse_amount("nan") is None
    assert parse_amount("") is None


def test_shipping_huge_amounts_do_not_stop_loop(capsys):
    ctx = DeliveryContext()
    ShippingController(ctx, scripted(
        "1", "3",
        "2", "1e30",
        "2", "79228162514264337593543950335", "79228162514264337593543950335",
        "3", "0",
    )).run()
    out = capsys.readouterr().out
    assert "Error: weight must be a number >= 0." in out
    assert "Unexpected error" in out
    assert "Available strategies:" in out
    assert out.rstrip().endswith("Exiting.")


def test_shipping_cost_midpoint_rounds_away_from_zero(capsys):
    ShippingController(DeliveryContext(), scripted("1", "1", "2", "0.01", "0")).run()
    assert "Shipping cost: 0.01" in capsys.readouterr().out


def test_parse_amount_rejects_exponent_and_out_of_range():
    assert parse_amount("1e30") is None
    assert parse_amount("1E2") is None
    assert parse_amount("79228162514264337593543950336") is None
    assert parse_amount("79228162514264337593543950335") == Decimal("79228162514264337593543950335")
