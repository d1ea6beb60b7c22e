# orchestration tests use a fake client so they stay fast and never hit the network

import json
from pathlib import Path

import pytest
from weathercards.config import Settings
from weathercards.errors import CityNotFound, MalformedPayload, NotConfigured
from weathercards.service import forecast_all, forecast_for_city


def load_example():
    data_path = Path(__file__).parent / "data" / "example_city.json"
    return json.loads(data_path.read_text(encoding="utf-8"))


class FakeClient:
    # maps city -> payload, unknown cities behave like a 404
    def __init__(self, payloads):
        self.payloads = payloads
        self.calls = []

    def get_city_forecast(self, city):
        self.calls.append(city)
        if city not in self.payloads:
            raise CityNotFound(city)
        return self.payloads[city]


def test_forecast_for_city():
    client = FakeClient({"Lisbon": load_example()})
    forecast = forecast_for_city(client, "Lisbon", locale="en-GB")
    assert len(forecast.days) == 5
    assert forecast.days[0].date == "01/06/2025"
    assert client.calls == ["Lisbon"]


def test_forecast_for_city_propagates_errors():
    client = FakeClient({"Lisbon": {"cod": "200"}})
    with pytest.raises(MalformedPayload):
        forecast_for_city(client, "Lisbon")


def test_forecast_all_keeps_order_and_isolates_failures():
    client = FakeClient({"Lisbon": load_example(), "Porto": load_example()})
    results = forecast_all(["Porto", "Atlantis", "Lisbon"], Settings(api_key="k"), client=client)

    assert [r.city for r in results] == ["Porto", "Atlantis", "Lisbon"]
    assert [r.ok for r in results] == [True, False, True]
    assert isinstance(results[1].error, CityNotFound)
    assert results[1].forecast is None
    assert len(results[0].forecast.days) == 5


def test_forecast_all_uses_city_timezone_setting():
    client = FakeClient({"Lisbon": load_example()})
    results = forecast_all(["Lisbon"], Settings(api_key="k", timezone="city"), client=client, with_time=True)
    assert results[0].forecast.days[0].date == "01/06/2025 13:00"


def test_forecast_all_without_key(monkeypatch):
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    with pytest.raises(NotConfigured):
        forecast_all(["Lisbon"], Settings(api_key=None))


def test_forecast_all_reports_non_finite_payload_per_city():
    broken = load_example()
    broken["list"][4]["main"]["temp"] = float("inf")
    broken["list"][12]["dt"] = 10**20
    client = FakeClient({"Lisbon": broken, "Porto": load_example()})

    results = forecast_all(["Lisbon", "Porto"], Settings(api_key="k"), client=client)

    assert isinstance(results[0].error, MalformedPayload)
    assert results[0].forecast is None
    assert results[1].ok
    assert len(results[1].forecast.days) == 5
