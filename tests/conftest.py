import pytest
import requests

from config import Settings


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def weather_payload(temp=0.0, wind=0.0, snow=None, name="Shimla"):
    payload = {
        "cod": 200,
        "name": name,
        "main": {"temp": temp, "humidity": 80, "feels_like": temp - 2},
        "wind": {"speed": wind},
        "weather": [{"main": "Snow" if snow else "Clouds"}],
    }
    if snow is not None:
        payload["snow"] = {"1h": snow}
    return payload


@pytest.fixture
def settings(tmp_path):
    return Settings(weather_api_key="test-key", favorites_path=str(tmp_path / "favorites.json"))


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get; set .response (or .error) before calling the code under test."""

    class Recorder:
        response = FakeResponse(weather_payload())
        error = None
        calls = []

        def __call__(self, url, params=None, timeout=None):
            self.calls.append({"url": url, "params": params, "timeout": timeout})
            if self.error:
                raise self.error
            return self.response

    recorder = Recorder()
    recorder.calls = []
    monkeypatch.setattr(requests, "get", recorder)
    return recorder
