"""Shared fixtures: a fake rate feed that never touches the network."""

import json
from typing import Any, Dict, List

import pytest
import requests

from fxcli.core.config import Settings
from fxcli.infra.feeds import rates_feed

SAMPLE_PAYLOAD: Dict[str, Any] = {
    "disclaimer": "Usage subject to terms",
    "license": "https://openexchangerates.org/license",
    "timestamp": 1700000000,
    "base": "USD",
    "rates": {"USD": 1.0, "CNY": 7.3290, "EUR": 0.9200},
}


def make_response(status: int = 200, body: Any = None, raw: bytes | None = None) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r.encoding = "utf-8"
    if raw is not None:
        r._content = raw
    else:
        r._content = json.dumps(body).encode("utf-8")
    return r


class FakeFeed:
    """Stands in for requests.get and records every call."""

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.response: requests.Response = make_response(body=SAMPLE_PAYLOAD)
        self.exc: Exception | None = None

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def fake_feed(monkeypatch) -> FakeFeed:
    feed = FakeFeed()
    monkeypatch.setattr(rates_feed.requests, "get", feed)
    return feed


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        OXR_APP_ID="test-app-id",
        OXR_API_URL="https://rates.example.test/api/latest.json",
        REQUEST_TIMEOUT=5,
    )
