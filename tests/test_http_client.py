from __future__ import annotations

import pytest
import requests

from gplaces.http_client import HttpClient


class FakeResponse:
    def __init__(self, body, status_code=200):
        self.body = body
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.body


def test_get_json_sends_ordered_pairs(monkeypatch):
    seen = {}

    def fake_get(url, params, timeout):
        seen.update(url=url, params=params, timeout=timeout)
        return FakeResponse({"status": "OK"})

    monkeypatch.setattr("gplaces.http_client.requests.get", fake_get)

    body = HttpClient(timeout_sec=5).get_json("https://example.test/json", [("key", "k"), ("strictbounds", "")])

    assert body == {"status": "OK"}
    assert seen == {
        "url": "https://example.test/json",
        "params": [("key", "k"), ("strictbounds", "")],
        "timeout": 5,
    }


def test_get_json_raises_http_errors(monkeypatch):
    monkeypatch.setattr("gplaces.http_client.requests.get", lambda url, params, timeout: FakeResponse({}, 500))
    with pytest.raises(requests.HTTPError):
        HttpClient(timeout_sec=5).get_json("https://example.test/json", [])


def test_get_json_paces_requests(monkeypatch):
    slept = []
    monkeypatch.setattr("gplaces.http_client.requests.get", lambda url, params, timeout: FakeResponse({}))
    monkeypatch.setattr("gplaces.http_client.time.sleep", slept.append)

    HttpClient(timeout_sec=5, sleep_sec=0.25).get_json("https://example.test/json", [])

    assert slept == [0.25]
