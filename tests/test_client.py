import pytest
import requests

from admin_dashboard.client import AdminClient
from admin_dashboard.errors import NetworkFailure


class FakeResponse:
    def __init__(self, status_code=200, payload=None, json_error=None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def test_get_admin_dashboard_sends_token_and_decodes():
    body = {"dashboarDetails": {"usersCount": 3}}
    session = FakeSession(FakeResponse(200, body))
    client = AdminClient("https://api.example.test/", timeout_sec=7, session=session)

    status, payload = client.get_admin_dashboard("secret-token")

    assert (status, payload) == (200, body)
    assert session.calls == [
        {
            "url": "https://api.example.test/admin/dashboard",
            "headers": {"Authorization": "secret-token"},
            "timeout": 7,
        }
    ]


def test_get_admin_dashboard_custom_path_and_timeout():
    session = FakeSession(FakeResponse(200, {}))
    client = AdminClient("https://api.example.test", dashboard_path="api/stats", session=session)

    client.get_admin_dashboard("t", timeout=3)

    assert session.calls[0]["url"] == "https://api.example.test/api/stats"
    assert session.calls[0]["timeout"] == 3


def test_get_admin_dashboard_without_token_omits_header(caplog):
    session = FakeSession(FakeResponse(200, {}))
    client = AdminClient("https://api.example.test", session=session)

    client.get_admin_dashboard(None)

    assert session.calls[0]["headers"] == {}
    assert "No credential token" in caplog.text


def test_get_admin_dashboard_non_200_returns_status_without_body():
    session = FakeSession(FakeResponse(503, json_error=ValueError("not json")))
    client = AdminClient("https://api.example.test", session=session)

    assert client.get_admin_dashboard("t") == (503, None)


def test_get_admin_dashboard_transport_error():
    session = FakeSession(error=requests.ConnectionError("refused"))
    client = AdminClient("https://api.example.test", session=session)

    with pytest.raises(NetworkFailure, match="refused"):
        client.get_admin_dashboard("t")


def test_get_admin_dashboard_timeout_is_network_failure():
    session = FakeSession(error=requests.Timeout("slow"))
    client = AdminClient("https://api.example.test", session=session)

    with pytest.raises(NetworkFailure):
        client.get_admin_dashboard("t")


def test_get_admin_dashboard_invalid_json():
    session = FakeSession(FakeResponse(200, json_error=ValueError("bad json")))
    client = AdminClient("https://api.example.test", session=session)

    with pytest.raises(NetworkFailure) as excinfo:
        client.get_admin_dashboard("t")

    assert excinfo.value.status == 200


def test_client_creates_session_when_missing(monkeypatch):
    sentinel = object()
    monkeypatch.setattr("admin_dashboard.client.requests.Session", lambda: sentinel)

    client = AdminClient("https://api.example.test")

    assert client.session is sentinel
