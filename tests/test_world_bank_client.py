import pytest
import requests

from common.errors import EmptyResultError, TransportError
from ingestion_api import RawPoint, WorldBankClient, fetch_indicator_series


class FakeResponse:
    def __init__(self, status_code=200, payload=None, invalid_json=False):
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class RecordingSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


ENVELOPE = [
    {"page": 1, "pages": 1, "per_page": 3, "total": 3},
    [
        {"indicator": {"id": "NY.GDP.MKTP.CD"}, "date": "2023", "value": 3.5e12},
        {"indicator": {"id": "NY.GDP.MKTP.CD"}, "date": "2022", "value": None},
        {"indicator": {"id": "NY.GDP.MKTP.CD"}, "date": "2021", "value": 3.1e12},
    ],
]


def test_fetch_builds_single_request_and_returns_raw_points():
    session = RecordingSession(FakeResponse(payload=ENVELOPE))
    client = WorldBankClient("https://api.example.org/v2/", timeout=7, session=session)

    points = client.fetch("IN", "NY.GDP.MKTP.CD", 10)

    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["url"] == "https://api.example.org/v2/country/IN/indicator/NY.GDP.MKTP.CD"
    assert call["params"] == {"format": "json", "per_page": 10}
    assert call["timeout"] == 7
    assert points == [
        RawPoint("2023", 3.5e12),
        RawPoint("2022", None),
        RawPoint("2021", 3.1e12),
    ]


def test_non_success_status_raises_transport_error():
    session = RecordingSession(FakeResponse(status_code=503))
    client = WorldBankClient(session=session)

    with pytest.raises(TransportError) as excinfo:
        client.fetch("US", "SP.POP.TOTL", 5)

    assert excinfo.value.status_code == 503
    assert "503" in str(excinfo.value)


def test_network_failure_is_wrapped():
    session = RecordingSession(error=requests.exceptions.ConnectionError("connection refused"))
    client = WorldBankClient(session=session)

    with pytest.raises(TransportError) as excinfo:
        client.fetch("US", "SP.POP.TOTL", 5)

    assert isinstance(excinfo.value.__cause__, requests.exceptions.ConnectionError)


def test_non_json_body_raises_transport_error():
    client = WorldBankClient(session=RecordingSession(FakeResponse(invalid_json=True)))

    with pytest.raises(TransportError):
        client.fetch("US", "SP.POP.TOTL", 5)


def test_non_list_body_raises_transport_error():
    client = WorldBankClient(session=RecordingSession(FakeResponse(payload={"error": "x"})))

    with pytest.raises(TransportError):
        client.fetch("US", "SP.POP.TOTL", 5)


@pytest.mark.parametrize(
    "payload",
    [
        [{"page": 1, "pages": 0, "total": 0}, []],
        [{"page": 1, "pages": 0, "total": 0}, None],
        [{"message": [{"id": "120", "key": "Invalid value", "value": "The provided parameter value is not valid"}]}],
    ],
)
def test_missing_or_empty_records_raise_empty_result(payload):
    client = WorldBankClient(session=RecordingSession(FakeResponse(payload=payload)))

    with pytest.raises(EmptyResultError):
        client.fetch("ZZ", "NY.GDP.MKTP.CD", 5)


def test_period_count_must_be_positive():
    client = WorldBankClient(session=RecordingSession(FakeResponse(payload=ENVELOPE)))

    with pytest.raises(ValueError):
        client.fetch("IN", "NY.GDP.MKTP.CD", 0)


def test_module_helper_delegates_to_client():
    session = RecordingSession(FakeResponse(payload=ENVELOPE))

    points = fetch_indicator_series("IN", "NY.GDP.MKTP.CD", 3, client=WorldBankClient(session=session))

    assert len(points) == 3
    assert session.calls[0]["url"].endswith("/country/IN/indicator/NY.GDP.MKTP.CD")
