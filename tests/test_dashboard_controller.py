import threading

import pytest

from common.errors import EmptyResultError
from dashboard import DashboardController, Selection
from ingestion_api import RawPoint
from settings import Settings

WAIT = 5


class GatedClient:
    """Returns canned points per country; fetches listed in ``gates`` block until released."""

    def __init__(self, payloads, gates=None):
        self.payloads = payloads
        self.gates = gates or {}
        self.calls = []
        self.started = threading.Event()

    def fetch(self, country_code, indicator_code, period_count):
        self.calls.append((country_code, indicator_code, period_count))
        gate = self.gates.get(country_code)
        if gate is not None:
            self.started.set()
            assert gate.wait(WAIT)
        result = self.payloads[country_code]
        if isinstance(result, Exception):
            raise result
        return result


class FirstCallBlocksClient:
    def __init__(self, points):
        self.points = points
        self.release = threading.Event()
        self.started = threading.Event()
        self.call_count = 0
        self._lock = threading.Lock()

    def fetch(self, country_code, indicator_code, period_count):
        with self._lock:
            self.call_count += 1
            call_number = self.call_count
        if call_number == 1:
            self.started.set()
            assert self.release.wait(WAIT)
            return [RawPoint("2020", 1.0)]
        return self.points


def test_late_result_of_superseded_selection_is_discarded():
    release_a = threading.Event()
    client = GatedClient(
        {
            "US": [RawPoint("2020", 1.0)],
            "CN": [RawPoint("2020", 2.0), RawPoint("2021", 3.0)],
        },
        gates={"US": release_a},
    )

    with DashboardController(client, Selection("IN", "GDP", 10)) as controller:
        future_a = controller.select(country_code="US")
        assert client.started.wait(WAIT)
        future_b = controller.select(country_code="CN")

        assert future_b.result(timeout=WAIT) is True
        release_a.set()
        assert future_a.result(timeout=WAIT) is False

        state = controller.state
        assert state.selection == Selection("CN", "GDP", 10)
        assert state.result.selection.country_code == "CN"
        assert [p.value for p in state.result.series] == [2.0, 3.0]
        assert state.loading is False
        assert state.error is None


def test_refresh_supersedes_in_flight_cycle_for_same_selection():
    client = FirstCallBlocksClient([RawPoint("2020", 5.0), RawPoint("2021", 6.0)])

    with DashboardController(client, Selection("IN", "POP", 5)) as controller:
        first = controller.refresh()
        assert client.started.wait(WAIT)
        second = controller.refresh()

        assert second.result(timeout=WAIT) is True
        client.release.set()
        assert first.result(timeout=WAIT) is False

        assert [p.value for p in controller.state.result.series] == [5.0, 6.0]
        assert controller.generation == 2


def test_pipeline_error_is_surfaced_in_state():
    client = GatedClient({"IN": EmptyResultError("No data available for selected parameters")})

    with DashboardController(client, Selection("IN", "GDP", 10)) as controller:
        assert controller.refresh().result(timeout=WAIT) is True

        state = controller.state
        assert state.error == "No data available for selected parameters"
        assert state.result is None
        assert state.loading is False


def test_error_clears_previous_result_and_success_clears_error():
    client = GatedClient({"IN": [RawPoint("2020", 1.0)], "JP": EmptyResultError("none")})

    with DashboardController(client, Selection("IN", "GDP", 10)) as controller:
        controller.refresh().result(timeout=WAIT)
        assert controller.state.result is not None
        assert controller.state.last_updated is not None

        controller.select(country_code="JP").result(timeout=WAIT)
        assert controller.state.result is None
        assert controller.state.error == "none"

        controller.select(country_code="IN").result(timeout=WAIT)
        assert controller.state.error is None
        assert controller.state.result.country.name == "India"


def test_unexpected_errors_are_recorded_and_reraised():
    client = GatedClient({"IN": RuntimeError("boom")})

    with DashboardController(client, Selection("IN", "GDP", 10)) as controller:
        future = controller.refresh()
        with pytest.raises(RuntimeError):
            future.result(timeout=WAIT)

        assert controller.state.error == "Unexpected error: boom"


def test_partial_selection_change_keeps_other_fields():
    client = GatedClient({"IN": [RawPoint("2020", 1.0)]})

    with DashboardController(client, Selection("IN", "GDP", 10)) as controller:
        controller.select(metric_id="POP", period_count=20).result(timeout=WAIT)

        assert controller.state.selection == Selection("IN", "POP", 20)
        assert client.calls[-1] == ("IN", "SP.POP.TOTL", 20)


def test_default_selection_comes_from_settings():
    client = GatedClient({})

    with DashboardController(client, settings=Settings(default_country="BR", default_metric="POP", default_period=5)) as controller:
        assert controller.state.selection == Selection("BR", "POP", 5)
        assert controller.state.loading is False
