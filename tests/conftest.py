import pytest

import wait_http as wh


class FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code


class FakeClock:
    """Stands in for the time module: sleep() advances time() instead of blocking."""

    def __init__(self, start=1000.0):
        self.now = start
        self.sleeps = []

    def time(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock(monkeypatch):
    c = FakeClock()
    monkeypatch.setattr(wh, "time", c)
    return c


@pytest.fixture
def probe(monkeypatch):
    """Script the outcome of each requests.get call.

    Items are status codes or exception instances; the last item repeats.
    """
    calls = []

    def install(*outcomes):
        outcomes = list(outcomes)

        def fake_get(url, timeout=None):
            calls.append(url)
            item = outcomes.pop(0) if len(outcomes) > 1 else outcomes[0]
            if isinstance(item, Exception):
                raise item
            return FakeResponse(item)

        monkeypatch.setattr(wh.requests, "get", fake_get)
        return calls

    return install
