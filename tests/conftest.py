from __future__ import annotations

import random
from datetime import datetime, timezone
from pathlib import Path

import pytest

from lottery_api import create_app
from lottery_api.errors import TransportError
from lottery_api.services.extractor import LotteryExtractor
from lottery_api.services.lottery_service import LotteryService
from lottery_api.services.result_cache import ResultCache

FIXTURES = Path(__file__).parent / "fixtures"

# Friday afternoon in UTC.
NOW = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)

PRIMARY_URL = "https://primary.example/sa_powerball"
FALLBACK_URL = "https://fallback.example/sa_powerball"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakeClock:
    """Monotonic clock under test control."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeResponse:
    """Streamed response stand-in; each body chunk can advance a fake clock."""

    def __init__(
        self,
        status_code: int = 200,
        text: str = "",
        headers: dict | None = None,
        chunks: list[bytes] | None = None,
        clock: FakeClock | None = None,
        seconds_per_chunk: float = 0.0,
    ) -> None:
        self.status_code = status_code
        self.headers = headers or {}
        self.encoding = "utf-8"
        self.chunks = chunks if chunks is not None else [text.encode("utf-8")]
        self.clock = clock
        self.seconds_per_chunk = seconds_per_chunk
        self.read: list[bytes] = []
        self.closed = False

    def iter_content(self, chunk_size: int = 1):  # type: ignore[no-untyped-def]
        for chunk in self.chunks:
            if self.clock is not None:
                self.clock.advance(self.seconds_per_chunk)
            self.read.append(chunk)
            yield chunk

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """Replays queued responses (or exceptions) and records each GET."""

    def __init__(self, *results) -> None:  # type: ignore[no-untyped-def]
        self.results = list(results)
        self.calls: list[dict] = []

    def get(self, url, timeout=None, allow_redirects=True, stream=False):  # type: ignore[no-untyped-def]
        self.calls.append({"url": url, "timeout": timeout, "allow_redirects": allow_redirects, "stream": stream})
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class FakeFetchClient:
    """Stands in for FetchClient: url -> document text or exception to raise."""

    def __init__(self, responses: dict[str, str | Exception] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[str] = []

    def fetch(self, url: str, timeout: float | None = None) -> str:
        self.calls.append(url)
        result = self.responses.get(url)
        if result is None:
            raise TransportError(url, "connection refused")
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def extractor() -> LotteryExtractor:
    return LotteryExtractor(rng=random.Random(1234))


@pytest.fixture
def primary_html() -> str:
    return load_fixture("sa_powerball_primary.html")


@pytest.fixture
def fallback_html() -> str:
    return load_fixture("sa_powerball_fallback.html")


@pytest.fixture
def fetch_client() -> FakeFetchClient:
    return FakeFetchClient()


@pytest.fixture
def cache(clock: FakeClock) -> ResultCache:
    return ResultCache(max_age_seconds=300, clock=clock)


@pytest.fixture
def service(cache: ResultCache, fetch_client: FakeFetchClient, extractor: LotteryExtractor) -> LotteryService:
    return LotteryService(
        cache=cache,
        fetch_client=fetch_client,  # type: ignore[arg-type]
        extractor=extractor,
        primary_urls={"sa_powerball": PRIMARY_URL},
        fallback_urls={"sa_powerball": FALLBACK_URL, "euro_jackpot": "https://fallback.example/euro_jackpot"},
        clock=lambda: NOW,
    )


@pytest.fixture
def app(service: LotteryService):
    app = create_app({"TESTING": True, "LOTTERY_SERVICE": service})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
