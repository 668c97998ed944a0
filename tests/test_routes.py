from __future__ import annotations

from lottery_api import create_app
from lottery_api.services.lottery_service import LotteryService

from conftest import PRIMARY_URL, FakeFetchClient


def test_get_lottery_returns_record(client, fetch_client: FakeFetchClient, primary_html: str) -> None:
    fetch_client.responses[PRIMARY_URL] = primary_html

    resp = client.get("/api/lottery/sa_powerball")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["error"] is None
    assert body["data"]["winning_numbers"] == [7, 14, 22, 35, 41]
    assert body["data"]["bonus_number"] == 9
    assert body["meta"] == {"source": "primary", "synthetic": False}


def test_unsupported_lottery_is_404(client, fetch_client: FakeFetchClient) -> None:
    resp = client.get("/api/lottery/atlantis_lotto")

    assert resp.status_code == 404
    body = resp.get_json()
    assert body["success"] is False
    assert body["error"]["code"] == "not_supported"
    assert fetch_client.calls == []


def test_malformed_identifier_is_404(client, fetch_client: FakeFetchClient) -> None:
    resp = client.get("/api/lottery/SA-Lotto!")

    assert resp.status_code == 404
    assert fetch_client.calls == []


def test_both_sources_down_is_503(client) -> None:
    resp = client.get("/api/lottery/sa_powerball")

    assert resp.status_code == 503
    assert resp.get_json()["error"]["code"] == "unavailable"


def test_unexpected_fault_is_500() -> None:
    class BrokenService(LotteryService):
        def __init__(self) -> None:
            pass

        def get_record(self, identifier: str):  # type: ignore[no-untyped-def, override]
            raise RuntimeError("boom")

    app = create_app({"TESTING": True, "LOTTERY_SERVICE": BrokenService()})

    resp = app.test_client().get("/api/lottery/sa_lotto")

    assert resp.status_code == 500
    assert resp.get_json()["error"]["code"] == "internal_error"


def test_catalog_lists_supported_lotteries(client) -> None:
    resp = client.get("/api/lotteries")

    assert resp.status_code == 200
    entries = {e["identifier"]: e for e in resp.get_json()["data"]}
    assert entries["sa_powerball"]["name"] == "SA POWERBALL"
    assert entries["euro_jackpot"]["has_primary"] is False


def test_status_and_health(client) -> None:
    assert client.get("/health").get_json()["data"] == {"status": "ok"}
    assert client.get("/api/status").get_json()["data"]["status"] == "ok"


def test_api_allows_cross_origin_requests(client) -> None:
    resp = client.get("/api/status", headers={"Origin": "https://frontend.example"})

    # Older flask-cors answers a wildcard, newer releases echo the allowed origin.
    assert resp.headers.get("Access-Control-Allow-Origin") in {"*", "https://frontend.example"}


def test_index_page_lists_lotteries(client) -> None:
    resp = client.get("/")

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "sa_powerball" in html
    assert "/api/lottery/sa_powerball" in html


def test_unknown_route_uses_error_envelope(client) -> None:
    resp = client.get("/nope")

    assert resp.status_code == 404
    assert resp.get_json()["error"]["code"] == "not_found"
