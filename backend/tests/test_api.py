"""Tests for the HTTP surface (single, bulk, health)."""

import csv
import io

import pytest
from fastapi.testclient import TestClient

from ckr.config import Settings, get_settings
from ckr.errors import JudgmentTransportError
from ckr.judgment.schemas import Judgment, ParseFailure, ParseSuccess
from ckr.main import app, get_judgment_source

from conftest import FakeJudgmentSource


@pytest.fixture
def source():
    return FakeJudgmentSource()


@pytest.fixture
def client(source):
    app.dependency_overrides[get_judgment_source] = lambda: source
    app.dependency_overrides[get_settings] = lambda: Settings(openai_api_key="test-key")
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def keyless_client():
    app.dependency_overrides[get_settings] = lambda: Settings(openai_api_key="")
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestSingleEndpoint:
    def test_success(self, client, source, saturated_judgment):
        source.default = ParseSuccess(judgment=saturated_judgment)
        resp = client.post("/api/single", json={"query": "best sunglasses for men 2025"})
        assert resp.status_code == 200
        data = resp.json()
        assert set(data) == {"query", "needs_search", "ccp", "fanout_queries", "snippets", "urls"}
        assert data["needs_search"] is True
        assert data["ccp"] == 100
        assert len(data["snippets"]) == 5

    def test_no_search(self, client):
        resp = client.post("/api/single", json={"query": "where is the eiffel tower?"})
        assert resp.status_code == 200
        assert resp.json()["ccp"] == 0
        assert resp.json()["urls"] == []

    @pytest.mark.parametrize("query", ["abcd", "x" * 100])
    def test_length_bounds_accepted(self, client, query):
        assert client.post("/api/single", json={"query": query}).status_code == 200

    @pytest.mark.parametrize("body", [{"query": "abc"}, {"query": "x" * 101}, {"query": "   "}, {}, {"query": 7}])
    def test_invalid_query_is_400(self, client, source, body):
        resp = client.post("/api/single", json=body)
        assert resp.status_code == 400
        assert "error" in resp.json()
        assert source.calls == []

    def test_malformed_judgment_is_structured_500(self, client, source):
        source.default = ParseFailure(reason="Judgment model response was not valid JSON")
        resp = client.post("/api/single", json={"query": "best sunglasses 2025"})
        assert resp.status_code == 500
        data = resp.json()
        assert "error" in data
        assert "ccp" not in data
        assert "not valid JSON" in data["detail"]

    def test_transport_error_is_structured_500(self, client, source):
        source.default = JudgmentTransportError("Judgment source returned HTTP 502")
        resp = client.post("/api/single", json={"query": "best sunglasses 2025"})
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Judgment source returned HTTP 502"

    def test_get_not_allowed(self, client):
        resp = client.get("/api/single")
        assert resp.status_code == 405
        assert "error" in resp.json()

    def test_missing_key_is_503(self, keyless_client):
        resp = keyless_client.post("/api/single", json={"query": "best sunglasses 2025"})
        assert resp.status_code == 503
        assert "unavailable" in resp.json()["error"].lower()

    def test_missing_key_checked_before_validation(self, keyless_client):
        resp = keyless_client.post("/api/single", json={"query": "abc"})
        assert resp.status_code == 503


class TestBulkEndpoint:
    def _records(self, resp):
        return list(csv.reader(io.StringIO(resp.text)))

    def test_csv_attachment(self, client, source, search_judgment):
        source.answers["best sunglasses 2025"] = ParseSuccess(judgment=search_judgment)
        source.answers["what is the capital of France"] = ParseSuccess(judgment=Judgment(needs_search=False))
        resp = client.post(
            "/api/bulk",
            json={"queries": ["best sunglasses 2025", "what is the capital of France"]},
        )
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        disposition = resp.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="chatgptkwr_bulk_')
        assert disposition.endswith('.csv"')

        records = self._records(resp)
        assert records[0][0] == "#"
        assert records[1][:3] == ["1", "best sunglasses 2025", "48"]
        assert records[1][6] == "7"
        assert records[2][2] == "0"
        assert records[2][6] == "0"
        assert records[3] == []

    def test_one_bad_query_keeps_other_rows(self, client, source, search_judgment):
        source.default = ParseSuccess(judgment=search_judgment)
        source.answers["fails upstream"] = JudgmentTransportError("Judgment source returned HTTP 500")
        queries = ["query one", "query two", "fails upstream", "query four", "query five"]
        resp = client.post("/api/bulk", json={"queries": queries})
        assert resp.status_code == 200
        rows = self._records(resp)[1:6]
        assert [r[1] for r in rows] == queries
        assert [r[7] for r in rows] == ["N/A", "N/A", "Judgment source returned HTTP 500", "N/A", "N/A"]

    @pytest.mark.parametrize("size", [2, 5])
    def test_batch_bounds_accepted(self, client, size):
        resp = client.post("/api/bulk", json={"queries": [f"query {i}" for i in range(size)]})
        assert resp.status_code == 200

    @pytest.mark.parametrize(
        "body",
        [
            {"queries": ["only one"]},
            {"queries": [f"query {i}" for i in range(6)]},
            {"queries": "not a list"},
            {},
        ],
    )
    def test_bad_batch_is_400_without_judging(self, client, source, body):
        resp = client.post("/api/bulk", json=body)
        assert resp.status_code == 400
        assert "2–5" in resp.json()["error"]
        assert source.calls == []

    def test_get_not_allowed(self, client):
        resp = client.get("/api/bulk")
        assert resp.status_code == 405
        assert "error" in resp.json()

    def test_missing_key_is_503(self, keyless_client):
        resp = keyless_client.post("/api/bulk", json={"queries": ["query one", "query two"]})
        assert resp.status_code == 503
        assert "error" in resp.json()

    def test_non_object_body_is_400(self, client):
        resp = client.post("/api/bulk", content="not json", headers={"Content-Type": "application/json"})
        assert resp.status_code == 400
