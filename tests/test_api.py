"""
FastAPI endpoint tests for the Contract Catalyst API.

Uses httpx + FastAPI TestClient — no real server needed, clock pinned.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from contract_catalyst.clock import FixedYearClock
from contract_catalyst.exceptions import InvalidDurationError
from contract_catalyst.pipeline import ContractCalculationPipeline

client = TestClient(app)

YEAR = 2025


@pytest.fixture(scope="module", autouse=True)
def _warm_pipeline() -> None:
    """Initialise the pipeline once for all API tests (bypasses lifespan)."""
    api._pipeline = ContractCalculationPipeline(clock=FixedYearClock(YEAR))
    yield  # type: ignore[misc]
    api._pipeline = None


SAMPLE = {"contractValue": "50000", "issueYear": "2020", "renewalYear": "2023"}


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["current_year"] == YEAR


class TestCalculateEndpoint:
    def test_valid_contract(self) -> None:
        resp = client.post("/calculate", json=SAMPLE)
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is True
        assert data["errors"] == {}
        assert data["current_year"] == YEAR

    def test_display_strings(self) -> None:
        data = client.post("/calculate", json=SAMPLE).json()
        display = data["display"]
        assert display["decimal_display"] == "1,532.361"
        assert display["currency_display"] == "$1,532.361"
        assert display["words_display"].startswith(
            "One Thousand Five Hundred Thirty Two Point Three"
        )
        assert display["note"] == "Not Applicable"

    def test_json_numbers_accepted(self) -> None:
        data = client.post(
            "/calculate",
            json={"contractValue": 12000, "issueYear": 2021, "renewalYear": 2022},
        ).json()
        assert data["display"]["words_display"] == (
            "One Thousand One Hundred Three Point Three Zero Zero"
        )
        assert data["result"] == pytest.approx(1103.3)

    def test_snake_case_keys_accepted(self) -> None:
        data = client.post(
            "/calculate",
            json={"contract_value": "12000", "issue_year": "2021", "renewal_year": "2022"},
        ).json()
        assert data["is_valid"] is True

    def test_renewal_before_issue(self) -> None:
        data = client.post(
            "/calculate", json={**SAMPLE, "issueYear": "2022", "renewalYear": "2021"}
        ).json()
        assert data["is_valid"] is False
        assert data["errors"] == {"renewal_year": "Renewal year must be after the issue year."}
        assert len(data["findings"]) == 1
        assert data["findings"][0]["code"] == "RENEWAL_NOT_AFTER_ISSUE"
        assert data["result"] is None
        assert data["display"] is None

    def test_future_issue_year(self) -> None:
        data = client.post(
            "/calculate", json={**SAMPLE, "issueYear": str(YEAR + 1), "renewalYear": str(YEAR + 3)}
        ).json()
        assert data["errors"] == {"issue_year": "Year cannot be in the future."}

    def test_renewal_year_beyond_float_range(self) -> None:
        resp = client.post("/calculate", json={**SAMPLE, "renewalYear": 1e308})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is True
        assert data["result"] == 0.0
        assert data["display"]["words_display"] == "Zero Point Zero Zero Zero"

    def test_python_only_number_text_rejected(self) -> None:
        data = client.post("/calculate", json={**SAMPLE, "contractValue": "50_000"}).json()
        assert data["errors"] == {"contract_value": "Contract value is required."}


class TestRequestValidation:
    def test_empty_body_reports_every_field(self) -> None:
        resp = client.post("/calculate", json={})
        assert resp.status_code == 200
        data = resp.json()
        assert data["is_valid"] is False
        assert set(data["errors"]) == {"contract_value", "issue_year", "renewal_year"}

    def test_missing_body_returns_422(self) -> None:
        resp = client.post("/calculate")
        assert resp.status_code == 422


class TestSchemaEndpoint:
    def test_schema_fields(self) -> None:
        data = client.get("/schema").json()
        assert [f["alias"] for f in data] == ["contractValue", "issueYear", "renewalYear"]
        assert data[1]["placeholder"] == f"e.g., {YEAR - 2}"


class TestInternalErrors:
    def test_contract_breach_returns_500(self, monkeypatch) -> None:
        def _broken(_):
            raise InvalidDurationError("Contract term must be positive, got 0 month(s)")

        monkeypatch.setattr("contract_catalyst.pipeline.calculate", _broken)
        resp = client.post("/calculate", json=SAMPLE)
        assert resp.status_code == 500
        assert resp.json()["code"] == "INVALID_DURATION"
