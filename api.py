"""
Contract Catalyst — FastAPI Server
===================================

RESTful API behind the contract calculator form.

Endpoints:
    POST /calculate         Validate a contract and calculate its adjusted monthly value
    GET  /schema            Form field descriptions for the presentation layer
    GET  /health            Health and readiness check

Run (uvicorn comes with the "serve" extra: pip install -e ".[serve]"):
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from contract_catalyst import __version__
from contract_catalyst.clock import clock_from_settings
from contract_catalyst.config import configure_logging, load_settings
from contract_catalyst.exceptions import ContractCalculatorError
from contract_catalyst.form_schema import FieldSpec, build_form_schema
from contract_catalyst.models import (
    CalculationReport,
    FieldError,
    RawContractInput,
    ResultDisplay,
)
from contract_catalyst.pipeline import ContractCalculationPipeline

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan (build pipeline from settings) ────────────

_pipeline: ContractCalculationPipeline | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings and build the pipeline on startup."""
    global _pipeline  # noqa: PLW0603
    settings = load_settings()
    configure_logging(settings)
    _pipeline = ContractCalculationPipeline(clock=clock_from_settings(settings.pinned_year))
    yield
    _pipeline = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Contract Catalyst API",
    description=(
        "Calculates the adjusted monthly value of a contract from its face value, "
        "issue year and renewal year, and writes it out in figures and in words."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class CalculateRequest(RawContractInput):
    """Request body for the /calculate endpoint. Values may be numbers or text."""

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {"example": {
            "contractValue": "50000",
            "issueYear": "2020",
            "renewalYear": "2023",
        }},
    }


class CalculateResponse(BaseModel):
    """Either per-field error messages or the full set of display strings."""

    is_valid: bool
    current_year: int
    errors: dict[str, str] = Field(
        default_factory=dict,
        description="Field name → message for the input to highlight",
    )
    findings: list[FieldError] = Field(default_factory=list)
    result: Optional[float] = Field(None, description="Unrounded adjusted monthly value")
    display: Optional[ResultDisplay] = None

    model_config = {"json_schema_extra": {"example": {
        "is_valid": True,
        "current_year": 2025,
        "errors": {},
        "findings": [],
        "result": 1532.361111111111,
        "display": {
            "value": 1532.361111111111,
            "rounded": "1532.361",
            "decimal_display": "1,532.361",
            "currency_display": "$1,532.361",
            "words_display": "One Thousand Five Hundred Thirty Two Point Three Six One",
            "note": "Not Applicable",
        },
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    current_year: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_pipeline() -> ContractCalculationPipeline:
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialised")
    return _pipeline


def _build_response(report: CalculationReport) -> CalculateResponse:
    """Convert the internal CalculationReport to the API response schema."""
    return CalculateResponse(
        is_valid=report.is_valid,
        current_year=report.current_year,
        errors=report.messages,
        findings=report.errors,
        result=report.result,
        display=report.display,
    )


@app.exception_handler(ContractCalculatorError)
async def _contract_error_handler(request: Request, exc: ContractCalculatorError) -> JSONResponse:
    """Internal contract breaches are server errors, never field errors."""
    logger.error("Calculation failed [%s]: %s", exc.code, exc)
    return JSONResponse(status_code=500, content={"code": exc.code, "detail": str(exc)})


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/calculate",
    summary="Calculate a contract's adjusted monthly value",
    tags=["Calculation"],
    responses={
        500: {"description": "Internal calculation contract breached"},
        503: {"description": "Pipeline not yet initialised"},
    },
)
def calculate_contract(request: CalculateRequest) -> CalculateResponse:
    """Validate the three form values and, if they are all valid, calculate.

    Returns:
    - **is_valid**: `true` if every field passed
    - **errors**: one message per invalid field (empty when valid)
    - **display**: figures, words, and the "Not Applicable" line (null when invalid)
    """
    pipeline = _get_pipeline()
    report = pipeline.run(request)
    return _build_response(report)


@app.get(
    "/schema",
    summary="Form field descriptions",
    tags=["Form"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def form_schema() -> list[FieldSpec]:
    """Labels, icons, placeholders and rules for the three contract inputs."""
    pipeline = _get_pipeline()
    return build_form_schema(pipeline.clock())


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    pipeline = _get_pipeline()
    return HealthResponse(
        status="healthy",
        version=__version__,
        current_year=pipeline.clock(),
    )
