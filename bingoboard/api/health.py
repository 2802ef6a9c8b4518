"""
Health check endpoints.

Provides liveness and readiness probes. Readiness reports which scan
backend is active.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from bingoboard.api.dependencies import get_scan_adapter
from bingoboard.scan.adapter import ScanAdapter
from bingoboard.scan.demo import DemoScanAdapter

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    scanner: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check dependencies.
    """
    return HealthResponse(status="healthy")


@router.get("/ready", response_model=HealthResponse)
async def ready(
    adapter: Annotated[ScanAdapter, Depends(get_scan_adapter)],
) -> HealthResponse:
    """
    Readiness probe.

    Always ready: the game has no external dependencies, and scanning
    falls back to demo grids without an API key.
    """
    scanner = "demo" if isinstance(adapter, DemoScanAdapter) else "anthropic"
    return HealthResponse(status="ready", scanner=scanner)
