"""FastAPI server — create and fetch fleet charging reports.

Run with:
    uvicorn fleet_charging.api.server:app --reload --port 8000

Or:
    fleet-charging-api

Endpoints:
    GET  /health                       — liveness probe
    GET  /config/defaults              — engine configuration in effect
    POST /reports                      — compute a report, returns {"reportId": ...}
    GET  /reports/{report_id}          — fetch a stored report
    GET  /reports/{report_id}/series   — chart series for a stored report
"""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from fleet_charging.api.store import InMemoryReportStore, ReportStore, new_report_id
from fleet_charging.config.engine import EngineConfig
from fleet_charging.config.fleet import FleetInput
from fleet_charging.engine.report import build_dashboard_series, build_report
from fleet_charging.errors import InvalidInputError, NumericDegeneracyError
from fleet_charging.models.results import Report

_LOGGER = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="EV Fleet Charging Planner API",
    version="1.0",
    description=(
        "Estimate charge time, daily energy, flat vs off-peak charging cost, "
        "an hourly SOC profile and battery fade for an electric vehicle fleet."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Dependencies
# ═══════════════════════════════════════════════════════════════════════════

_store = InMemoryReportStore()


def get_store() -> ReportStore:
    """Process-wide report store.  Override in tests via ``app.dependency_overrides``."""
    return _store


@lru_cache(maxsize=1)
def get_engine_config() -> EngineConfig:
    """Engine configuration, read once from the environment."""
    return EngineConfig.from_env()


# ═══════════════════════════════════════════════════════════════════════════
# Response models & error mapping
# ═══════════════════════════════════════════════════════════════════════════

class CreateReportResponse(BaseModel):
    """Response from POST /reports."""
    model_config = ConfigDict(populate_by_name=True)

    report_id: str = Field(alias="reportId")


@app.exception_handler(InvalidInputError)
async def _invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(NumericDegeneracyError)
async def _degenerate_handler(request: Request, exc: NumericDegeneracyError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def _lookup(store: ReportStore, report_id: str) -> Report:
    report = store.get(report_id)
    if report is None:
        raise HTTPException(status_code=404, detail="Report not found")
    return report


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/config/defaults")
def get_config(config: EngineConfig = Depends(get_engine_config)):
    """Engine configuration (tariffs, efficiencies, chart sampling) in effect."""
    return config.model_dump()


@app.post("/reports")
def create_report(
    fleet: FleetInput,
    store: ReportStore = Depends(get_store),
    config: EngineConfig = Depends(get_engine_config),
):
    """Compute a report for the posted fleet and store it under a fresh id.

    Example request:
    ```json
    {"numEV": 100, "dailyMileage": 250, "batteryCapacity": 60, "chargePower": 50,
     "efficiency": 4.5, "batteryDOD": [10, 90], "workingHours": [7, 19]}
    ```
    """
    report = build_report(fleet, config)
    report_id = new_report_id()
    store.put(report_id, report)
    _LOGGER.info("Created report %s for %d EVs", report_id, fleet.num_ev)
    return CreateReportResponse(report_id=report_id).model_dump(by_alias=True)


@app.get("/reports/{report_id}")
def get_report(report_id: str, store: ReportStore = Depends(get_store)):
    """Fetch a stored report (camelCase keys)."""
    return _lookup(store, report_id).model_dump(by_alias=True)


@app.get("/reports/{report_id}/series")
def get_report_series(
    report_id: str,
    store: ReportStore = Depends(get_store),
    config: EngineConfig = Depends(get_engine_config),
):
    """Charge profile, cost-vs-tariff and capacity-fade series for a stored report."""
    report = _lookup(store, report_id)
    fleet = FleetInput(
        num_ev=report.num_ev,
        daily_mileage=report.daily_mileage,
        battery_capacity=report.battery_capacity,
        charge_power=report.charge_power,
        efficiency=report.efficiency,
        battery_dod=report.battery_dod,
        working_hours=report.working_hours,
    )
    return build_dashboard_series(fleet, config).model_dump(by_alias=True)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    uvicorn.run(
        "fleet_charging.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
