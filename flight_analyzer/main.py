"""
FastAPI application entry point.
Logging is configured here once; every module logs under `flight-analyzer.*`.
"""
import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flight_analyzer.config import settings
from flight_analyzer.routers import flights

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


app = FastAPI(
    title="Flight Data Analyzer API",
    description="Validated flight legs and inconsistent flight chains from a CSV source",
    version="1.0.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(flights.router, prefix="/api/v1/flights", tags=["Flights"])


@app.get("/health", tags=["Health"])
async def health():
    return {
        "status": "ok",
        "csv_path": settings.flight_csv_path,
        "csv_found": Path(settings.flight_csv_path).is_file(),
    }
