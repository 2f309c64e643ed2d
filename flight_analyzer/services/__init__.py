"""
Flight data services: loading, validating and chain analysis.

Usage:
    from flight_analyzer.services import CsvFlightDataService, FileLineSource
    service = CsvFlightDataService(FileLineSource(), "data/flightdata.csv")
    legs, errors = await service.load()
    broken, errors = await service.analyze()
"""
from flight_analyzer.services.flight_service import (
    CsvFlightDataService,
    FlightDataService,
    get_flight_service,
)
from flight_analyzer.services.line_source import FileLineSource, LineSource

__all__ = [
    "CsvFlightDataService",
    "FileLineSource",
    "FlightDataService",
    "LineSource",
    "get_flight_service",
]
