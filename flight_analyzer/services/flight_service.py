"""
Flight data service: the one object the HTTP layer talks to.

FlightDataService is the abstract {load, analyze} capability; the router only
knows this interface, so tests can hand it a fixed in-memory service through
FastAPI's dependency overrides. CsvFlightDataService is the real thing: a
file-backed line source feeding the loader, feeding the analyzer.
"""
from abc import ABC, abstractmethod

from flight_analyzer.config import settings
from flight_analyzer.models.flight import FlightLeg
from flight_analyzer.services.analyzer import ChainAnalyzer
from flight_analyzer.services.line_source import FileLineSource, LineSource
from flight_analyzer.services.loader import RecordLoader


class FlightDataService(ABC):

    @abstractmethod
    async def load(self) -> tuple[list[FlightLeg], list[str]]:
        """All valid flight legs, plus diagnostics for rejected rows."""

    @abstractmethod
    async def analyze(self) -> tuple[list[FlightLeg], list[str]]:
        """Legs that break their flight chain, plus every diagnostic raised."""


class CsvFlightDataService(FlightDataService):

    def __init__(self, source: LineSource, csv_path: str):
        self._loader = RecordLoader(source, csv_path)
        self._analyzer = ChainAnalyzer(self._loader)

    async def load(self) -> tuple[list[FlightLeg], list[str]]:
        return await self._loader.load()

    async def analyze(self) -> tuple[list[FlightLeg], list[str]]:
        return await self._analyzer.analyze()


def get_flight_service() -> FlightDataService:
    """FastAPI dependency: a fresh service per request, path read from settings."""
    return CsvFlightDataService(FileLineSource(), settings.flight_csv_path)
