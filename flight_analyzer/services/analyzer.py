"""
Chain analyzer: finds legs that break a flight number's itinerary.

A flight number's legs, once duplicates are dropped and they are ordered by
departure time, should hand over airport to airport: each leg must depart
from where the previous one arrived. Wherever that fails, both legs of the
broken pair are reported.

Unlike the loader, a failure here does not roll anything back: legs flagged
before the fault are still returned, with the error message appended to the
diagnostics.
"""
import logging

import pandas as pd

from flight_analyzer.models.flight import FlightLeg
from flight_analyzer.services.timestamps import parse_timestamp

logger = logging.getLogger("flight-analyzer.analyzer")

# Two legs of the same flight number with these values are the same leg
LEG_IDENTITY = ["departure_airport", "arrival_airport", "departure_datetime"]


def iter_chain_breaks(legs: list[FlightLeg]):
    """
    Yield the legs taking part in an adjacency break, pair by pair.

    Output keeps multiplicity: a leg that mismatches both its predecessor and
    its successor is yielded twice. Groups come out in first-seen order, and
    legs with equal departure times keep their file order.
    """
    if not legs:
        return

    frame = pd.DataFrame([
        {
            "position": position,
            "flight_number": leg.flight_number,
            "departure_airport": leg.departure_airport,
            "arrival_airport": leg.arrival_airport,
            "departure_datetime": leg.departure_datetime,
        }
        for position, leg in enumerate(legs)
    ])

    for _, chain in frame.groupby("flight_number", sort=False):
        chain = chain.drop_duplicates(subset=LEG_IDENTITY, keep="first")
        if len(chain) < 2:
            continue

        # Loader guarantees these parse; a failure here is a real fault
        chain = chain.assign(
            departure_time=[parse_timestamp(value) for value in chain["departure_datetime"]]
        ).sort_values("departure_time", kind="stable")

        # Compare each leg with the one after it
        next_departure = chain["departure_airport"].shift(-1)
        broken = (chain["arrival_airport"] != next_departure).tolist()[:-1]
        positions = chain["position"].tolist()

        for i, is_broken in enumerate(broken):
            if is_broken:
                yield legs[positions[i]]
                yield legs[positions[i + 1]]


class ChainAnalyzer:
    """Runs the loader, then flags inconsistent flight chains.

    `loader` is anything with an async `load()` returning (legs, errors).
    """

    def __init__(self, loader):
        self._loader = loader

    async def analyze(self) -> tuple[list[FlightLeg], list[str]]:
        legs, loaded_errors = await self._loader.load()
        errors = list(loaded_errors)
        inconsistent: list[FlightLeg] = []

        if not legs:
            logger.warning("Flight inconsistency analysis: no flight data available.")
            return inconsistent, errors

        try:
            for leg in iter_chain_breaks(legs):
                inconsistent.append(leg)
            logger.info("Found %d inconsistent flight legs.", len(inconsistent))
        except Exception as e:
            logger.exception("Flight inconsistency analysis: unexpected error during analysis.")
            errors.append(str(e))

        return inconsistent, errors
