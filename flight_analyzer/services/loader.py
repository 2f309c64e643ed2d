"""
Record loader: CSV lines in, validated flight legs and diagnostics out.

Two failure policies live here and must not be mixed up:

1. Row-level problems (wrong column count, bad timestamp, blank required
   field) reject that one row with a diagnostic and the batch carries on.
2. Anything unexpected while reading or parsing (I/O fault, bad encoding, a
   bug) throws the whole batch away: every leg parsed so far is discarded
   and a single generic diagnostic is added.

Row outcomes are plain values (RowOutcome), so exceptions only ever mean
case 2.

Lines are split naively on commas; quoted fields containing commas are not
supported.
"""
import logging
from typing import NamedTuple

from pydantic import ValidationError
from pydantic.alias_generators import to_pascal

from flight_analyzer.models.flight import FlightLeg
from flight_analyzer.services.line_source import LineSource
from flight_analyzer.services.timestamps import is_timestamp

logger = logging.getLogger("flight-analyzer.loader")

COLUMN_COUNT = 8
UNEXPECTED_ERROR = "Unexpected error occurred while processing the file."

# Validation errors may be keyed by attribute name or by JSON alias
_FIELD_LABELS = {
    key: to_pascal(name)
    for name, info in FlightLeg.model_fields.items()
    for key in (name, info.alias or name)
}


class RowOutcome(NamedTuple):
    leg: FlightLeg | None
    errors: list[str]


def _parse_id(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        return 0


def parse_row(line: str) -> RowOutcome:
    """Turn one CSV line into a FlightLeg, or into the diagnostics explaining
    why it was rejected."""
    fields = line.split(",")
    row_id = fields[0].strip() if fields else ""

    if len(fields) < COLUMN_COUNT:
        return RowOutcome(None, [
            f"Id {row_id}: Incorrect number of columns. Expected {COLUMN_COUNT}, got {len(fields)}."
        ])

    if not is_timestamp(fields[5]):
        return RowOutcome(None, [f"Id {row_id}: Invalid DepartureDatetime '{fields[5].strip()}'."])

    if not is_timestamp(fields[7]):
        return RowOutcome(None, [f"Id {row_id}: Invalid ArrivalDatetime '{fields[7].strip()}'."])

    try:
        leg = FlightLeg(
            id=_parse_id(fields[0]),
            aircraft_registration_number=fields[1],
            aircraft_type=fields[2],
            flight_number=fields[3],
            departure_airport=fields[4],
            departure_datetime=fields[5],
            arrival_airport=fields[6],
            arrival_datetime=fields[7],
        )
    except ValidationError as e:
        # One diagnostic per missing field, the row is dropped entirely
        return RowOutcome(None, [
            f"Id {row_id}: {_FIELD_LABELS.get(err['loc'][0], err['loc'][0])} is required."
            for err in e.errors()
        ])

    return RowOutcome(leg, [])


class RecordLoader:
    """Loads the flight legs of one CSV file through a LineSource."""

    def __init__(self, source: LineSource, csv_path: str):
        self._source = source
        self._csv_path = csv_path

    async def load(self) -> tuple[list[FlightLeg], list[str]]:
        legs: list[FlightLeg] = []
        errors: list[str] = []

        try:
            # exists() can fail too, e.g. an unreadable parent directory
            if not self._source.exists(self._csv_path):
                error = f"CSV file couldn't be found at path: {self._csv_path}"
                logger.error(error)
                errors.append(error)
                return legs, errors

            lines = await self._source.read_lines(self._csv_path)

            for line in lines[1:]:  # header row
                outcome = parse_row(line)
                if outcome.leg is None:
                    for error in outcome.errors:
                        logger.warning(error)
                    errors.extend(outcome.errors)
                    continue
                legs.append(outcome.leg)
        except Exception:
            logger.exception("Unexpected error while parsing %s", self._csv_path)
            errors.append(UNEXPECTED_ERROR)
            legs.clear()
            return legs, errors

        logger.info("Loaded %d flight legs (%d diagnostics)", len(legs), len(errors))
        return legs, errors
