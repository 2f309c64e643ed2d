"""
Pydantic model for one validated flight leg.

FlightLeg enforces the required-field rule (every string column must carry a
non-blank value) so the loader can reject a row in one step and report every
missing field at once. Attributes are snake_case in Python; the JSON shape
uses camelCase so API clients see `flightNumber`, `departureAirport`, etc.
"""
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class FlightLeg(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: int = 0
    aircraft_registration_number: str
    aircraft_type: str
    flight_number: str
    departure_airport: str
    departure_datetime: str
    arrival_airport: str
    arrival_datetime: str

    @field_validator(
        "aircraft_registration_number",
        "aircraft_type",
        "flight_number",
        "departure_airport",
        "departure_datetime",
        "arrival_airport",
        "arrival_datetime",
    )
    @classmethod
    def _required(cls, value: str) -> str:
        # Blank counts as missing, same as an empty column
        if not value or not value.strip():
            raise ValueError("is required")
        return value
