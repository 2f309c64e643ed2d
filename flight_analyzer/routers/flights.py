"""
Flights router: valid legs and inconsistent flight chains.

Both endpoints return the same ApiResponse envelope. The service never raises
for bad data (that shows up in `errors`); the try/except here only covers
real failures, which become a 500 with a clean message instead of a stack
trace.
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from flight_analyzer.models.flight import FlightLeg
from flight_analyzer.models.response import ApiResponse
from flight_analyzer.services import FlightDataService, get_flight_service
from flight_analyzer.services.loader import UNEXPECTED_ERROR

logger = logging.getLogger("flight-analyzer.flights")

router = APIRouter()


def _internal_error(exc: Exception) -> JSONResponse:
    body = ApiResponse[list[FlightLeg]](
        success=False,
        message="Internal server error occurred.",
        errors=[str(exc)],
        data=[],
    )
    return JSONResponse(status_code=500, content=body.model_dump(mode="json", by_alias=True))


@router.get("/", response_model=ApiResponse[list[FlightLeg]])
async def get_flights(service: FlightDataService = Depends(get_flight_service)):
    """Every flight leg that passed validation, plus diagnostics for the rest."""
    try:
        flights, errors = await service.load()
    except Exception as e:
        logger.exception("Unknown exception while retrieving flights: %s", e)
        return _internal_error(e)

    if flights:
        message = (
            "Flight information retrieved with some warnings."
            if errors else "Flight information retrieved successfully."
        )
        return ApiResponse[list[FlightLeg]](success=True, message=message, data=flights, errors=errors)

    return ApiResponse[list[FlightLeg]](
        success=False,
        message="Flight information not retrieved.",
        data=flights,
        errors=errors,
    )


@router.get("/inconsistent-chains", response_model=ApiResponse[list[FlightLeg]])
async def get_inconsistent_chains(service: FlightDataService = Depends(get_flight_service)):
    """Legs whose flight number does not form a continuous itinerary.

    A chain is broken when one leg arrives at one airport and the next leg
    (same flight number, ordered by departure) leaves from another. Both legs
    of every broken pair are returned.
    """
    try:
        flights, errors = await service.analyze()
    except Exception as e:
        logger.exception("Unknown exception during flight inconsistency analysis: %s", e)
        return _internal_error(e)

    if flights:
        count = len(flights)
        message = (
            f"{count} inconsistencies found with some data warnings."
            if errors else f"{count} inconsistencies found."
        )
        return ApiResponse[list[FlightLeg]](success=True, message=message, data=flights, errors=errors)

    # Nothing flagged because the file itself could not be processed
    if UNEXPECTED_ERROR in errors:
        return ApiResponse[list[FlightLeg]](
            success=False,
            message="Some issue with the data source.",
            data=flights,
            errors=errors,
        )

    return ApiResponse[list[FlightLeg]](
        success=True,
        message="No inconsistent flight chains found.",
        data=flights,
        errors=errors,
    )
