"""
Flight endpoints.

The same five collection routes as for users.  Creating a flight
with a ``userId`` is refused with 404 when the user service does not
know that user, and with 500 when the user service cannot be reached.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from flight_booking_api.app.schemas.flight import FlightCreate, FlightRead, FlightUpdate
from flight_booking_api.app.services.flight_service import FlightService

router = APIRouter()


def get_flight_service(request: Request) -> FlightService:
    return request.app.state.flight_service


@router.post("", response_model=FlightRead, status_code=status.HTTP_201_CREATED)
async def create_flight(
    flight_in: FlightCreate,
    service: FlightService = Depends(get_flight_service),
) -> FlightRead:
    """Create a flight, checking the referenced user first when ``userId`` is set."""
    return await service.create(flight_in)


@router.get("", response_model=List[FlightRead])
async def list_flights(service: FlightService = Depends(get_flight_service)) -> List[FlightRead]:
    return await service.list()


@router.get("/{flight_id}", response_model=FlightRead)
async def get_flight(flight_id: int, service: FlightService = Depends(get_flight_service)) -> FlightRead:
    return await service.get(flight_id)


@router.put("/{flight_id}", response_model=FlightRead)
async def update_flight(
    flight_id: int,
    flight_in: FlightUpdate,
    service: FlightService = Depends(get_flight_service),
) -> FlightRead:
    """Replace every field of an existing flight."""
    return await service.update(flight_id, flight_in)


@router.delete("/{flight_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_flight(flight_id: int, service: FlightService = Depends(get_flight_service)) -> None:
    await service.delete(flight_id)
    return None
