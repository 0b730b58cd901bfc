from fastapi import APIRouter, HTTPException, Response, status
from itinerary.core.store_session import StoreDep
from itinerary.models.flight import CreateFlight, FlightRecord
from itinerary.services.errors import EntryNotFound, PersistenceFailure

router = APIRouter(prefix="/v1/flights", tags=["Flights"])


@router.get("/", response_model=list[FlightRecord])
async def get_flights(store: StoreDep):
    return list(store.state.flights)


@router.post("/", response_model=FlightRecord, status_code=status.HTTP_201_CREATED)
async def add_flight(store: StoreDep, data: CreateFlight):
    try:
        return await store.add_flight(data)
    except PersistenceFailure as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))


@router.put("/{flight_id}", response_model=FlightRecord)
async def update_flight(store: StoreDep, flight_id: str, data: CreateFlight):
    flight = FlightRecord(**data.model_dump(), id=flight_id)
    try:
        return await store.update_flight(flight)
    except EntryNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PersistenceFailure as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))


@router.delete("/{flight_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_flight(store: StoreDep, flight_id: str):
    try:
        await store.delete_flight(flight_id)
    except EntryNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PersistenceFailure as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
