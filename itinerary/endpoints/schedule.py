from fastapi import APIRouter, HTTPException, Query, status
from itinerary.core.store_session import StoreDep
from itinerary.models.entry import DayResponse, EntryResponse, TripViewResponse
from itinerary.models.schedule import Area, CreateSchedule, ScheduleEntry
from itinerary.services.errors import EntryNotEditable, EntryNotFound, PersistenceFailure
from itinerary.services.timefmt import map_link, to_display_12h
from typing import Optional

router = APIRouter(prefix="/v1/schedule", tags=["Schedule"])


def _entry_response(item) -> EntryResponse:
    entry = item.entry
    return EntryResponse(
        **entry.model_dump(),
        kind=item.kind,
        editable=item.editable,
        source_flight_id=getattr(item, "source_flight_id", None),
        display_time=to_display_12h(entry.time) if entry.time else None,
        map_link=map_link(entry.address) if entry.address else None,
    )


@router.get("/", response_model=TripViewResponse)
async def get_schedule(
    store: StoreDep,
    area: Optional[Area] = Query(None),
):
    """
    Agenda ordenada y agrupada por día, incluyendo llegadas y salidas
    derivadas de los vuelos. `area` filtra por Barcelona o Ibiza.
    """
    view = store.view(area)
    return TripViewResponse(
        area=view.area,
        days=[
            DayResponse(
                date=day.date,
                label=day.label,
                entries=[_entry_response(item) for item in day.entries],
            )
            for day in view.days
        ],
    )


@router.post("/", response_model=ScheduleEntry, status_code=status.HTTP_201_CREATED)
async def add_schedule(store: StoreDep, data: CreateSchedule):
    try:
        return await store.add_schedule(data)
    except PersistenceFailure as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))


@router.put("/{entry_id}", response_model=ScheduleEntry)
async def update_schedule(store: StoreDep, entry_id: str, data: CreateSchedule):
    entry = ScheduleEntry(**data.model_dump(), id=entry_id)
    try:
        return await store.update_schedule(entry)
    except EntryNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except EntryNotEditable as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except PersistenceFailure as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
