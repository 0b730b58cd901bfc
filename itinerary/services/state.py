"""
Estado del itinerario y reductores puros.

Cada reductor recibe el estado previo y el resultado confirmado de una
escritura externa y devuelve el estado siguiente. Nunca mutan el estado previo.
"""
from pydantic import BaseModel, ConfigDict
from itinerary.models.flight import FlightRecord
from itinerary.models.schedule import ScheduleEntry
from typing import Iterable


class TripState(BaseModel):
    model_config = ConfigDict(frozen=True)

    schedule: tuple[ScheduleEntry, ...] = ()
    flights: tuple[FlightRecord, ...] = ()
    photos: tuple[str, ...] = ()


def reloaded(
    state: TripState,
    schedule: Iterable[ScheduleEntry],
    flights: Iterable[FlightRecord],
    photos: Iterable[str],
) -> TripState:
    return TripState(schedule=tuple(schedule), flights=tuple(flights), photos=tuple(photos))


def schedule_added(state: TripState, entry: ScheduleEntry) -> TripState:
    return state.model_copy(update={"schedule": state.schedule + (entry,)})


def schedule_updated(state: TripState, entry: ScheduleEntry) -> TripState:
    schedule = tuple(entry if s.id == entry.id else s for s in state.schedule)
    return state.model_copy(update={"schedule": schedule})


def flight_added(state: TripState, flight: FlightRecord) -> TripState:
    return state.model_copy(update={"flights": state.flights + (flight,)})


def flight_updated(state: TripState, flight: FlightRecord) -> TripState:
    flights = tuple(flight if f.id == flight.id else f for f in state.flights)
    return state.model_copy(update={"flights": flights})


def flight_deleted(state: TripState, flight_id: str) -> TripState:
    flights = tuple(f for f in state.flights if f.id != flight_id)
    return state.model_copy(update={"flights": flights})


def photos_added(state: TripState, urls: Iterable[str]) -> TripState:
    return state.model_copy(update={"photos": state.photos + tuple(urls)})
