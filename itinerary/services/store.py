from __future__ import annotations

import logging
import uuid
from typing import Iterable, Optional

from pydantic import ValidationError

from itinerary.core.config import Settings
from itinerary.models.entry import Entry, PersistedEntry, SynthesizedEntry, TripView
from itinerary.models.flight import CreateFlight, FlightRecord
from itinerary.models.lodging import Lodging, LodgingResponse, TripLodging
from itinerary.models.photo import PhotoUpload
from itinerary.models.schedule import Area, CreateSchedule, ScheduleEntry
from itinerary.services import state as reducers
from itinerary.services.errors import EntryNotEditable, EntryNotFound, PersistenceFailure, StorageNotConfigured
from itinerary.services.photos import PhotoStorage
from itinerary.services.repository import TableRepository
from itinerary.services.schedule import build_trip_view, synthesize_flight_entries
from itinerary.services.state import TripState
from itinerary.services.timefmt import map_link

logger = logging.getLogger(__name__)


def uid(prefix: str = "id") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


def _valid_rows(model, rows: list[dict], table: str) -> list:
    """Valida fila a fila; una fila mal formada se descarta sin perder las demás."""
    valid = []
    for row in rows:
        try:
            valid.append(model.model_validate(row))
        except ValidationError as exc:
            logger.warning(f"Skipping malformed row {row.get('id')!r} in {table!r}: {exc.error_count()} error(s)")
    return valid


class ItineraryStore:
    """
    Fachada del itinerario.

    El estado local es la caché de lo último confirmado por Supabase: solo
    cambia después de que la escritura externa tiene éxito. Si falla, se
    registra el error, el estado queda igual y el error se propaga. No hay
    reintentos.
    """

    def __init__(
        self,
        schedule_repo: TableRepository,
        flights_repo: TableRepository,
        photos: PhotoStorage,
        settings: Settings,
    ):
        self.schedule_repo = schedule_repo
        self.flights_repo = flights_repo
        self.photos = photos
        self.settings = settings
        self._state = TripState()
        self.loaded = False

    @property
    def state(self) -> TripState:
        return self._state

    # ---------- Lectura ----------

    async def reload(self) -> TripState:
        """Recarga completa. Si el listado de fotos falla se usa una lista vacía."""
        schedule_rows = await self.schedule_repo.select_ordered("date")
        flight_rows = await self.flights_repo.select_ordered("date")

        try:
            photos = await self.photos.list_urls()
        except (PersistenceFailure, StorageNotConfigured) as exc:
            logger.warning(f"Photo listing failed, using empty list: {exc}")
            photos = []

        self._state = reducers.reloaded(
            self._state,
            _valid_rows(ScheduleEntry, schedule_rows, self.schedule_repo.table),
            _valid_rows(FlightRecord, flight_rows, self.flights_repo.table),
            photos,
        )
        self.loaded = True
        logger.info(
            f"Reloaded {len(self._state.schedule)} schedule items, "
            f"{len(self._state.flights)} flights, {len(self._state.photos)} photos"
        )
        return self._state

    def view(self, area: Optional[Area] = None) -> TripView:
        return build_trip_view(self._state.schedule, self._state.flights, self.settings, area)

    def find_entry(self, entry_id: str) -> Entry | None:
        for s in self._state.schedule:
            if s.id == entry_id:
                return PersistedEntry(entry=s)
        for item in synthesize_flight_entries(self._state.flights, self.settings):
            if item.entry.id == entry_id:
                return item
        return None

    def find_flight(self, flight_id: str) -> FlightRecord | None:
        return next((f for f in self._state.flights if f.id == flight_id), None)

    def lodging(self) -> TripLodging:
        s = self.settings
        barcelona = Lodging(link=s.BARCELONA_LODGING_LINK, address=s.BARCELONA_LODGING_ADDRESS)
        ibiza = Lodging(link=s.IBIZA_LODGING_LINK, address=s.IBIZA_LODGING_ADDRESS)
        return TripLodging(
            barcelona=LodgingResponse(**barcelona.model_dump(), map_link=map_link(barcelona.address)),
            ibiza=LodgingResponse(**ibiza.model_dump(), map_link=map_link(ibiza.address)),
        )

    # ---------- Schedule ----------

    async def add_schedule(self, data: CreateSchedule) -> ScheduleEntry:
        entry = ScheduleEntry(**data.model_dump(), id=uid("sch"))
        try:
            await self.schedule_repo.insert(entry.to_row())
        except PersistenceFailure as exc:
            logger.error(f"Could not add schedule item {entry.title!r}: {exc}")
            raise

        self._state = reducers.schedule_added(self._state, entry)
        return entry

    async def update_schedule(self, entry: ScheduleEntry) -> ScheduleEntry:
        current = self.find_entry(entry.id)
        if current is None:
            raise EntryNotFound(f"Schedule item {entry.id!r} not found")
        if isinstance(current, SynthesizedEntry):
            raise EntryNotEditable(f"Schedule item {entry.id!r} comes from flight {current.source_flight_id!r}")

        try:
            await self.schedule_repo.update(entry.id, entry.to_row())
        except PersistenceFailure as exc:
            logger.error(f"Could not update schedule item {entry.id!r}: {exc}")
            raise

        self._state = reducers.schedule_updated(self._state, entry)
        return entry

    # ---------- Flights ----------

    async def add_flight(self, data: CreateFlight) -> FlightRecord:
        flight = FlightRecord(**data.model_dump(), id=uid("flt"))
        try:
            await self.flights_repo.insert(flight.to_row())
        except PersistenceFailure as exc:
            logger.error(f"Could not add flight {flight.flight!r}: {exc}")
            raise

        self._state = reducers.flight_added(self._state, flight)
        return flight

    async def update_flight(self, flight: FlightRecord) -> FlightRecord:
        if self.find_flight(flight.id) is None:
            raise EntryNotFound(f"Flight {flight.id!r} not found")

        try:
            await self.flights_repo.update(flight.id, flight.to_row())
        except PersistenceFailure as exc:
            logger.error(f"Could not update flight {flight.id!r}: {exc}")
            raise

        self._state = reducers.flight_updated(self._state, flight)
        return flight

    async def delete_flight(self, flight_id: str) -> None:
        if self.find_flight(flight_id) is None:
            raise EntryNotFound(f"Flight {flight_id!r} not found")

        try:
            await self.flights_repo.delete(flight_id)
        except PersistenceFailure as exc:
            logger.error(f"Could not delete flight {flight_id!r}: {exc}")
            raise

        self._state = reducers.flight_deleted(self._state, flight_id)

    # ---------- Photos ----------

    async def add_photos(self, photos: Iterable[PhotoUpload]) -> list[str]:
        urls = await self.photos.upload_many(photos)
        self._state = reducers.photos_added(self._state, urls)
        return urls
