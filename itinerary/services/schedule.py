from __future__ import annotations

from datetime import timedelta
from typing import Iterable, Optional

from itinerary.core.config import Settings
from itinerary.models.entry import DayGroup, Entry, PersistedEntry, SynthesizedEntry, TripView
from itinerary.models.flight import FlightRecord
from itinerary.models.schedule import Area, ScheduleEntry
from itinerary.services.timefmt import to_display_date, to_sort_key

# Prefijo de los ids de entradas sintetizadas (solo informativo; la edición se
# decide por el tipo de entrada, no por el prefijo)
SYNTHESIZED_PREFIX = "flight-"


# ---------- Helpers ----------

def _marks(place: str, code: str, city: str) -> bool:
    """
    True si el texto de origen/destino apunta al aeropuerto o ciudad dados:
    'BCN', 'Barcelona', 'Barcelona (BCN)', 'bcn'...
    """
    text = (place or "").strip().upper()
    if not text:
        return False

    tokens = text.replace("(", " ").replace(")", " ").replace(",", " ").split()
    return code.upper() in tokens or city.upper() in text


def _entry_of(item: Entry | ScheduleEntry) -> ScheduleEntry:
    if isinstance(item, (PersistedEntry, SynthesizedEntry)):
        return item.entry
    return item


def entry_sort_key(item: Entry | ScheduleEntry):
    entry = _entry_of(item)
    return to_sort_key(entry.date, entry.time)


# ---------- Síntesis desde vuelos ----------

def synthesize_arrival(flight: FlightRecord, settings: Settings) -> Optional[SynthesizedEntry]:
    """
    Llegada al tramo Barcelona: vuelos con destino BCN el día de inicio o el
    día anterior. La entrada se fija en el día de inicio del viaje.
    """
    start = settings.TRIP_START
    anchors = {start.isoformat(), (start - timedelta(days=1)).isoformat()}

    if flight.date not in anchors:
        return None
    if not _marks(flight.to, settings.ARRIVAL_AIRPORT_CODE, settings.ARRIVAL_CITY):
        return None
    if not flight.arrive_time:
        return None

    entry = ScheduleEntry(
        id=f"{SYNTHESIZED_PREFIX}{flight.id}-arrive",
        date=start.isoformat(),
        time=flight.arrive_time,
        title=f"{flight.traveler} arrive ({flight.flight} from {flight.from_})",
        area=Area.BARCELONA,
        location=settings.ARRIVAL_AIRPORT_LABEL,
        address=settings.ARRIVAL_AIRPORT_ADDRESS,
        notes=flight.notes,
    )
    return SynthesizedEntry(entry=entry, source_flight_id=flight.id)


def synthesize_departure(flight: FlightRecord, settings: Settings) -> Optional[SynthesizedEntry]:
    """Salida desde el tramo Ibiza: vuelos con origen IBZ el día final del viaje."""
    end = settings.TRIP_END.isoformat()

    if flight.date != end:
        return None
    if not _marks(flight.from_, settings.DEPARTURE_AIRPORT_CODE, settings.DEPARTURE_CITY):
        return None
    if not flight.depart_time:
        return None

    entry = ScheduleEntry(
        id=f"{SYNTHESIZED_PREFIX}{flight.id}-depart",
        date=end,
        time=flight.depart_time,
        title=f"{flight.traveler} depart ({flight.flight} to {flight.to})",
        area=Area.IBIZA,
        location=settings.DEPARTURE_AIRPORT_LABEL,
        address=settings.DEPARTURE_AIRPORT_ADDRESS,
        notes=flight.notes,
    )
    return SynthesizedEntry(entry=entry, source_flight_id=flight.id)


def synthesize_flight_entries(flights: Iterable[FlightRecord], settings: Settings) -> list[SynthesizedEntry]:
    synthesized: list[SynthesizedEntry] = []
    for flight in flights:
        for rule in (synthesize_arrival, synthesize_departure):
            item = rule(flight, settings)
            if item is not None:
                synthesized.append(item)
    return synthesized


# ---------- Orden, filtro y agrupación ----------

def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Orden estable por (fecha, hora); sin hora va antes que cualquier hora."""
    return sorted(entries, key=entry_sort_key)


def merge_schedule(
    schedule: Iterable[ScheduleEntry],
    flights: Iterable[FlightRecord],
    settings: Settings,
) -> list[Entry]:
    persisted: list[Entry] = [PersistedEntry(entry=s) for s in schedule]
    return sort_entries(persisted + synthesize_flight_entries(flights, settings))


def filter_by_area(entries: Iterable[Entry], area: Optional[Area]) -> list[Entry]:
    if area is None:
        return list(entries)
    return [e for e in entries if _entry_of(e).area == area]


def group_by_date(entries: Iterable[Entry]) -> dict[str, list[Entry]]:
    """Particiona por fecha respetando el orden de aparición."""
    groups: dict[str, list[Entry]] = {}
    for item in entries:
        groups.setdefault(_entry_of(item).date, []).append(item)
    return groups


def build_trip_view(
    schedule: Iterable[ScheduleEntry],
    flights: Iterable[FlightRecord],
    settings: Settings,
    area: Optional[Area] = None,
) -> TripView:
    merged = filter_by_area(merge_schedule(schedule, flights, settings), area)
    days = [
        DayGroup(date=day, label=to_display_date(day), entries=items)
        for day, items in group_by_date(merged).items()
    ]
    return TripView(area=area, days=days)
