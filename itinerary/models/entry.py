from pydantic import BaseModel, Field
from itinerary.models.schedule import Area, ScheduleEntry
from typing import Annotated, Literal, Optional, Union


class PersistedEntry(BaseModel):
    kind: Literal["persisted"] = "persisted"
    entry: ScheduleEntry

    @property
    def editable(self) -> bool:
        return True


class SynthesizedEntry(BaseModel):
    """Entrada derivada de un vuelo. Nunca se guarda ni se edita."""
    kind: Literal["synthesized"] = "synthesized"
    entry: ScheduleEntry
    source_flight_id: str

    @property
    def editable(self) -> bool:
        return False


Entry = Annotated[Union[PersistedEntry, SynthesizedEntry], Field(discriminator="kind")]


class DayGroup(BaseModel):
    date: str
    label: str
    entries: list[Entry]


class TripView(BaseModel):
    area: Optional[Area] = None
    days: list[DayGroup]


# ---------- Respuestas ----------

class EntryResponse(ScheduleEntry):
    kind: Literal["persisted", "synthesized"]
    editable: bool
    source_flight_id: Optional[str] = None
    display_time: Optional[str] = None
    map_link: Optional[str] = None


class DayResponse(BaseModel):
    date: str
    label: str
    entries: list[EntryResponse]


class TripViewResponse(BaseModel):
    area: Optional[Area] = None
    days: list[DayResponse]
