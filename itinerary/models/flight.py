from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from itinerary.services.timefmt import normalize_time, parse_date
from typing import Optional


class CreateFlight(BaseModel):
    """
    Vuelo de uno o varios viajeros.

    En la tabla las horas se llaman `departtime` / `arrivetime`; también se
    aceptan `departTime` / `arriveTime` de la versión anterior del esquema.
    """
    model_config = ConfigDict(populate_by_name=True)

    traveler: str
    from_: str = Field(alias="from")
    to: str
    flight: str
    date: str
    depart_time: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("departtime", "departTime", "depart_time"),
        serialization_alias="departtime",
    )
    arrive_time: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("arrivetime", "arriveTime", "arrive_time"),
        serialization_alias="arrivetime",
    )
    notes: Optional[str] = None

    @field_validator("traveler", "from_", "to", "flight")
    def required_text(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v

    @field_validator("date")
    def validate_date(cls, v):
        return parse_date(v).isoformat()

    @field_validator("depart_time", "arrive_time", mode="before")
    def validate_time(cls, v):
        if v is None or str(v).strip() == "":
            return None
        return normalize_time(str(v))

    @field_validator("notes", mode="before")
    def empty_notes(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class FlightRecord(CreateFlight):
    id: str

    def to_row(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
