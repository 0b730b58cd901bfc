from pydantic import BaseModel, field_validator
from itinerary.services.timefmt import normalize_time, parse_date
from typing import Optional
import enum


class Area(str, enum.Enum):
    BARCELONA = "Barcelona"
    IBIZA = "Ibiza"


class CreateSchedule(BaseModel):
    date: str
    time: Optional[str] = None
    title: str
    area: Area
    location: Optional[str] = None
    address: Optional[str] = None
    url: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("date")
    def validate_date(cls, v):
        return parse_date(v).isoformat()

    @field_validator("time", mode="before")
    def validate_time(cls, v):
        # Los formularios mandan "" cuando no hay hora
        if v is None or str(v).strip() == "":
            return None
        return normalize_time(str(v))

    @field_validator("title")
    def validate_title(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v

    @field_validator("location", "address", "url", "notes", mode="before")
    def empty_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ScheduleEntry(CreateSchedule):
    id: str

    def to_row(self) -> dict:
        return self.model_dump(mode="json")
