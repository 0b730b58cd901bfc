from datetime import date
from urllib.parse import quote
import re

from itinerary.services.errors import InvalidFormat

# Postgres puede devolver HH:MM:SS en columnas de tipo time
TIME_RE = re.compile(r"^(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::\d{2})?$", re.ASCII)
TIME_24H_RE = re.compile(r"^(?P<hour>\d{1,2}):(?P<minute>\d{2})$", re.ASCII)

DEFAULT_TIME = "00:00"


def parse_time(value: str) -> tuple[int, int]:
    """
    Convierte 'HH:MM' (24h) en (hora, minuto).
    Lanza InvalidFormat si no son dos campos numéricos separados por ':'.
    """
    text = (value or "").strip()
    m = TIME_RE.match(text)
    if not m:
        raise InvalidFormat(f"Invalid time: {value!r}, expected HH:MM")

    hour = int(m.group("hour"))
    minute = int(m.group("minute"))
    if hour > 23 or minute > 59:
        raise InvalidFormat(f"Time out of range: {value!r}")

    return hour, minute


def normalize_time(value: str) -> str:
    """'6:05' -> '06:05'. Mantiene el orden lexicográfico igual al cronológico."""
    hour, minute = parse_time(value)
    return f"{hour:02d}:{minute:02d}"


def parse_date(value: str | date) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat((value or "").strip())
    except ValueError:
        raise InvalidFormat(f"Invalid date: {value!r}, expected YYYY-MM-DD")


def to_sort_key(day: str, time: str | None = None) -> tuple[str, str, bool]:
    """
    Clave ordenable de (fecha, hora).

    Sin hora cuenta como 00:00; el último elemento hace que, a igual fecha,
    una entrada sin hora quede antes que cualquier entrada con hora explícita.
    """
    if time is None:
        return day, DEFAULT_TIME, False
    return day, time, True


def to_display_date(day: str | date) -> str:
    """'2025-08-30' -> 'Sat, Aug 30'. Fecha de calendario, sin zona horaria."""
    d = parse_date(day)
    return f"{d:%a}, {d:%b} {d.day}"


def to_display_12h(time24: str) -> str:
    """
    Convierte 'HH:MM' a 'H:MM AM/PM'.

    '00:05' -> '12:05 AM', '12:30' -> '12:30 PM', '13:05' -> '1:05 PM'.
    """
    m = TIME_24H_RE.match((time24 or "").strip())
    if not m:
        raise InvalidFormat(f"Invalid time: {time24!r}, expected HH:MM")

    hours, minutes = int(m.group("hour")), int(m.group("minute"))
    period = "PM" if hours >= 12 else "AM"
    hours12 = hours % 12 or 12
    return f"{hours12}:{minutes:02d} {period}"


def format_dt(day: str | date, time: str | None = None) -> str:
    label = to_display_date(day)
    return f"{label} · {to_display_12h(time)}" if time else label


def map_link(address: str) -> str:
    query = quote(address, safe="-_.!~*'()")
    return f"https://www.google.com/maps/search/?api=1&query={query}"
