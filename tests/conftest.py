import asyncio

import pytest
from fastapi.testclient import TestClient

from itinerary.core.config import Settings
from itinerary.services.photos import PhotoStorage
from itinerary.services.repository import TableRepository
from itinerary.services.store import ItineraryStore
from tests.fakes import FakeSupabase

SCHEDULE_ROWS = [
    {"id": "sch_b", "date": "2025-08-31", "time": "17:00", "title": "Fantasy Football Draft", "area": "Barcelona"},
    {"id": "sch_a", "date": "2025-08-31", "time": "15:15", "title": "Sagrada Família Tour", "area": "Barcelona",
     "address": "Carrer de Mallorca, 401, 08013 Barcelona, Spain"},
    {"id": "sch_c", "date": "2025-08-30", "title": "Night out (drinks)", "area": "Barcelona", "notes": "Evening"},
    {"id": "sch_d", "date": "2025-09-05", "time": "23:30", "title": "David Guetta @ UNVRS", "area": "Ibiza"},
    {"id": "sch_e", "date": "2025-09-07", "title": "Fly out", "area": "Ibiza"},
]

FLIGHT_ROWS = [
    {"id": "flt_in", "traveler": "Anish + Sinha", "from": "USA", "to": "Barcelona (BCN)", "flight": "DL 128",
     "date": "2025-08-29", "arrivetime": "06:00"},
    {"id": "flt_hop", "traveler": "Group", "from": "Barcelona", "to": "Ibiza", "flight": "FR 3129",
     "date": "2025-09-03", "departtime": "12:30", "arrivetime": "13:40"},
    {"id": "flt_out", "traveler": "Group", "from": "IBZ", "to": "Home", "flight": "VY 3900",
     "date": "2025-09-07", "departtime": "15:10"},
]


@pytest.fixture
def settings() -> Settings:
    return Settings(SUPABASE_URL="http://supabase.test", SUPABASE_KEY="anon")


@pytest.fixture
def supabase() -> FakeSupabase:
    return FakeSupabase({"schedule": SCHEDULE_ROWS, "flights": FLIGHT_ROWS})


@pytest.fixture
def store(supabase, settings) -> ItineraryStore:
    store = ItineraryStore(
        schedule_repo=TableRepository(supabase, "schedule"),
        flights_repo=TableRepository(supabase, "flights"),
        photos=PhotoStorage(supabase, bucket="trip-photos", list_limit=100),
        settings=settings,
    )
    asyncio.run(store.reload())
    return store


@pytest.fixture
def client(store):
    from main import app

    app.state.store = store
    return TestClient(app)
