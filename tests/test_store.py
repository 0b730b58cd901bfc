import asyncio

import pytest

from itinerary.models.entry import SynthesizedEntry
from itinerary.models.flight import CreateFlight
from itinerary.models.schedule import CreateSchedule, ScheduleEntry
from itinerary.services.errors import EntryNotEditable, EntryNotFound, PersistenceFailure


def test_reload_loads_everything(store):
    assert len(store.state.schedule) == 5
    assert len(store.state.flights) == 3
    assert store.state.photos == ()


def test_reload_degrades_photo_listing_failure(store, supabase):
    supabase.storage.from_("trip-photos").files["a.jpg"] = b"x"
    supabase.storage.from_("trip-photos").fail_list = True

    state = asyncio.run(store.reload())

    assert state.photos == ()
    assert len(state.schedule) == 5


def test_add_schedule_persists_then_appends(store, supabase):
    data = CreateSchedule(date="2025-09-04", time="21:00", title="Dinner: Ohana Ibiza", area="Ibiza")

    entry = asyncio.run(store.add_schedule(data))

    assert entry.id.startswith("sch_")
    assert store.state.schedule[-1] == entry
    assert supabase.table("schedule").rows[-1]["id"] == entry.id


def test_add_schedule_failure_leaves_state_untouched(store, supabase):
    supabase.table("schedule").fail_on.add("insert")
    before = store.state
    snapshot = before.model_dump()

    with pytest.raises(PersistenceFailure):
        asyncio.run(store.add_schedule(CreateSchedule(date="2025-09-04", title="Dinner", area="Ibiza")))

    assert store.state is before
    assert store.state.model_dump() == snapshot


def test_update_schedule_replaces_local_entry(store, supabase):
    entry = ScheduleEntry(id="sch_a", date="2025-08-31", time="16:00", title="Sagrada Família Tour", area="Barcelona")

    asyncio.run(store.update_schedule(entry))

    local = next(s for s in store.state.schedule if s.id == "sch_a")
    assert local.time == "16:00"
    remote = next(r for r in supabase.table("schedule").rows if r["id"] == "sch_a")
    assert remote["time"] == "16:00"


def test_update_schedule_failure_keeps_state(store, supabase):
    supabase.table("schedule").fail_on.add("update")
    before = store.state

    with pytest.raises(PersistenceFailure):
        asyncio.run(store.update_schedule(
            ScheduleEntry(id="sch_a", date="2025-08-31", title="Moved", area="Barcelona")
        ))

    assert store.state is before


def test_synthesized_entries_are_not_editable(store, supabase):
    item = store.find_entry("flight-flt_in-arrive")
    assert isinstance(item, SynthesizedEntry)

    with pytest.raises(EntryNotEditable):
        asyncio.run(store.update_schedule(
            ScheduleEntry(id="flight-flt_in-arrive", date="2025-08-30", title="Hack", area="Barcelona")
        ))
    assert "update" not in supabase.table("schedule").calls


def test_update_unknown_schedule_item(store):
    with pytest.raises(EntryNotFound):
        asyncio.run(store.update_schedule(ScheduleEntry(id="nope", date="2025-08-31", title="x", area="Ibiza")))


def test_flight_lifecycle(store, supabase):
    data = CreateFlight.model_validate({
        "traveler": "Maya", "from": "JFK", "to": "BCN", "flight": "UA 120",
        "date": "2025-08-30", "arriveTime": "07:45",
    })

    flight = asyncio.run(store.add_flight(data))
    row = supabase.table("flights").rows[-1]
    assert row["arrivetime"] == "07:45"
    assert row["from"] == "JFK"
    assert "arriveTime" not in row

    arrivals = [d for d in store.view().days if d.date == "2025-08-30"][0].entries
    assert any(getattr(e, "source_flight_id", None) == flight.id for e in arrivals)

    updated = flight.model_copy(update={"arrive_time": "08:10"})
    asyncio.run(store.update_flight(updated))
    assert store.find_flight(flight.id).arrive_time == "08:10"

    asyncio.run(store.delete_flight(flight.id))
    assert store.find_flight(flight.id) is None
    assert all(r["id"] != flight.id for r in supabase.table("flights").rows)


def test_delete_flight_failure_keeps_flight(store, supabase):
    supabase.table("flights").fail_on.add("delete")

    with pytest.raises(PersistenceFailure):
        asyncio.run(store.delete_flight("flt_hop"))

    assert store.find_flight("flt_hop") is not None


def test_delete_unknown_flight(store):
    with pytest.raises(EntryNotFound):
        asyncio.run(store.delete_flight("flt_missing"))


def test_reload_skips_malformed_rows(store, supabase):
    supabase.table("schedule").rows = [
        {"id": "ok", "date": "2025-09-06", "title": "Chill day", "area": "Ibiza"},
        {"id": "bad_time", "date": "2025-09-06", "time": "TBD", "title": "Boat", "area": "Ibiza"},
        {"id": "bad_title", "date": "2025-09-06", "title": "", "area": "Ibiza"},
    ]
    supabase.table("flights").rows.append(
        {"id": "flt_bad", "traveler": "Group", "from": "IBZ", "to": None, "flight": "TBD", "date": "2025-09-07"}
    )

    state = asyncio.run(store.reload())

    assert [s.id for s in state.schedule] == ["ok"]
    assert "flt_bad" not in [f.id for f in state.flights]
    assert len(state.flights) == 3
    assert store.loaded
