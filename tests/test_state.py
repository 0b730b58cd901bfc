from itinerary.models.flight import FlightRecord
from itinerary.models.schedule import ScheduleEntry
from itinerary.services import state as reducers
from itinerary.services.state import TripState


def _sched(id, title="x"):
    return ScheduleEntry(id=id, date="2025-09-01", title=title, area="Barcelona")


def _flight(id):
    return FlightRecord(id=id, traveler="Group", **{"from": "Barcelona"}, to="Ibiza", flight="FR 3129", date="2025-09-03")


def test_reducers_do_not_mutate_prior_state():
    before = TripState(schedule=(_sched("a"),))
    after = reducers.schedule_added(before, _sched("b"))

    assert [s.id for s in before.schedule] == ["a"]
    assert [s.id for s in after.schedule] == ["a", "b"]


def test_schedule_updated_replaces_by_id_in_place():
    state = TripState(schedule=(_sched("a"), _sched("b"), _sched("c")))
    after = reducers.schedule_updated(state, _sched("b", title="changed"))

    assert [s.id for s in after.schedule] == ["a", "b", "c"]
    assert after.schedule[1].title == "changed"


def test_flight_reducers():
    state = reducers.flight_added(TripState(), _flight("f1"))
    state = reducers.flight_added(state, _flight("f2"))
    state = reducers.flight_deleted(state, "f1")

    assert [f.id for f in state.flights] == ["f2"]


def test_photos_added_appends():
    state = reducers.photos_added(TripState(photos=("a.jpg",)), ["b.jpg", "c.jpg"])
    assert state.photos == ("a.jpg", "b.jpg", "c.jpg")
