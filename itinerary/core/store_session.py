from typing import Annotated
from fastapi import Depends, Request
from itinerary.services.store import ItineraryStore


def get_store(request: Request) -> ItineraryStore:
    return request.app.state.store

StoreDep = Annotated[ItineraryStore, Depends(get_store)]
