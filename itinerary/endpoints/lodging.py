from fastapi import APIRouter
from itinerary.core.store_session import StoreDep
from itinerary.models.lodging import TripLodging

router = APIRouter(prefix="/v1/lodging", tags=["Lodging"])


@router.get("/", response_model=TripLodging)
async def get_lodging(store: StoreDep):
    return store.lodging()
