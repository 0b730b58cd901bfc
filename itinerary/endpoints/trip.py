from fastapi import APIRouter, HTTPException, status
from itinerary.core.store_session import StoreDep
from itinerary.services.errors import PersistenceFailure

router = APIRouter(prefix="/v1/trip", tags=["Trip"])


@router.post("/reload")
async def reload_trip(store: StoreDep) -> dict:
    """Recarga todo desde Supabase; corrige una caché local desactualizada."""
    try:
        state = await store.reload()
    except PersistenceFailure as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return {
        "status": "ok",
        "schedule": len(state.schedule),
        "flights": len(state.flights),
        "photos": len(state.photos),
    }
