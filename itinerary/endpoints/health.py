from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter(tags=["Health"])

@router.get("/health")
async def health_check():
    return {"status": "healthy", "service": "itinerary"}

@router.get("/ready")
async def readiness_check(request: Request):
    """Listo cuando el itinerario se cargó al menos una vez desde Supabase."""
    store = getattr(request.app.state, "store", None)
    if store is None or not store.loaded:
        return JSONResponse(
            {"status": "loading", "service": "itinerary"},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    state = store.state
    return {
        "status": "ready",
        "service": "itinerary",
        "schedule": len(state.schedule),
        "flights": len(state.flights),
        "photos": len(state.photos),
    }
