from fastapi import APIRouter, Query
from itinerary.services.addresses import suggest_addresses

router = APIRouter(prefix="/v1/addresses", tags=["Addresses"])


@router.get("/suggest")
async def get_suggestions(q: str = Query("", max_length=200)) -> dict:
    return {"suggestions": suggest_addresses(q)}
