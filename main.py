from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from itinerary.core.config import Settings
from itinerary.core.supabase_config import get_supabase, get_service_supabase
from itinerary.endpoints.addresses import router as addresses_router
from itinerary.endpoints.flights import router as flights_router
from itinerary.endpoints.health import router as health_router
from itinerary.endpoints.lodging import router as lodging_router
from itinerary.endpoints.photos import router as photos_router
from itinerary.endpoints.schedule import router as schedule_router
from itinerary.endpoints.trip import router as trip_router
from itinerary.middlewares.middlewares import HTTPErrorHandler, RequestLoggerMiddleware
from itinerary.services.errors import PersistenceFailure
from itinerary.services.photos import PhotoStorage
from itinerary.services.repository import TableRepository
from itinerary.services.store import ItineraryStore
import logging
import uvicorn

settings = Settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def build_store(settings: Settings) -> ItineraryStore:
    client = await get_supabase(settings)
    return ItineraryStore(
        schedule_repo=TableRepository(client, settings.SCHEDULE_TABLE),
        flights_repo=TableRepository(client, settings.FLIGHTS_TABLE),
        photos=PhotoStorage(
            await get_service_supabase(settings),
            bucket=settings.PHOTO_BUCKET,
            list_limit=settings.PHOTO_LIST_LIMIT,
        ),
        settings=settings,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store = await build_store(settings)
    try:
        await app.state.store.reload()
    except PersistenceFailure as e:
        # Se arranca con estado vacío; POST /v1/trip/reload reintenta
        logger.error(f"Initial load failed: {e}")
    yield


app = FastAPI(title="Barcelona + Ibiza Trip", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggerMiddleware)
app.add_middleware(HTTPErrorHandler)

app.include_router(health_router)
app.include_router(schedule_router)
app.include_router(flights_router)
app.include_router(lodging_router)
app.include_router(photos_router)
app.include_router(addresses_router)
app.include_router(trip_router)


@app.get("/", tags=["Root"])
async def get_root():
    return {"status": "Itinerary service running"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000)
