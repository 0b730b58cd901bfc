"""
Carga seed/schedule.json en la tabla de schedule.

Uso:
    python -m scripts.seed_schedule [ruta.json]
"""
from itinerary.core.config import Settings
from itinerary.core.supabase_config import get_supabase
from itinerary.models.schedule import CreateSchedule, ScheduleEntry
from itinerary.services.store import uid
from itinerary.services.errors import PersistenceFailure
from itinerary.services.repository import TableRepository
from pathlib import Path
import asyncio
import json
import logging
import sys

logger = logging.getLogger(__name__)

DEFAULT_SEED = Path(__file__).resolve().parent.parent / "seed" / "schedule.json"


def load_seed(path: Path) -> list[dict]:
    items = json.loads(path.read_text(encoding="utf-8"))
    return [
        ScheduleEntry(**CreateSchedule.model_validate(item).model_dump(), id=uid("sch")).to_row()
        for item in items
    ]


async def seed(settings: Settings, rows: list[dict]) -> None:
    client = await get_supabase(settings)
    await TableRepository(client, settings.SCHEDULE_TABLE).insert(rows)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = Settings()

    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        logger.error("Missing Supabase environment variables")
        return 1

    path = Path(argv[0]) if argv else DEFAULT_SEED
    rows = load_seed(path)

    try:
        asyncio.run(seed(settings, rows))
    except PersistenceFailure as e:
        logger.error(f"Error seeding schedule: {e.message}")
        return 1

    logger.info(f"Seeded {len(rows)} schedule items")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
