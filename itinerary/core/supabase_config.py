from supabase import acreate_client, AsyncClient
from itinerary.core.config import Settings


async def get_supabase(settings: Settings) -> AsyncClient:
    """Cliente asíncrono con la clave anónima, usado para las tablas."""
    return await acreate_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


async def get_service_supabase(settings: Settings) -> AsyncClient | None:
    """
    Cliente asíncrono con la service role key, usado para el bucket de fotos.
    Devuelve None si la clave no está configurada.
    """
    if not settings.SUPABASE_SERVICE_ROLE_KEY:
        return None
    return await acreate_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
