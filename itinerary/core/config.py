from datetime import date
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

load_dotenv()


class Settings(BaseSettings):
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None

    SCHEDULE_TABLE: str = "schedule"
    FLIGHTS_TABLE: str = "flights"
    PHOTO_BUCKET: str = "trip-photos"
    PHOTO_LIST_LIMIT: int = 100

    # Fechas ancla del viaje
    TRIP_START: date = date(2025, 8, 30)
    TRIP_END: date = date(2025, 9, 7)

    # Aeropuerto de llegada (tramo Barcelona)
    ARRIVAL_AIRPORT_CODE: str = "BCN"
    ARRIVAL_CITY: str = "Barcelona"
    ARRIVAL_AIRPORT_LABEL: str = "Barcelona-El Prat (BCN)"
    ARRIVAL_AIRPORT_ADDRESS: str = "Aeropuerto de Barcelona-El Prat, 08820 El Prat de Llobregat, Barcelona, Spain"

    # Aeropuerto de salida (tramo Ibiza)
    DEPARTURE_AIRPORT_CODE: str = "IBZ"
    DEPARTURE_CITY: str = "Ibiza"
    DEPARTURE_AIRPORT_LABEL: str = "Ibiza Airport (IBZ)"
    DEPARTURE_AIRPORT_ADDRESS: str = "Aeropuerto de Ibiza, 07820 Sant Josep de sa Talaia, Illes Balears, Spain"

    BARCELONA_LODGING_LINK: str = "https://www.airbnb.com/l/ORgNzpnP?s=67&unique_share_id=38225666-7311-4745-ad81-1de9cc3e6db1"
    BARCELONA_LODGING_ADDRESS: str = "Pg. de Gràcia, 65, L'Eixample, 08008 Barcelona, Spain"
    IBIZA_LODGING_LINK: str = "https://www.airbnb.com/l/N23haenG?s=67&unique_share_id=5f28dd9e-96de-41ee-81b2-9295d52dc05e"
    IBIZA_LODGING_ADDRESS: str = "Carrer del Pica-Soques, 34, 07817 Sant Josep de sa Talaia, Illes Balears, Spain"

    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")
