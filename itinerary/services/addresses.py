ADDRESS_SUGGESTIONS = [
    # Barcelona
    "Sagrada Família, Barcelona, Spain",
    "Park Güell, Barcelona, Spain",
    "Las Ramblas, Barcelona, Spain",
    "Pg. de Gràcia, Barcelona, Spain",
    "Carrer de Mallorca, Barcelona, Spain",
    "Plaça Catalunya, Barcelona, Spain",
    "Gothic Quarter, Barcelona, Spain",
    "Barceloneta Beach, Barcelona, Spain",
    "Camp Nou, Barcelona, Spain",
    "Passeig de Joan de Borbó, Barcelona, Spain",
    # Ibiza
    "Playa d'en Bossa, Ibiza, Spain",
    "San Antonio, Ibiza, Spain",
    "Ibiza Town, Ibiza, Spain",
    "Es Vedra, Ibiza, Spain",
    "Cala Comte, Ibiza, Spain",
    "Ushuaïa Ibiza Beach Hotel, Ibiza, Spain",
    "Pacha Ibiza, Ibiza, Spain",
    "Amnesia Ibiza, Ibiza, Spain",
    "DC10 Ibiza, Ibiza, Spain",
    "Café del Mar, Ibiza, Spain",
]

MIN_QUERY_LENGTH = 3
MAX_SUGGESTIONS = 5


def suggest_addresses(query: str, limit: int = MAX_SUGGESTIONS) -> list[str]:
    """Coincidencias por subcadena, sin distinguir mayúsculas, a partir de 3 letras."""
    if len(query or "") < MIN_QUERY_LENGTH:
        return []
    needle = query.lower()
    return [a for a in ADDRESS_SUGGESTIONS if needle in a.lower()][:limit]
