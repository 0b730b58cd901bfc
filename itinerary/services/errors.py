class ItineraryError(Exception):
    """Error base del itinerario."""


class PersistenceFailure(ItineraryError):
    """Una llamada al almacenamiento externo reportó un error."""

    def __init__(self, operation: str, table: str, message: str):
        self.operation = operation
        self.table = table
        self.message = message
        super().__init__(f"{operation} on {table!r} failed: {message}")


class InvalidFormat(ItineraryError, ValueError):
    """Cadena de hora o fecha mal formada."""


class StorageNotConfigured(ItineraryError):
    """Falta la service role key para el bucket de fotos."""


class EntryNotEditable(ItineraryError):
    """Se intentó editar o borrar una entrada sintetizada desde un vuelo."""


class EntryNotFound(ItineraryError):
    """No existe una entrada con ese id en el estado local."""
