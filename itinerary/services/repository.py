from __future__ import annotations

from typing import Any, Awaitable

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient

from itinerary.services.errors import PersistenceFailure


class TableRepository:
    """
    Acceso a una tabla de Supabase con el cliente asíncrono; cada llamada
    suspende solo en la petición HTTP, dentro del event loop.
    """

    def __init__(self, client: AsyncClient, table: str):
        self.client = client
        self.table = table

    async def _run(self, operation: str, call: Awaitable[Any]) -> list[dict]:
        try:
            response = await call
        except APIError as exc:
            raise PersistenceFailure(operation, self.table, exc.message or str(exc)) from exc
        except httpx.HTTPError as exc:
            raise PersistenceFailure(operation, self.table, str(exc)) from exc

        return response.data or []

    async def select_ordered(self, column: str = "date") -> list[dict]:
        return await self._run(
            "select",
            self.client.table(self.table).select("*").order(column).execute(),
        )

    async def insert(self, row: dict) -> list[dict]:
        return await self._run(
            "insert",
            self.client.table(self.table).insert(row).execute(),
        )

    async def update(self, row_id: str, row: dict) -> list[dict]:
        return await self._run(
            "update",
            self.client.table(self.table).update(row).eq("id", row_id).execute(),
        )

    async def delete(self, row_id: str) -> list[dict]:
        return await self._run(
            "delete",
            self.client.table(self.table).delete().eq("id", row_id).execute(),
        )
