"""Protocol for search backends that produce per-signal score lists."""

from __future__ import annotations

from typing import Protocol

from hybrid_fusion.models.domain import QueryScores
from hybrid_fusion.models.schemas import QueryRecord


class SearchBackend(Protocol):
    async def search(self, query: QueryRecord) -> QueryScores: ...

    def queries(self) -> list[QueryRecord]: ...
