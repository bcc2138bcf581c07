"""Search backend serving precomputed signal scores from a JSON Lines file."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from hybrid_fusion.exceptions import SearchBackendError
from hybrid_fusion.models.domain import QueryScores, ScoreEntry
from hybrid_fusion.models.schemas import QueryRecord, ScoreRow
from hybrid_fusion.observability.logger import get_logger

logger = get_logger("jsonl_backend")


class JsonlScoreBackend:
    """Each line holds one passage of one query:

    ``{"qid": "q1", "pid": "P1", "rank": 1, "query": "...", "scores": {"lexical": 0.18, "vector": 0.67}}``

    Rows are grouped per query in file order.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._rows: dict[str, list[ScoreRow]] = {}
        self._queries: dict[str, QueryRecord] = {}
        self._load()

    def _load(self) -> None:
        try:
            with open(self._path, encoding="utf-8") as f:
                for line_no, line in enumerate(f, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    row = ScoreRow.model_validate(json.loads(line))
                    self._rows.setdefault(row.qid, []).append(row)
                    self._queries.setdefault(row.qid, QueryRecord(qid=row.qid, query=row.query))
        except OSError as e:
            raise SearchBackendError(f"Cannot read score dataset {self._path}: {e}") from e
        except UnicodeDecodeError as e:
            raise SearchBackendError(f"Score dataset {self._path} is not valid UTF-8: {e}") from e
        except (json.JSONDecodeError, PydanticValidationError) as e:
            raise SearchBackendError(
                f"Malformed row at {self._path}:{line_no}: {e}"
            ) from e
        logger.info("dataset_loaded", path=str(self._path), queries=len(self._queries))

    def queries(self) -> list[QueryRecord]:
        return list(self._queries.values())

    async def search(self, query: QueryRecord) -> QueryScores:
        rows = self._rows.get(query.qid)
        if not rows:
            raise SearchBackendError(f"No scores for query {query.qid}")
        result = QueryScores(qid=query.qid)
        for row in rows:
            for signal, score in row.scores.items():
                result.signals.setdefault(signal, []).append(
                    ScoreEntry(id=row.pid, score=score, rank=row.rank)
                )
        return result
