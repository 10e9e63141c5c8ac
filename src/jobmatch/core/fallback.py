"\"\"\"Default recommendations used when the model yields nothing usable.\"\"\""

from __future__ import annotations

import structlog

from ..schemas import Recommendation
from ..stores import JobStore


class FallbackPolicy:
    """Wrap the first few stored jobs with a neutral score."""

    DEFAULT_SIZE = 3
    DEFAULT_SCORE = 50

    def __init__(self, *, size: int = DEFAULT_SIZE, score: int | float = DEFAULT_SCORE) -> None:
        self._size = size
        self._score = score
        self._logger = structlog.get_logger(__name__)

    def recommend(self, store: JobStore) -> list[Recommendation]:
        """Return the fallback set. Never raises; an unusable store yields ``[]``."""
        if self._size <= 0:
            return []
        try:
            jobs = store.find_jobs(limit=self._size)
        except Exception as exc:  # noqa: BLE001
            self._logger.error("fallback.store_failed", error=str(exc))
            return []
        return [
            Recommendation(job_id=job.id, match_score=self._score, job_details=job)
            for job in jobs[: self._size]
        ]
