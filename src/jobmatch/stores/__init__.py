"\"\"\"Job store capabilities consumed by the pipeline.\"\"\""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..schemas import JobRecord, UserRecord


@runtime_checkable
class JobStore(Protocol):
    """Read-only access to users and job listings.

    Implementations own persistence; the pipeline never writes through this
    interface.
    """

    def find_user_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered under ``email`` or ``None``."""

    def find_jobs(self, limit: int | None = None) -> list[JobRecord]:
        """Return jobs in natural store order, at most ``limit`` of them."""

    def find_jobs_by_ids(self, ids: Sequence[str]) -> list[JobRecord]:
        """Return the stored jobs whose id is in ``ids``; unknown ids are skipped."""


from .memory import InMemoryJobStore  # noqa: E402
from .jsonl import JsonlJobStore, RecordLoadError, load_records  # noqa: E402

__all__ = [
    "JobStore",
    "InMemoryJobStore",
    "JsonlJobStore",
    "RecordLoadError",
    "load_records",
]
