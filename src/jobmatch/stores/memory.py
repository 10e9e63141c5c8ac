"\"\"\"In-memory job store.\"\"\""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from ..schemas import JobRecord, UserRecord


class InMemoryJobStore:
    """Job store backed by plain lists, preserving insertion order."""

    def __init__(
        self,
        *,
        users: Iterable[UserRecord | dict[str, Any]] = (),
        jobs: Iterable[JobRecord | dict[str, Any]] = (),
    ) -> None:
        self._users = [
            user if isinstance(user, UserRecord) else UserRecord.model_validate(user)
            for user in users
        ]
        self._jobs = [
            job if isinstance(job, JobRecord) else JobRecord.model_validate(job)
            for job in jobs
        ]

    def find_user_by_email(self, email: str) -> UserRecord | None:
        for user in self._users:
            if user.email == email:
                return user
        return None

    def find_jobs(self, limit: int | None = None) -> list[JobRecord]:
        if limit is None:
            return list(self._jobs)
        return self._jobs[: max(limit, 0)]

    def find_jobs_by_ids(self, ids: Sequence[str]) -> list[JobRecord]:
        wanted = {job_id.lower() for job_id in ids}
        return [job for job in self._jobs if job.id.lower() in wanted]
