"\"\"\"Join validated matches with authoritative job records.\"\"\""

from __future__ import annotations

from typing import Sequence

import structlog

from ..schemas import MatchCandidate, Recommendation
from ..stores import JobStore


def assemble_recommendations(
    candidates: Sequence[MatchCandidate],
    store: JobStore,
) -> list[Recommendation]:
    """Resolve candidates against ``store``, dropping ids it does not know.

    Ids are matched case-insensitively; the recommendation keeps the id as
    the model wrote it.
    """

    if not candidates:
        return []

    ids = list(dict.fromkeys(candidate.job_id.lower() for candidate in candidates))
    jobs = {job.id.lower(): job for job in store.find_jobs_by_ids(ids)}

    logger = structlog.get_logger(__name__)
    recommendations: list[Recommendation] = []
    unresolved: list[str] = []
    for candidate in candidates:
        job = jobs.get(candidate.job_id.lower())
        if job is None:
            unresolved.append(candidate.job_id)
            continue
        recommendations.append(
            Recommendation(
                job_id=candidate.job_id,
                match_score=candidate.match_score,
                job_details=job,
            )
        )

    if unresolved:
        logger.warning("matches.unresolved", job_ids=unresolved)
    return recommendations
