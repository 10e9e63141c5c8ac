"\"\"\"Filtering of untrusted match candidates.\"\"\""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Iterable

import structlog

from ..schemas import MatchCandidate

JOB_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


@dataclass(slots=True)
class ValidationReport:
    """Accepted candidates in input order plus what was dropped."""

    accepted: list[MatchCandidate] = field(default_factory=list)
    dropped: list[MatchCandidate] = field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        return len(self.dropped)


def is_valid_job_id(value: Any) -> bool:
    return isinstance(value, str) and JOB_ID_PATTERN.fullmatch(value) is not None


def is_valid_score(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def validate_matches(candidates: Iterable[MatchCandidate]) -> ValidationReport:
    """Keep candidates with a store-format id and a finite score.

    A bad entry only drops itself. Accepted candidates are returned as given.
    """

    logger = structlog.get_logger(__name__)
    report = ValidationReport()
    for candidate in candidates:
        if not is_valid_job_id(candidate.job_id):
            logger.warning("matches.dropped", reason="invalid_job_id", job_id=repr(candidate.job_id))
            report.dropped.append(candidate)
            continue
        if not is_valid_score(candidate.match_score):
            logger.warning(
                "matches.dropped",
                reason="invalid_score",
                job_id=candidate.job_id,
                match_score=repr(candidate.match_score),
            )
            report.dropped.append(candidate)
            continue
        report.accepted.append(candidate)
    return report
