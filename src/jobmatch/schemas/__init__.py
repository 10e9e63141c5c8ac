"\"\"\"Pydantic schema definitions shared across the pipeline.\"\"\""

from __future__ import annotations

from .candidate import (
    CandidatePreferences,
    CandidateProfile,
    EducationEntry,
    ExperienceEntry,
    SalaryRange,
)
from .job import JobRecord
from .match import MatchCandidate, MatchEntry, MatchPayload, Recommendation
from .user import UserRecord

__all__ = [
    "CandidatePreferences",
    "CandidateProfile",
    "EducationEntry",
    "ExperienceEntry",
    "JobRecord",
    "MatchCandidate",
    "MatchEntry",
    "MatchPayload",
    "Recommendation",
    "SalaryRange",
    "UserRecord",
]
