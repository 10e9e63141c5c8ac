"\"\"\"Normalize stored user records into candidate profiles.\"\"\""

from __future__ import annotations

from typing import Iterable

from ..schemas import (
    CandidatePreferences,
    CandidateProfile,
    EducationEntry,
    ExperienceEntry,
    SalaryRange,
    UserRecord,
)
from ..schemas.user import JobPreferences, UserProfile


def assemble_profile(user: UserRecord) -> CandidateProfile:
    """Build a fully defaulted ``CandidateProfile`` from a raw user record."""

    profile = user.profile or UserProfile()

    experience = [
        ExperienceEntry(
            title=item.title or "",
            company=item.company or "",
            duration=item.duration or None,
        )
        for item in profile.experience or []
    ]
    education = [
        EducationEntry(
            degree=item.degree or "",
            institution=item.institution or "",
            year=str(item.year) if item.year not in (None, "") else None,
        )
        for item in profile.education or []
    ]

    return CandidateProfile(
        name=user.name or "N/A",
        headline=profile.headline or "",
        skills=_unique(profile.skills or []),
        experience=experience,
        education=education,
        job_preferences=_preferences(profile.job_preferences),
    )


def _preferences(preferences: JobPreferences | None) -> CandidatePreferences:
    if preferences is None:
        return CandidatePreferences()
    salary = preferences.salary
    return CandidatePreferences(
        job_types=list(preferences.job_types or []),
        locations=list(preferences.locations or []),
        salary=SalaryRange(
            min=salary.min if salary else None,
            max=salary.max if salary else None,
        ),
        remote=preferences.remote,
    )


def _unique(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        cleaned = (value or "").strip()
        if not cleaned or cleaned in seen:
            continue
        seen.add(cleaned)
        ordered.append(cleaned)
    return ordered
