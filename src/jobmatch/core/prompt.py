"\"\"\"Prompt rendering for the match-scoring model.\"\"\""

from __future__ import annotations

from typing import Sequence

from ..schemas import CandidateProfile, JobRecord

DEFAULT_MAX_JOBS = 20
NOT_AVAILABLE = "N/A"

_TASK_INSTRUCTIONS = """Analyze the user's profile and job listings to find the top 3 matches.
Return **only** a JSON object with an array of matches, where each match contains:
- job_id (string): The job ID
- match_score (number): A score from 0 to 100

Example response format:
{
  "matches": [
    { "job_id": "example_id_1", "match_score": 80 },
    { "job_id": "example_id_2", "match_score": 70 },
    { "job_id": "example_id_3", "match_score": 60 }
  ]
}

Do not include any additional text, explanations, or comments outside the JSON object."""


def build_prompt(
    profile: CandidateProfile,
    jobs: Sequence[JobRecord],
    *,
    max_jobs: int = DEFAULT_MAX_JOBS,
) -> str:
    """Render the instruction prompt for a candidate and a job sample.

    Output depends only on the arguments: the same profile and jobs always
    produce the same text. Only the first ``max_jobs`` jobs are rendered.
    """

    sample = list(jobs)[:max_jobs]
    sections = [
        "I have a job seeker with the following profile:",
        _render_profile(profile),
        "",
        "And these job listings:",
        _render_jobs(sample),
        "",
        _TASK_INSTRUCTIONS,
    ]
    return "\n".join(sections)


def _render_profile(profile: CandidateProfile) -> str:
    preferences = profile.job_preferences
    experience = "; ".join(
        f"{entry.title} at {entry.company} ({entry.duration or NOT_AVAILABLE})"
        for entry in profile.experience
    )
    education = "; ".join(
        f"{entry.degree} at {entry.institution} ({entry.year or NOT_AVAILABLE})"
        for entry in profile.education
    )
    lines = [
        f"Name: {profile.name}",
        f"Headline: {profile.headline}",
        f"Skills: {', '.join(profile.skills) or 'None'}",
        f"Experience: {experience or 'None'}",
        f"Education: {education or 'None'}",
        "Job Preferences:",
        f"  Job Types: {', '.join(preferences.job_types) or NOT_AVAILABLE}",
        f"  Locations: {', '.join(preferences.locations) or NOT_AVAILABLE}",
        "  Salary Range: "
        f"{_format_amount(preferences.salary.min)} - {_format_amount(preferences.salary.max)}",
        f"  Remote: {'Yes' if preferences.remote else 'No'}",
    ]
    return "\n".join(lines)


def _render_jobs(jobs: Sequence[JobRecord]) -> str:
    if not jobs:
        return "No jobs available"
    return "\n\n".join(_render_job(job) for job in jobs)


def _render_job(job: JobRecord) -> str:
    lines = [
        f"Job ID: {job.id}",
        f"Title: {job.title}",
        f"Company: {job.company}",
        f"Location: {job.location or NOT_AVAILABLE}",
        f"Job Type: {job.job_type or NOT_AVAILABLE}",
        f"Salary Range: {job.salary_range or NOT_AVAILABLE}",
        f"Required Skills: {', '.join(job.skills) or 'None'}",
        f"Description: {job.description}",
    ]
    return "\n".join(lines)


def _format_amount(value: int | float | None) -> str:
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
