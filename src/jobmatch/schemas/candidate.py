"\"\"\"Normalized candidate profile used for prompting.\"\"\""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExperienceEntry(BaseModel):
    title: str = ""
    company: str = ""
    duration: str | None = None

    model_config = ConfigDict(frozen=True)


class EducationEntry(BaseModel):
    degree: str = ""
    institution: str = ""
    year: str | None = None

    model_config = ConfigDict(frozen=True)


class SalaryRange(BaseModel):
    min: int | float | None = None
    max: int | float | None = None

    model_config = ConfigDict(frozen=True)


class CandidatePreferences(BaseModel):
    job_types: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    salary: SalaryRange = Field(default_factory=SalaryRange)
    remote: bool | None = None

    model_config = ConfigDict(frozen=True)


class CandidateProfile(BaseModel):
    """Fully populated, read-only view of a job seeker.

    Every field carries a concrete default so prompt rendering never has to
    branch on missing data.
    """

    name: str = "N/A"
    headline: str = ""
    skills: list[str] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    job_preferences: CandidatePreferences = Field(default_factory=CandidatePreferences)

    model_config = ConfigDict(frozen=True, extra="forbid")
