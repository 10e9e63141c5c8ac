"\"\"\"User record as delivered by the external user store.\"\"\""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExperienceItem(BaseModel):
    """Employment history entry."""

    title: str | None = None
    company: str | None = None
    duration: str | None = None

    model_config = ConfigDict(extra="allow")


class EducationItem(BaseModel):
    """Education history entry."""

    degree: str | None = None
    institution: str | None = None
    year: str | int | None = None

    model_config = ConfigDict(extra="allow")


class SalaryExpectation(BaseModel):
    min: int | float | None = None
    max: int | float | None = None

    model_config = ConfigDict(extra="allow")


class JobPreferences(BaseModel):
    """Stated job search preferences."""

    job_types: list[str] | None = Field(None, alias="jobTypes")
    locations: list[str] | None = None
    salary: SalaryExpectation | None = None
    remote: bool | None = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class UserProfile(BaseModel):
    """Profile section of a user document. Any field may be missing or null."""

    headline: str | None = None
    bio: str | None = None
    location: str | None = None
    skills: list[str] | None = None
    experience: list[ExperienceItem] | None = None
    education: list[EducationItem] | None = None
    job_preferences: JobPreferences | None = Field(None, alias="jobPreferences")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class UserRecord(BaseModel):
    """User document owned by the account store."""

    email: str
    name: str | None = None
    profile: UserProfile | None = None

    model_config = ConfigDict(extra="allow")
