"\"\"\"Job listing schema shared with the job store.\"\"\""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobRecord(BaseModel):
    """Job listing as stored; unknown fields are kept and serialized back."""

    id: str = Field(..., alias="_id")
    title: str
    company: str
    location: str | None = None
    job_type: str | None = Field(None, alias="jobType")
    salary_range: str | None = Field(None, alias="salaryRange")
    skills: list[str] = Field(default_factory=list)
    description: str = ""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def _unwrap_object_id(cls, value: Any) -> Any:
        # Mongo extended JSON exports ids as {"$oid": "..."}
        if isinstance(value, dict) and "$oid" in value:
            return value["$oid"]
        return value

    @field_validator("skills", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("description", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value
