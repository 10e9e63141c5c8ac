"\"\"\"Match payload, candidate and recommendation types.\"\"\""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .job import JobRecord


class MatchEntry(BaseModel):
    """Single entry of the generated ``matches`` array, fields unchecked."""

    job_id: Any = None
    match_score: Any = None

    model_config = ConfigDict(extra="ignore")


class MatchPayload(BaseModel):
    """Structured object the model is instructed to return.

    Entries stay untyped here; a malformed entry is dropped later on its own.
    """

    matches: list[Any]

    model_config = ConfigDict(extra="ignore")


@dataclass(slots=True, frozen=True)
class MatchCandidate:
    """Untrusted (job_id, match_score) pair extracted from model output."""

    job_id: Any
    match_score: Any


class Recommendation(BaseModel):
    """Match candidate resolved against a stored job record."""

    job_id: str
    match_score: int | float
    job_details: JobRecord = Field(..., alias="jobDetails")

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
