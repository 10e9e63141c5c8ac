"\"\"\"Recommendation pipeline assembly and execution.\"\"\""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

import pendulum
import structlog

from . import __version__
from .core import (
    FallbackPolicy,
    assemble_profile,
    assemble_recommendations,
    build_prompt,
    parse_matches,
    validate_matches,
)
from .core.prompt import DEFAULT_MAX_JOBS
from .errors import ParseError, UserNotFound
from .schemas import Recommendation
from .stores import JobStore


class InferenceClient(Protocol):
    def generate(self, prompt: str) -> str:
        """Return the raw text generated for ``prompt``."""


@dataclass(slots=True)
class RecommendationResult:
    """Outcome of one pipeline run."""

    recommendations: list[Recommendation]
    used_fallback: bool = False
    dropped: int = 0
    fallback_reason: str | None = None

    def to_list(self) -> list[dict[str, Any]]:
        return [recommendation.to_dict() for recommendation in self.recommendations]


class RecommendationPipeline:
    """End-to-end recommendation orchestrator.

    Runs strictly in sequence: profile fetch, job sample fetch, prompt
    render, inference call, parse, validate, resolve and, when nothing
    resolved, the fallback fetch.
    """

    def __init__(
        self,
        *,
        store: JobStore,
        client: InferenceClient,
        sample_size: int = DEFAULT_MAX_JOBS,
        fallback: FallbackPolicy | None = None,
    ) -> None:
        self._store = store
        self._client = client
        self._sample_size = sample_size
        self._fallback = fallback or FallbackPolicy()
        self._logger = structlog.get_logger(__name__)

    def recommend(self, email: str) -> RecommendationResult:
        user = self._store.find_user_by_email(email)
        if user is None:
            raise UserNotFound(email)

        profile = assemble_profile(user)
        jobs = self._store.find_jobs(limit=self._sample_size)
        prompt = build_prompt(profile, jobs, max_jobs=self._sample_size)
        self._logger.info("recommend.started", email=email, job_sample=len(jobs))

        generated = self._client.generate(prompt)
        try:
            candidates = parse_matches(generated)
        except ParseError as exc:
            self._logger.error("recommend.parse_failed", error=str(exc), raw_text=generated)
            raise

        report = validate_matches(candidates)
        recommendations = assemble_recommendations(report.accepted, self._store)
        if recommendations:
            self._logger.info(
                "recommend.completed",
                email=email,
                count=len(recommendations),
                dropped=report.dropped_count,
            )
            return RecommendationResult(recommendations, dropped=report.dropped_count)

        reason = _fallback_reason(len(candidates), len(report.accepted))
        self._logger.warning("recommend.fallback", email=email, reason=reason)
        return RecommendationResult(
            self._fallback.recommend(self._store),
            used_fallback=True,
            dropped=report.dropped_count,
            fallback_reason=reason,
        )


def _fallback_reason(candidate_count: int, accepted_count: int) -> str:
    if candidate_count == 0:
        return "no_matches"
    if accepted_count == 0:
        return "all_invalid"
    return "unresolved"


class OutputWriter:
    """Persist recommendation results with run metadata."""

    def write(self, path: Path, *, email: str, result: RecommendationResult) -> None:
        payload = {
            "metadata": {
                "email": email,
                "count": len(result.recommendations),
                "used_fallback": result.used_fallback,
                "fallback_reason": result.fallback_reason,
                "dropped": result.dropped,
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
            "results": result.to_list(),
        }
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        entry = {"timestamp": pendulum.now().to_iso8601_string(), **record}
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(entry, ensure_ascii=False))
            handle.write("\n")
