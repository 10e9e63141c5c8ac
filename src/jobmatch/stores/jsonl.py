"\"\"\"JSON-lines file job store.\"\"\""

from __future__ import annotations

import json
from pathlib import Path
from typing import TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from ..schemas import JobRecord, UserRecord
from .memory import InMemoryJobStore

ModelT = TypeVar("ModelT", bound=BaseModel)


class RecordLoadError(ValueError):
    """Raised when a records file contains invalid lines."""

    def __init__(self, path: Path, errors: list[str], partial: list[BaseModel]):
        super().__init__(f"Record loading failed for {path}")
        self.path = path
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Record loading failed for {self.path}: {self.errors}"


def load_records(path: Path, model: type[ModelT]) -> list[ModelT]:
    """Load one ``model`` per non-blank line of ``path``.

    Every bad line is reported; the valid records are attached to the raised
    ``RecordLoadError`` as ``partial``.
    """

    records: list[ModelT] = []
    errors: list[str] = []
    with path.open("r", encoding="utf-8") as handle:
        for idx, line in enumerate(handle, start=1):
            raw = line.strip()
            if not raw:
                continue
            try:
                data = json.loads(raw)
            except json.JSONDecodeError as exc:
                errors.append(f"line {idx}: invalid JSON ({exc})")
                continue
            try:
                records.append(model.model_validate(data))
            except ValidationError as exc:
                errors.append(f"line {idx}: {exc.error_count()} validation error(s)")
                continue
    if errors:
        raise RecordLoadError(path, errors, records)
    return records


class JsonlJobStore(InMemoryJobStore):
    """Store reading users and jobs from JSON-lines exports."""

    def __init__(self, *, users_path: str | Path | None, jobs_path: str | Path | None) -> None:
        if not users_path or not jobs_path:
            raise ValueError("Both users_path and jobs_path are required")
        self._logger = structlog.get_logger(__name__)
        super().__init__(
            users=self._load(Path(users_path), UserRecord),
            jobs=self._load(Path(jobs_path), JobRecord),
        )

    def _load(self, path: Path, model: type[ModelT]) -> list[ModelT]:
        try:
            return load_records(path, model)
        except RecordLoadError as exc:
            self._logger.warning("store.partial_load", path=str(path), errors=exc.errors)
            return exc.partial  # type: ignore[return-value]
