"\"\"\"Typer CLI entrypoint for the recommendation pipeline.\"\"\""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .errors import (
    MissingCredentials,
    ParseError,
    RateLimited,
    RecommendationError,
    UpstreamError,
    UserNotFound,
)
from .logging import configure_logging
from .pipeline import AuditLogger, OutputWriter

app = typer.Typer(help="AI-assisted job recommendation CLI.")

EXIT_CODES: dict[type[RecommendationError], int] = {
    UserNotFound: 3,
    RateLimited: 4,
    ParseError: 5,
    UpstreamError: 6,
}


def exit_code_for(exc: RecommendationError) -> int:
    for error_type, code in EXIT_CODES.items():
        if isinstance(exc, error_type):
            return code
    return 1


@app.command()
def recommend(
    email: str = typer.Option(..., help="Email of the job seeker."),
    users: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Users JSONL path."),
    jobs: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="Jobs JSONL path."),
    output: Optional[Path] = typer.Option(
        None,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log renderer: json or console."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
    api_key: Optional[str] = typer.Option(None, envvar="HUGGINGFACE_API_KEY", help="Inference API key."),
    endpoint: Optional[str] = typer.Option(None, help="Inference endpoint URL."),
) -> None:
    """Recommend jobs for a stored user."""
    settings: dict[str, Any] = {}
    if config:
        with config.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
            if not isinstance(loaded, dict):
                raise typer.BadParameter("Config file must be a YAML object", param_hint="--config")
            settings = loaded

    _apply_overrides(
        settings,
        inference={"api_key": api_key, "endpoint": endpoint},
        store={
            "users_path": str(users) if users else None,
            "jobs_path": str(jobs) if jobs else None,
        },
    )
    store_settings = settings.get("store") or {}
    if not store_settings.get("users_path") or not store_settings.get("jobs_path"):
        raise typer.BadParameter("Both users and jobs paths are required", param_hint="--users/--jobs")

    try:
        configure_logging(log_level, log_format)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-format") from exc

    try:
        container = create_container(settings=settings)
        pipeline = container.pipeline()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    except MissingCredentials as exc:
        raise typer.BadParameter(str(exc), param_hint="--api-key") from exc

    audit_logger = AuditLogger(audit_log) if audit_log else None

    try:
        result = pipeline.recommend(email)
    except RecommendationError as exc:
        if audit_logger:
            audit_logger.append(
                {"email": email, "status": exc.status_code, "error": type(exc).__name__}
            )
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=exit_code_for(exc)) from exc

    if audit_logger:
        audit_logger.append(
            {
                "email": email,
                "status": 200,
                "job_ids": [rec.job_id for rec in result.recommendations],
                "used_fallback": result.used_fallback,
                "fallback_reason": result.fallback_reason,
                "dropped": result.dropped,
            }
        )
    if output:
        OutputWriter().write(output, email=email, result=result)

    typer.echo(json.dumps(result.to_list(), ensure_ascii=False, indent=2))


def _apply_overrides(settings: dict[str, Any], **sections: dict[str, Any]) -> None:
    for section, values in sections.items():
        current = settings.get(section) or {}
        if not isinstance(current, dict):
            raise typer.BadParameter(f"Config section {section!r} must be a mapping", param_hint="--config")
        current.update({key: value for key, value in values.items() if value is not None})
        settings[section] = current


def main() -> None:
    app()


if __name__ == "__main__":
    main()
