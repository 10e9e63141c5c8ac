from __future__ import annotations

import io
import json
from email.message import Message
from pathlib import Path
from urllib import error

import pytest
from typer.testing import CliRunner

from jobmatch import llm
from jobmatch.cli import app

JOB_A = "65a1f0c2e4b0a1b2c3d4e5f1"
JOB_B = "65a1f0c2e4b0a1b2c3d4e5f2"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def store_files(tmp_path: Path) -> tuple[Path, Path]:
    users_path = tmp_path / "users.jsonl"
    jobs_path = tmp_path / "jobs.jsonl"
    users_path.write_text(
        json.dumps({"email": "jane@example.com", "name": "Jane", "profile": {"skills": ["Go", "SQL"]}}),
        encoding="utf-8",
    )
    jobs_path.write_text(
        "\n".join(
            json.dumps(job)
            for job in [
                {"_id": JOB_A, "title": "Go Developer", "company": "Acme"},
                {"_id": JOB_B, "title": "Data Analyst", "company": "Globex"},
            ]
        ),
        encoding="utf-8",
    )
    return users_path, jobs_path


class FakeResponse:
    def __init__(self, body: object) -> None:
        self._raw = json.dumps(body).encode("utf-8")

    def read(self) -> bytes:
        return self._raw

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None


def install_model(monkeypatch, generated_text: str) -> list:
    calls: list = []

    def fake_urlopen(req, timeout=None):
        calls.append(req)
        return FakeResponse([{"generated_text": generated_text}])

    monkeypatch.setattr(llm.request, "urlopen", fake_urlopen)
    return calls


def test_cli_writes_recommendations(tmp_path, runner, store_files, monkeypatch):
    users_path, jobs_path = store_files
    output_path = tmp_path / "out" / "recommendations.json"
    audit_path = tmp_path / "audit.jsonl"
    generated = json.dumps({"matches": [{"job_id": JOB_B, "match_score": 77}]})
    calls = install_model(monkeypatch, f"Result: {generated}")

    result = runner.invoke(
        app,
        [
            "--email", "jane@example.com",
            "--users", str(users_path),
            "--jobs", str(jobs_path),
            "--output", str(output_path),
            "--audit-log", str(audit_path),
            "--api-key", "secret",
        ],
    )

    assert result.exit_code == 0, result.output
    assert len(calls) == 1
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert rendered["metadata"]["email"] == "jane@example.com"
    assert rendered["metadata"]["used_fallback"] is False
    assert rendered["results"][0]["job_id"] == JOB_B
    assert rendered["results"][0]["jobDetails"]["title"] == "Data Analyst"
    audit_entry = json.loads(audit_path.read_text(encoding="utf-8").splitlines()[0])
    assert audit_entry["status"] == 200
    assert audit_entry["job_ids"] == [JOB_B]


def test_cli_unknown_user_exit_code(runner, store_files, monkeypatch):
    users_path, jobs_path = store_files
    calls = install_model(monkeypatch, "{}")

    result = runner.invoke(
        app,
        ["--email", "ghost@example.com", "--users", str(users_path), "--jobs", str(jobs_path), "--api-key", "secret"],
    )

    assert result.exit_code == 3
    assert calls == []


def test_cli_parse_failure_exit_code(runner, store_files, monkeypatch):
    users_path, jobs_path = store_files
    install_model(monkeypatch, "no structured answer")

    result = runner.invoke(
        app,
        ["--email", "jane@example.com", "--users", str(users_path), "--jobs", str(jobs_path), "--api-key", "secret"],
    )

    assert result.exit_code == 5


def test_cli_requires_api_key(runner, store_files, monkeypatch):
    users_path, jobs_path = store_files
    monkeypatch.delenv("HUGGINGFACE_API_KEY", raising=False)
    calls = install_model(monkeypatch, "{}")

    result = runner.invoke(
        app,
        ["--email", "jane@example.com", "--users", str(users_path), "--jobs", str(jobs_path)],
    )

    assert result.exit_code == 2
    assert calls == []


def test_cli_reads_yaml_config(tmp_path, runner, store_files, monkeypatch):
    users_path, jobs_path = store_files
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "inference:\n"
        "  api_key: from-config\n"
        "  endpoint: https://example.test/generate\n"
        "store:\n"
        f"  users_path: {users_path}\n"
        f"  jobs_path: {jobs_path}\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("HUGGINGFACE_API_KEY", raising=False)
    calls = install_model(monkeypatch, '{"matches": []}')

    result = runner.invoke(app, ["--email", "jane@example.com", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert calls[0].full_url == "https://example.test/generate"
    assert calls[0].get_header("Authorization") == "Bearer from-config"


def test_cli_rate_limited_exit_code(runner, store_files, monkeypatch):
    users_path, jobs_path = store_files

    def throttled(req, timeout=None):
        raise error.HTTPError(req.full_url, 429, "Too Many Requests", Message(), io.BytesIO(b""))

    monkeypatch.setattr(llm.request, "urlopen", throttled)

    result = runner.invoke(
        app,
        ["--email", "jane@example.com", "--users", str(users_path), "--jobs", str(jobs_path), "--api-key", "secret"],
    )

    assert result.exit_code == 4


def test_cli_rejects_unknown_log_format(runner, store_files, monkeypatch):
    users_path, jobs_path = store_files
    calls = install_model(monkeypatch, "{}")

    result = runner.invoke(
        app,
        [
            "--email", "jane@example.com",
            "--users", str(users_path),
            "--jobs", str(jobs_path),
            "--api-key", "secret",
            "--log-format", "xml",
        ],
    )

    assert result.exit_code == 2
    assert calls == []
