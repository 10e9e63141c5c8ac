"\"\"\"Pydantic configuration schema for CLI YAML input.\"\"\""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ENDPOINT = (
    "https://api-inference.huggingface.co/models/mistralai/Mixtral-8x7B-Instruct-v0.1"
)


class InferenceConfig(BaseModel):
    endpoint: str = DEFAULT_ENDPOINT
    api_key: str | None = None
    timeout: float = Field(30.0, gt=0)
    max_new_tokens: int = Field(1000, ge=1)
    temperature: float = Field(0.3, ge=0)
    max_retries: int = Field(0, ge=0)
    backoff_seconds: float = Field(0.5, ge=0)

    model_config = ConfigDict(extra="forbid")


class PipelineConfig(BaseModel):
    sample_size: int = Field(20, ge=1)
    fallback_size: int = Field(3, ge=0)
    fallback_score: int | float = 50

    model_config = ConfigDict(extra="forbid")


class StoreConfig(BaseModel):
    users_path: str | None = None
    jobs_path: str | None = None

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    inference: InferenceConfig = Field(default_factory=InferenceConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)

    def to_settings(self) -> dict[str, Any]:
        return self.model_dump(mode="python")


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValueError("Config must be a mapping")
    return AppConfig.model_validate(raw)
