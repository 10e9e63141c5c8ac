"\"\"\"Dependency injection container for the recommendation pipeline.\"\"\""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .core import FallbackPolicy
from .llm import HTTPInferenceClient
from .pipeline import RecommendationPipeline
from .schemas.config import load_config
from .stores import JobStore, JsonlJobStore


class RecommendationContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    job_store = providers.Singleton(
        JsonlJobStore,
        users_path=config.store.users_path,
        jobs_path=config.store.jobs_path,
    )

    inference_client = providers.Singleton(
        HTTPInferenceClient,
        api_key=config.inference.api_key,
        endpoint=config.inference.endpoint,
        timeout=config.inference.timeout,
        max_new_tokens=config.inference.max_new_tokens,
        temperature=config.inference.temperature,
        max_retries=config.inference.max_retries,
        backoff_seconds=config.inference.backoff_seconds,
    )

    fallback_policy = providers.Singleton(
        FallbackPolicy,
        size=config.pipeline.fallback_size,
        score=config.pipeline.fallback_score,
    )

    pipeline = providers.Factory(
        RecommendationPipeline,
        store=job_store,
        client=inference_client,
        sample_size=config.pipeline.sample_size,
        fallback=fallback_policy,
    )


def create_container(
    *,
    settings: dict[str, Any] | None = None,
    store: JobStore | None = None,
    client: Any | None = None,
) -> RecommendationContainer:
    """Instantiate container from validated settings with optional overrides."""

    container = RecommendationContainer()
    container.config.from_dict(load_config(settings or {}).to_settings())

    if store is not None:
        container.job_store.override(providers.Object(store))
    if client is not None:
        container.inference_client.override(providers.Object(client))

    return container
