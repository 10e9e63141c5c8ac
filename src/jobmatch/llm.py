"\"\"\"HTTP client for the text-generation inference service.\"\"\""

from __future__ import annotations

import http.client
import json
import time
from typing import Any, Callable
from urllib import error, request

import structlog

from .core.parsing import extract_generated_text
from .errors import MissingCredentials, ParseError, RateLimited, UpstreamError
from .schemas.config import DEFAULT_ENDPOINT


def build_inference_payload(
    prompt: str,
    *,
    max_new_tokens: int = 1000,
    temperature: float = 0.3,
) -> dict[str, Any]:
    """Construct the request body expected by the generation endpoint."""

    return {
        "inputs": prompt,
        "parameters": {
            "max_new_tokens": max_new_tokens,
            "temperature": temperature,
            "return_full_text": False,
            "use_cache": True,
        },
    }


class HTTPInferenceClient:
    """Bearer-authenticated client issuing one generation request per prompt.

    ``max_retries`` enables bounded exponential backoff for ``UpstreamError``
    only. Rate limiting and malformed responses are never retried, and the
    loop stops at the first successful response.
    """

    def __init__(
        self,
        api_key: str | None,
        endpoint: str = DEFAULT_ENDPOINT,
        *,
        timeout: float = 30.0,
        max_new_tokens: int = 1000,
        temperature: float = 0.3,
        max_retries: int = 0,
        backoff_seconds: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if not api_key:
            raise MissingCredentials("An inference API key is required")
        self._api_key = api_key
        self._endpoint = endpoint
        self._timeout = timeout
        self._max_new_tokens = max_new_tokens
        self._temperature = temperature
        self._max_retries = max_retries
        self._backoff_seconds = backoff_seconds
        self._sleep = sleep
        self._logger = structlog.get_logger(__name__)

    def generate(self, prompt: str) -> str:
        if not prompt or not prompt.strip():
            raise ValueError("prompt must be non-empty")
        payload = build_inference_payload(
            prompt,
            max_new_tokens=self._max_new_tokens,
            temperature=self._temperature,
        )
        attempt = 0
        while True:
            try:
                body = self._post(payload)
                break
            except UpstreamError as exc:
                if attempt >= self._max_retries:
                    raise
                delay = self._backoff_seconds * (2**attempt)
                attempt += 1
                self._logger.warning(
                    "inference.retrying", attempt=attempt, delay=delay, error=str(exc)
                )
                self._sleep(delay)
        return extract_generated_text(body)

    def _post(self, payload: dict[str, Any]) -> Any:
        data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }
        req = request.Request(self._endpoint, data=data, headers=headers, method="POST")
        try:
            with request.urlopen(req, timeout=self._timeout) as resp:
                raw = resp.read()
        except error.HTTPError as exc:
            detail = _read_error_body(exc)
            self._logger.warning("inference.request_failed", status=exc.code, body=detail)
            if exc.code == 429:
                raise RateLimited() from exc
            raise UpstreamError(f"Inference service returned HTTP {exc.code}") from exc
        except (error.URLError, TimeoutError, OSError, http.client.HTTPException) as exc:
            self._logger.warning("inference.request_failed", error=str(exc))
            raise UpstreamError(f"Inference service unreachable: {exc}") from exc

        try:
            return json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise ParseError("Inference response is not valid UTF-8") from exc
        except (ValueError, RecursionError) as exc:
            raise ParseError("Inference response is not valid JSON") from exc


def _read_error_body(exc: error.HTTPError) -> str:
    try:
        return exc.read().decode("utf-8", errors="replace")[:500]
    except Exception:  # noqa: BLE001 - diagnostics only
        return ""
