"""
Completion ability — one chat-completion call to OpenRouter.

Plain requests against the OpenAI-compatible endpoint. No retries and,
unless COMPLETION_TIMEOUT is set, no timeout.
"""

from __future__ import annotations
import logging

import requests

import config
from errors import ApiError, AI_ERROR, AI_FORMAT_ERROR, CONFIG_ERROR
from models import CompletionRequest

log = logging.getLogger(__name__)


def require_api_key() -> str:
    """Return the configured API key or fail with config_error."""
    api_key = (config.OPENROUTER_API_KEY or "").strip()
    if not api_key:
        log.error("OPENROUTER_API_KEY is not configured")
        raise ApiError(CONFIG_ERROR)
    return api_key


def _completion_text(data) -> str:
    try:
        text = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ApiError(AI_FORMAT_ERROR) from e
    if not isinstance(text, str):
        raise ApiError(AI_FORMAT_ERROR)
    return text


def complete(request: CompletionRequest) -> str:
    """Send the request and return the completion text unmodified."""
    api_key = require_api_key()
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
        "HTTP-Referer": config.OPENROUTER_HTTP_REFERER,
        "X-Title": config.APP_TITLE,
    }
    payload = {
        "model": config.OPENROUTER_MODEL,
        "messages": request.to_messages(),
    }

    try:
        resp = requests.post(
            config.OPENROUTER_URL,
            headers=headers,
            json=payload,
            timeout=config.COMPLETION_TIMEOUT,
        )
    except requests.RequestException as e:
        log.error(f"OpenRouter request failed: {e}")
        raise ApiError(AI_ERROR) from e

    if not resp.ok:
        log.error(f"OpenRouter API error {resp.status_code}: {resp.text[:500]}")
        raise ApiError(AI_ERROR)

    try:
        data = resp.json()
    except ValueError as e:
        log.error(f"OpenRouter returned non-JSON body: {resp.text[:200]}")
        raise ApiError(AI_FORMAT_ERROR) from e

    text = _completion_text(data)
    log.info(f"Completion received ({len(text)} chars, model={config.OPENROUTER_MODEL})")
    return text
