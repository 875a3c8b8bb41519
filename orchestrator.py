"""
Orchestrator — runs one task per request.

Pipeline for article tasks:
  idle → fetching → parsed → completing → done
Translate skips the page entirely:
  idle → translating → done

The page fetch and the completion call are strictly sequential; the
first failure ends the request (fetch_*, content_extraction, ai_error,
ai_format_error). Nothing is retried and nothing is kept between requests.
"""

from __future__ import annotations
import logging
from typing import Callable, Optional
from urllib.parse import urlparse

import config
from abilities import article as article_ability
from abilities import completion
from errors import ApiError, CONTENT_EXTRACTION, VALIDATION
from models import CompletionRequest, ParsedArticle
from tasks import TASKS, Task, build_request

log = logging.getLogger(__name__)


def _require_text(payload: dict, field: str, message: str) -> str:
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ApiError(VALIDATION, message)
    return value


def validate_url(url) -> str:
    if not isinstance(url, str) or not url.strip():
        raise ApiError(VALIDATION, "Не передан URL")
    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ApiError(VALIDATION, "Некорректный URL: ожидается адрес http(s)://")
    return url


class Orchestrator:
    def __init__(
        self,
        fetch: Optional[Callable[[str, Optional[float]], str]] = None,
        complete: Optional[Callable[[CompletionRequest], str]] = None,
        fetch_timeout: Optional[float] = None,
    ):
        self._fetch = fetch or article_ability.fetch_html
        self._complete = complete or completion.complete
        self.fetch_timeout = config.FETCH_TIMEOUT if fetch_timeout is None else fetch_timeout

    # ── Fetch + parse ───────────────────────────────────────────

    def fetch_article(self, url) -> ParsedArticle:
        """Fetch a page and extract date, title and content.

        Raises ApiError (validation, fetch_timeout, fetch_error, fetch_failed,
        content_extraction).
        """
        url = validate_url(url)
        log.info(f"fetching {url}")
        html = self._fetch(url, self.fetch_timeout)

        parsed = article_ability.parse_article(html)
        if not parsed.content:
            log.warning(f"No usable content at {url}")
            raise ApiError(CONTENT_EXTRACTION)

        log.info(
            f"parsed {url}: title={parsed.title!r} date={parsed.date!r} "
            f"content={len(parsed.content)} chars"
        )
        return parsed

    def parse(self, payload: dict) -> dict:
        return self.fetch_article(payload.get("url")).to_dict()

    # ── Completion tasks ────────────────────────────────────────

    def get_task(self, name: str) -> Task:
        task = TASKS.get(name)
        if task is None:
            raise ApiError(VALIDATION, f"Неизвестная задача: {name}")
        return task

    def run_task(self, name: str, payload: dict) -> dict:
        """Run one of the completion tasks and return {result_key: text}."""
        task = self.get_task(name)

        if task.source == "content":
            text = _require_text(payload, "content", "Не передан контент для перевода")
            completion.require_api_key()
            log.info(f"[{task.name}] translating {len(text)} chars")
            request = build_request(task, text=text)
        else:
            url = validate_url(payload.get("url"))
            # Fail before touching the network when the key is missing.
            completion.require_api_key()
            parsed = self.fetch_article(url)
            log.info(f"[{task.name}] completing")
            request = build_request(task, article=parsed, url=url)

        result = self._complete(request)
        log.info(f"[{task.name}] done")
        return {task.result_key: result}
