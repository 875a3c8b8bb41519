"""
Tasks — the four completion jobs a user can pick, and the builder that
turns a task plus its input into a CompletionRequest.

Every task differs only in its fixed instruction, where its input comes
from, and the key its result is returned under.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from models import CompletionRequest, ParsedArticle


@dataclass(frozen=True)
class Task:
    name: str
    instruction: str
    result_key: str
    source: str = "url"  # url (fetch + parse an article) or content (raw text)
    include_source_url: bool = False


SUMMARY = Task(
    name="summary",
    result_key="summary",
    instruction=(
        "Ты аналитик статей. Напиши краткое резюме статьи на русском языке "
        "(2-3 абзаца). Опиши основную тему, ключевые моменты и выводы."
    ),
)

THESES = Task(
    name="theses",
    result_key="theses",
    instruction=(
        "Ты аналитик статей. Выдели главные тезисы статьи на русском языке "
        "в виде маркированного списка из 5-10 пунктов. Каждый тезис должен быть "
        "одним законченным утверждением без вводных слов."
    ),
)

TELEGRAM = Task(
    name="telegram",
    result_key="telegramPost",
    include_source_url=True,
    instruction=(
        "Ты копирайтер для Telegram-канала. Создай пост на русском языке на "
        "основе статьи. Пост должен быть интересным, с эмодзи, хэштегами и "
        "призывом к действию. Длина: 2-3 абзаца. Используй разметку Markdown. "
        "В конце поста обязательно добавь ссылку на источник статьи в формате "
        "Markdown: [Источник](URL)."
    ),
)

TRANSLATE = Task(
    name="translate",
    result_key="translation",
    source="content",
    instruction=(
        "Ты профессиональный переводчик. Переведи следующий текст с "
        "английского на русский язык. Сохрани структуру и форматирование "
        "текста. Переведи точно и естественно."
    ),
)

TASKS = {t.name: t for t in (SUMMARY, THESES, TELEGRAM, TRANSLATE)}


def article_text(article: ParsedArticle, url: Optional[str] = None) -> str:
    """Labelled sections for the user message, skipping missing fields."""
    parts = []
    if article.title:
        parts.append(f"Заголовок: {article.title}")
    if article.date:
        parts.append(f"Дата: {article.date}")
    parts.append(f"Контент: {article.content}")
    if url:
        parts.append(f"URL источника: {url}")
    return "\n\n".join(parts)


def build_request(
    task: Task,
    article: Optional[ParsedArticle] = None,
    url: Optional[str] = None,
    text: Optional[str] = None,
) -> CompletionRequest:
    if task.source == "content":
        if text is None:
            raise ValueError(f"Task {task.name} needs raw text")
        return CompletionRequest(task.instruction, text)

    if article is None:
        raise ValueError(f"Task {task.name} needs a parsed article")
    source_url = url if task.include_source_url else None
    return CompletionRequest(task.instruction, article_text(article, source_url))
