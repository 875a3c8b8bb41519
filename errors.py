"""
Failure kinds and the error envelope returned by every endpoint.

Every external failure is caught where it happens and re-raised as an
ApiError. The web layer renders it as {"error": ..., "errorType": ...}.
User-facing copy always comes from ERROR_MESSAGES; only validation errors
carry a message specific to the request.
"""

from __future__ import annotations
from typing import Optional

VALIDATION = "validation"
FETCH_TIMEOUT = "fetch_timeout"
FETCH_ERROR = "fetch_error"
FETCH_FAILED = "fetch_failed"
CONTENT_EXTRACTION = "content_extraction"
CONFIG_ERROR = "config_error"
AI_ERROR = "ai_error"
AI_FORMAT_ERROR = "ai_format_error"
SERVER_ERROR = "server_error"

_FETCH_MESSAGE = "Не удалось загрузить статью по этой ссылке."

ERROR_MESSAGES = {
    VALIDATION: "Некорректный запрос.",
    FETCH_TIMEOUT: _FETCH_MESSAGE,
    FETCH_ERROR: _FETCH_MESSAGE,
    FETCH_FAILED: _FETCH_MESSAGE,
    CONTENT_EXTRACTION: (
        "Не удалось извлечь содержимое статьи. "
        "Возможно, страница не является статьей."
    ),
    CONFIG_ERROR: (
        "Сервис временно недоступен. "
        "Пожалуйста, обратитесь к администратору."
    ),
    AI_ERROR: "Не удалось получить ответ от AI. Попробуйте позже.",
    AI_FORMAT_ERROR: "Не удалось обработать ответ от AI. Попробуйте позже.",
    SERVER_ERROR: "Произошла ошибка при обработке запроса. Попробуйте позже.",
}

HTTP_STATUS = {
    VALIDATION: 400,
    FETCH_TIMEOUT: 408,
    FETCH_ERROR: 502,
    FETCH_FAILED: 502,
    CONTENT_EXTRACTION: 422,
    CONFIG_ERROR: 500,
    AI_ERROR: 502,
    AI_FORMAT_ERROR: 502,
    SERVER_ERROR: 500,
}


class ApiError(Exception):
    """A failure mapped to one of the kinds above."""

    def __init__(self, kind: str, message: Optional[str] = None):
        if kind not in ERROR_MESSAGES:
            raise ValueError(f"Unknown error kind: {kind}")
        self.kind = kind
        # Upstream wording never reaches the user, except for validation.
        if kind != VALIDATION or not message:
            message = ERROR_MESSAGES[kind]
        self.message = message
        super().__init__(message)

    @property
    def status(self) -> int:
        return HTTP_STATUS[self.kind]

    def to_dict(self) -> dict:
        return {"error": self.message, "errorType": self.kind}
