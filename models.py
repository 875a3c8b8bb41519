"""
Data models for parsed articles and completion requests.

Nothing here is persisted; every object lives for one request.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class ParsedArticle:
    date: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CompletionRequest:
    system_instruction: str
    user_text: str

    def to_messages(self) -> list[dict]:
        return [
            {"role": "system", "content": self.system_instruction},
            {"role": "user", "content": self.user_text},
        ]
