from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class VocabularyWord:
    word: str
    definition: str = ""
    example: str = ""

    def to_dict(self) -> dict:
        return {"word": self.word, "definition": self.definition, "example": self.example}


@dataclass(frozen=True)
class VocabularyList:
    """Thực thể miền (domain): Bộ từ vựng theo tuần của một lớp."""

    list_id: int
    class_id: int
    week: str
    words: tuple[VocabularyWord, ...] = ()
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "list_id": self.list_id,
            "class_id": self.class_id,
            "week": self.week,
            "word_count": len(self.words),
            "words": [w.to_dict() for w in self.words],
        }


def words_from_dicts(items) -> tuple[VocabularyWord, ...]:
    return tuple(
        VocabularyWord(
            word=str(i.get("word") or ""),
            definition=str(i.get("definition") or ""),
            example=str(i.get("example") or ""),
        )
        for i in (items or [])
    )
