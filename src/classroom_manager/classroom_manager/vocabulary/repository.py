from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import VocabularyList, VocabularyWord


class VocabularyRepository(Protocol):
    def list_for_class(self, class_id: int) -> Sequence[VocabularyList]:
        """Newest first."""

        raise NotImplementedError

    def get_by_id(self, list_id: int) -> Optional[VocabularyList]:
        raise NotImplementedError

    def create(self, *, class_id: int, week: str, words: Sequence[VocabularyWord]) -> int:
        raise NotImplementedError

    def update(self, *, list_id: int, week: str, words: Sequence[VocabularyWord]) -> bool:
        raise NotImplementedError

    def delete(self, list_id: int) -> bool:
        raise NotImplementedError
