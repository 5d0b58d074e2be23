from __future__ import annotations

from typing import Mapping, Sequence

from ..classes.repository import ClassRepository
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import VocabularyList, VocabularyWord
from .repository import VocabularyRepository


def clean_words(items: Sequence[Mapping]) -> list[VocabularyWord]:
    """Drop rows whose word is blank; trim every field."""

    words: list[VocabularyWord] = []
    for item in items or []:
        if not isinstance(item, Mapping):
            raise ValidationError("Dữ liệu từ vựng không hợp lệ")
        word = str(item.get("word") or "").strip()
        if not word:
            continue
        words.append(
            VocabularyWord(
                word=word,
                definition=str(item.get("definition") or "").strip(),
                example=str(item.get("example") or "").strip(),
            )
        )
    if not words:
        raise ValidationError("Vui lòng thêm ít nhất một từ vựng!")
    return words


class VocabularyService:
    def __init__(self, vocabulary: VocabularyRepository, classes: ClassRepository):
        self._vocabulary = vocabulary
        self._classes = classes

    def _require_class(self, class_id: int) -> None:
        if not self._classes.get_by_id(int(class_id)):
            raise NotFoundError("Lớp học không tồn tại")

    def list_for_class(self, class_id: int) -> Sequence[VocabularyList]:
        self._require_class(class_id)
        return self._vocabulary.list_for_class(int(class_id))

    def create_list(self, *, class_id: int, week: str, words: Sequence[Mapping]) -> int:
        self._require_class(class_id)
        return self._vocabulary.create(
            class_id=int(class_id),
            week=require_non_empty(str(week or ""), "Tuần"),
            words=clean_words(words),
        )

    def update_list(self, *, list_id: int, week: str, words: Sequence[Mapping]) -> None:
        if not self._vocabulary.get_by_id(int(list_id)):
            raise NotFoundError("Bộ từ vựng không tồn tại")
        self._vocabulary.update(
            list_id=int(list_id),
            week=require_non_empty(str(week or ""), "Tuần"),
            words=clean_words(words),
        )

    def delete_list(self, list_id: int) -> None:
        if not self._vocabulary.delete(int(list_id)):
            raise ValidationError("Xóa bộ từ vựng thất bại")
