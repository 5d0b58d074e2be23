from __future__ import annotations

import pytest

from src.classroom_manager.classroom_manager.core.exceptions import NotFoundError, ValidationError
from src.classroom_manager.classroom_manager.vocabulary.model import VocabularyWord
from src.classroom_manager.classroom_manager.vocabulary.service import clean_words


def test_clean_words_drops_blank_rows_and_trims():
    words = clean_words([{"word": " apple ", "definition": " quả táo "}, {"word": ""}, {"definition": "orphan"}])
    assert words == [VocabularyWord(word="apple", definition="quả táo", example="")]


@pytest.mark.parametrize("items", [[], [{"word": "  "}], ["apple"]])
def test_clean_words_rejects_empty_or_malformed(items):
    with pytest.raises(ValidationError):
        clean_words(items)


def test_vocabulary_crud(container):
    class_id = container.class_service.create_class(name="IELTS A")
    svc = container.vocabulary_service

    list_id = svc.create_list(class_id=class_id, week="Tuần 1", words=[{"word": "apple"}, {"word": "pear"}])
    svc.update_list(list_id=list_id, week="Tuần 1", words=[{"word": "apple", "example": "An apple a day"}])

    (only,) = svc.list_for_class(class_id)
    assert only.to_dict()["word_count"] == 1
    assert only.words[0].example == "An apple a day"

    with pytest.raises(ValidationError):
        svc.update_list(list_id=list_id, week="", words=[{"word": "apple"}])
    with pytest.raises(NotFoundError):
        svc.update_list(list_id=999, week="Tuần 2", words=[{"word": "x"}])

    svc.delete_list(list_id)
    assert svc.list_for_class(class_id) == []
    with pytest.raises(NotFoundError):
        svc.list_for_class(999)
