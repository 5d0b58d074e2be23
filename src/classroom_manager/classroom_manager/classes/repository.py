from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ClassRecord


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[ClassRecord]:
        raise NotImplementedError

    def get_by_id(self, class_id: int) -> Optional[ClassRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        schedule: Optional[str],
        level: Optional[str],
        owner_id: Optional[int] = None,
    ) -> int:
        raise NotImplementedError

    def update(self, *, class_id: int, name: str, schedule: Optional[str], level: Optional[str]) -> bool:
        raise NotImplementedError

    def delete(self, class_id: int) -> bool:
        raise NotImplementedError
