from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import AlertContext, AlertEntry


class AlertRule(ABC):
    """Strategy Pattern: one rule turns the current context into alerts."""

    @abstractmethod
    def evaluate(self, context: AlertContext) -> list[AlertEntry]:
        raise NotImplementedError
