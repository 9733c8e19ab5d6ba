"""Abstract repository for the saga journal."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storeorders.domain.model.saga import SagaEntry, SagaStatus, SagaStep


class SagaLogRepository(ABC):

    @abstractmethod
    def record(self, order_id: str, step: SagaStep, status: SagaStatus) -> SagaEntry:
        """Append an entry to the journal."""

    @abstractmethod
    def history(self, order_id: str) -> list[SagaEntry]:
        """Every entry for an order, oldest first."""

    @abstractmethod
    def pending(self) -> list[SagaEntry]:
        """Steps whose latest entry is STARTED (interrupted sagas)."""

    def last_completed(self, order_id: str, steps: tuple[SagaStep, ...] | None = None) -> SagaEntry | None:
        """Most recent COMPLETED entry for an order, optionally among ``steps``."""
        for entry in reversed(self.history(order_id)):
            if entry.status is not SagaStatus.COMPLETED:
                continue
            if steps is None or entry.step in steps:
                return entry
        return None
