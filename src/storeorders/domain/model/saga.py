"""Saga journal entries.

Creating, updating and removing an order changes two stores that share no
transaction. Each step that touches a store is journalled as STARTED and
then COMPLETED, so an interrupted call leaves a STARTED entry behind that
can be found and reconciled. A step the store rejected cleanly is closed
with FAILED and needs no reconciliation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class SagaStep(Enum):
    RESERVE = "RESERVE"
    RELEASE = "RELEASE"
    PERSIST = "PERSIST"
    DELETE = "DELETE"


class SagaStatus(Enum):
    STARTED = "STARTED"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class SagaEntry:
    order_id: str
    step: SagaStep
    status: SagaStatus
    recorded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
