"""JSON-lines implementation of SagaLogRepository (append-only).

Each entry is one JSON object on its own line, so recording an entry
appends to the file and never rewrites what is already there.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from storeorders.domain.model.saga import SagaEntry, SagaStatus, SagaStep
from storeorders.domain.repository.saga_log_repository import SagaLogRepository


class JsonSagaLogRepository(SagaLogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- SagaLogRepository interface ------------------------------------------

    def record(self, order_id: str, step: SagaStep, status: SagaStatus) -> SagaEntry:
        entry = SagaEntry(order_id=order_id, step=step, status=status)
        with self._file_path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(self._to_raw(entry)) + "\n")
        return entry

    def history(self, order_id: str) -> list[SagaEntry]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["order_id"] == order_id
        ]

    def pending(self) -> list[SagaEntry]:
        latest: dict[tuple[str, str], dict] = {}
        for raw in self._load_raw():
            latest[(raw["order_id"], raw["step"])] = raw
        return [
            self._to_domain(raw)
            for raw in latest.values()
            if raw["status"] == SagaStatus.STARTED.value
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(entry: SagaEntry) -> dict:
        return {
            "order_id": entry.order_id,
            "step": entry.step.value,
            "status": entry.status.value,
            "recorded_at": entry.recorded_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> SagaEntry:
        return SagaEntry(
            order_id=raw["order_id"],
            step=SagaStep(raw["step"]),
            status=SagaStatus(raw["status"]),
            recorded_at=datetime.fromisoformat(raw["recorded_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        with self._file_path.open(encoding="utf-8") as fh:
            return [json.loads(line) for line in fh if line.strip()]

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.touch()
