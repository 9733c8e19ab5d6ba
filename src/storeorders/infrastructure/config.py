"""Runtime settings, read from the environment or a ``.env`` file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from decouple import Choices, config

from storeorders.application.remove_order import DeleteMode

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    catalog_url: str
    delete_mode: DeleteMode
    page_size: int
    log_level: str
    log_format: str

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"

    @property
    def saga_log_file(self) -> Path:
        return self.data_dir / "saga_log.jsonl"


def load_settings() -> Settings:
    data_dir = Path(config("STORE_ORDERS_DATA_DIR", default=str(_DEFAULT_DATA_DIR)))
    return Settings(
        data_dir=data_dir,
        catalog_url=config(
            "STORE_ORDERS_CATALOG_URL",
            default=f"sqlite:///{data_dir / 'catalog.db'}",
        ),
        delete_mode=DeleteMode(
            config(
                "STORE_ORDERS_DELETE_MODE",
                default=DeleteMode.HARD.value,
                cast=Choices([mode.value for mode in DeleteMode]),
            )
        ),
        page_size=config("STORE_ORDERS_PAGE_SIZE", default=10, cast=int),
        log_level=config("LOG_LEVEL", default="INFO").upper(),
        log_format=config(
            "STORE_ORDERS_LOG_FORMAT",
            default="console",
            cast=Choices(["console", "json"]),
        ),
    )
