"""
Adapter: JSON File Record Store

Um arquivo `<coleção>.json` por coleção, dentro de `data_dir`.
Simples para demos; um único processo por diretório.
"""

import json
import logging
from pathlib import Path

from docflow.core.interfaces.record_store import Record
from docflow.infrastructure.store.base import BaseRecordStore

logger = logging.getLogger(__name__)


class JsonFileRecordStore(BaseRecordStore):
    """
    JSON file-based record store.
    Writes go to a temporary file first and are renamed into place.
    """

    def __init__(
        self,
        data_dir: str | Path = "data",
        latency_ms: int = 0,
        seed: dict[str, list[Record]] | None = None,
    ):
        super().__init__(latency_ms=latency_ms, seed=seed)
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def _load(self, collection: str) -> list[Record] | None:
        path = self._path(collection)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _save(self, collection: str, records: list[Record]) -> None:
        path = self._path(collection)
        tmp_file = path.with_suffix(".tmp")
        with open(tmp_file, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)
        tmp_file.replace(path)
