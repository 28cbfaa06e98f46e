from __future__ import annotations

from pathlib import Path
from typing import Protocol

import yaml

KINDS = ("moves", "time")


def _check_kind(kind: str) -> None:
    if kind not in KINDS:
        raise ValueError(f"Unknown best-stat kind: {kind}")


class BestStore(Protocol):
    def load_best(self, size: int, kind: str) -> float | None: ...
    def persist_best(self, size: int, kind: str, value: float) -> None: ...


class MemoryBestStore(BestStore):
    """Best records kept for the lifetime of the process."""

    def __init__(self, records: dict | None = None):
        self.records: dict[int, dict[str, float]] = {}
        for size, stats in (records or {}).items():
            self.records[int(size)] = dict(stats)

    def load_best(self, size: int, kind: str) -> float | None:
        _check_kind(kind)
        return self.records.get(int(size), {}).get(kind)

    def persist_best(self, size: int, kind: str, value: float) -> None:
        _check_kind(kind)
        self.records.setdefault(int(size), {})[kind] = value


class YamlBestStore(MemoryBestStore):
    """Best records in a YAML file: ``{size: {moves: int, time: float}}``.

    The file is read once on construction and rewritten on every update.
    A missing or empty file means no records yet.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        records = None
        if self.path.exists():
            with open(self.path, "r", encoding="utf-8") as f:
                records = yaml.safe_load(f)
            if records is not None and not isinstance(records, dict):
                raise ValueError(f"Malformed best-score file: {self.path}")
        super().__init__(records)

    def persist_best(self, size: int, kind: str, value: float) -> None:
        super().persist_best(size, kind, value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.records, f, sort_keys=True)
