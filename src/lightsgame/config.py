from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml

DEFAULTS = {
    "size": 3,
    "sizes": [3, 4, 5, 6, 7],
    "shuffle_factor": 3,
    "tick_interval": 0.1,
    "auto_hint": False,
    "persist_best": True,
    "seed": None,
    "best_store": None,
}


class GameConfig:
    """Game settings. Unknown keys are rejected so typos surface early."""

    def __init__(
        self,
        size: int = 3,
        sizes=(3, 4, 5, 6, 7),
        shuffle_factor: int = 3,
        tick_interval: Optional[float] = 0.1,
        auto_hint: bool = False,
        persist_best: bool = True,
        seed: Optional[int] = None,
        best_store: Optional[str] = None,
    ):
        self.sizes = tuple(int(s) for s in sizes)
        if not self.sizes or min(self.sizes) < 1:
            raise ValueError(f"Board sizes must be positive, got {sizes}")
        self.size = int(size)
        if self.size not in self.sizes:
            raise ValueError(
                f"Initial size {self.size} not among allowed sizes {self.sizes}"
            )
        self.shuffle_factor = int(shuffle_factor)
        if self.shuffle_factor < 1:
            raise ValueError(
                f"shuffle_factor must be >= 1, got {shuffle_factor}"
            )
        self.tick_interval = float(tick_interval) if tick_interval else None
        if self.tick_interval is not None and self.tick_interval < 0:
            raise ValueError(f"tick_interval must be >= 0, got {tick_interval}")
        self.auto_hint = bool(auto_hint)
        self.persist_best = bool(persist_best)
        self.seed = None if seed is None else int(seed)
        self.best_store = best_store

    @classmethod
    def from_dict(cls, cfg: dict | None) -> "GameConfig":
        cfg = dict(cfg or {})
        unknown = sorted(set(cfg) - set(DEFAULTS))
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**{**DEFAULTS, **cfg})

    @classmethod
    def load(cls, path: str | Path) -> "GameConfig":
        with open(path, "r", encoding="utf-8") as f:
            doc = yaml.safe_load(f) or {}
        return cls.from_dict(doc.get("game"))

    def shuffle_presses(self, n: int) -> int:
        return self.shuffle_factor * n * n

    def __repr__(self):
        return (
            f"GameConfig(size={self.size}, sizes={self.sizes}, "
            f"shuffle_factor={self.shuffle_factor})"
        )
