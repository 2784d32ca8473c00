# src/flagtower/progress.py
# Persisted level index. Storage problems never reach the player: reads fall
# back to level 0 and failed writes are logged and dropped.

from __future__ import annotations

import json
import logging
import os
from typing import Optional, Tuple

from .levels import LEVELS, LevelDefinition, clamp_index

logger = logging.getLogger(__name__)

STORAGE_KEY = "flagtower.level_index"

class MemoryProgressStore:
    def __init__(self, value: Optional[int] = None) -> None:
        self.value = value

    def read(self) -> Optional[int]:
        return self.value

    def write(self, index: int) -> None:
        self.value = index

class JsonProgressStore:
    """
    One integer under STORAGE_KEY in a JSON object; other keys in the file are
    preserved on write.
    """
    def __init__(self, path: str) -> None:
        self.path = path

    def _load(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return data if isinstance(data, dict) else {}
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("progress file %s unreadable (%s), starting fresh", self.path, e)
            return {}

    def read(self) -> Optional[int]:
        raw = self._load().get(STORAGE_KEY)
        # bool is an int subclass; reject it along with strings/floats
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        if raw is not None:
            logger.warning("ignoring corrupt level index %r", raw)
        return None

    def write(self, index: int) -> None:
        base = self._load()
        base[STORAGE_KEY] = int(index)
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(base, f, indent=2)
        except OSError as e:
            logger.warning("could not save progress to %s: %s", self.path, e)

class Progression:
    def __init__(self, levels: Tuple[LevelDefinition, ...] = LEVELS, store=None) -> None:
        self.levels = levels
        self.store = store if store is not None else MemoryProgressStore()
        self.current_index = self._load()

    def _load(self) -> int:
        try:
            raw = self.store.read()
        except Exception as e:  # third-party stores may raise anything
            logger.warning("progress store read failed: %s", e)
            return 0
        # Pluggable stores may hand back strings, floats or bools; treat as unset.
        if not isinstance(raw, int) or isinstance(raw, bool):
            if raw is not None:
                logger.warning("ignoring non-integer level index %r", raw)
            return 0
        if not (0 <= raw < len(self.levels)):
            return 0
        return raw

    def _persist(self) -> None:
        try:
            self.store.write(self.current_index)
        except Exception as e:
            logger.warning("progress store write failed: %s", e)

    @property
    def current(self) -> LevelDefinition:
        return self.levels[self.current_index]

    def advance(self) -> bool:
        """Move to the next level; returns True when the table wrapped to the start."""
        nxt = self.current_index + 1
        wrapped = nxt >= len(self.levels)
        self.current_index = 0 if wrapped else nxt
        self._persist()
        return wrapped

    def jump_to(self, index: int) -> LevelDefinition:
        self.current_index = clamp_index(index, self.levels)
        self._persist()
        return self.current
