# src/flagtower/engine/interaction.py
# Column-pick input -> session.cycle(). Picks can be queued by the input layer
# and drained once per frame, or handled on the spot.

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional


class InteractionController:
    def __init__(self, session) -> None:
        self.session = session
        self._q: Deque[int] = deque()
        self.rejected = 0

    def push(self, column_index: int) -> None:
        self._q.append(column_index)

    def pending(self) -> int:
        return len(self._q)

    def on_column_selected(self, column_index: int, now: Optional[float] = None) -> bool:
        # Out of range, finished round or animating column: ignored, not an error.
        ok = self.session.cycle(column_index, now)
        if not ok:
            self.rejected += 1
        return ok

    def tick(self, now: Optional[float] = None) -> List[bool]:
        out: List[bool] = []
        while self._q:
            out.append(self.on_column_selected(self._q.popleft(), now))
        return out
