# src/flagtower/ui/hud.py
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..engine.timer import TimerPhase, TimerReading
from ..levels import TimerMode

@dataclass(frozen=True)
class HudView:
    title: str
    subtitle: str
    hint: str
    clock_text: str
    over_threshold: bool
    notice: Optional[str] = None

def clock_digits(seconds: float) -> Tuple[int, int]:
    """
    Split a non-negative duration into (minutes, seconds), flooring to whole
    seconds. Minutes are not wrapped at 60.
    """
    total = max(0, int(seconds))
    return total // 60, total % 60

def format_clock(seconds: float) -> str:
    m, s = clock_digits(seconds)
    return f"{m:02d}:{s:02d}"

def column_label(target: str, percentage: int) -> Tuple[str, str]:
    # (title, subtitle) pair for a column's base label
    return target, f"{percentage}%"

def completion_labels(completion: Sequence) -> list:
    return [column_label(c.target, c.percentage) for c in completion]

def build_hud(level, reading: TimerReading, notice: Optional[str] = None) -> HudView:
    if reading.phase is TimerPhase.EXPIRED:
        clock_text = "TIME'S UP"
    elif level.timer is TimerMode.NONE:
        clock_text = ""
    elif level.timer is TimerMode.BLITZ:
        # Count down in whole seconds still left: 00:00 only once expired.
        clock_text = format_clock(math.ceil(reading.seconds))
    else:
        clock_text = format_clock(reading.seconds)
    return HudView(
        title=level.title,
        subtitle=level.subtitle,
        hint=level.hint,
        clock_text=clock_text,
        over_threshold=reading.over_threshold,
        notice=notice,
    )
