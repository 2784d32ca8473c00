# src/flagtower/render/labels.py
from __future__ import annotations

from functools import lru_cache
from typing import Optional, Protocol, Tuple

from PIL import Image, ImageDraw, ImageFont

from ..countries import AFRICA, AMERICAS, ASIA, EUROPE, OCEANIA

RGBA = Tuple[int, int, int, int]

CONTINENT_COLORS = {
    AFRICA:   (230, 160,  40, 255),
    AMERICAS: (220,  60,  60, 255),
    ASIA:     (240, 210,  60, 255),
    EUROPE:   ( 60, 110, 220, 255),
    OCEANIA:  ( 40, 170, 120, 255),
}

def color_for(continent: str) -> RGBA:
    return CONTINENT_COLORS.get(continent, (150, 150, 150, 255))

class LabelProvider(Protocol):
    def render_text(self, title: str, subtitle: Optional[str] = None) -> Image.Image: ...

class PillowLabelProvider:
    """
    Text labels as RGBA Pillow images:
      - title on the first line, optional subtitle (e.g. "70%") below
      - fixed size so the renderer can scale one texture per label
      - cached by (title, subtitle); images are shared, do not mutate them
    """
    def __init__(self, size: Tuple[int, int] = (256, 128),
                 background: RGBA = (20, 24, 30, 220),
                 foreground: RGBA = (255, 255, 255, 255)):
        self.size = size
        self.background = background
        self.foreground = foreground
        self.font = ImageFont.load_default()

    @lru_cache(maxsize=256)
    def render_text(self, title: str, subtitle: Optional[str] = None) -> Image.Image:
        w, h = self.size
        img = Image.new("RGBA", (w, h), self.background)
        draw = ImageDraw.Draw(img)
        lines = [title] if not subtitle else [title, subtitle]
        line_h = h / (len(lines) + 1)
        for i, text in enumerate(lines):
            tw = draw.textlength(text, font=self.font)
            y = line_h * (i + 1) - 6
            draw.text(((w - tw) / 2, y), text, fill=self.foreground, font=self.font)
        return img

    def render_cube(self, code: str, continent: str, show_text: bool = True) -> Image.Image:
        # Stand-in cube face: continent colour plus the ISO code (no flag assets).
        return _cube_face(code.upper() if show_text else "", color_for(continent), self.size[1])

@lru_cache(maxsize=512)
def _cube_face(text: str, color: RGBA, size: int) -> Image.Image:
    img = Image.new("RGBA", (size, size), color)
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, size - 1, size - 1), outline=(0, 0, 0, 255))
    if text:
        font = ImageFont.load_default()
        tw = draw.textlength(text, font=font)
        draw.text(((size - tw) / 2, size / 2 - 6), text, fill=(0, 0, 0, 255), font=font)
    return img
