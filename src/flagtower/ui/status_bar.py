from typing import Optional

from .hud import HudView

NORMAL_CLOCK = (240, 240, 240)
WARN_CLOCK = (255, 80, 80)

def clock_color(hud: HudView) -> tuple:
    return WARN_CLOCK if hud.over_threshold else NORMAL_CLOCK

def render_status_bar(screen, origin_xy: tuple, width: int, height: int,
                      hud: HudView, font: Optional["pygame.font.Font"] = None) -> None:
    """
    Draw a one-line bar: level title/subtitle on the left, clock on the right,
    any notice centred. Does not touch game state.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, width, height))
    font = font or pygame.font.SysFont(None, max(10, height * 2 // 3))

    def blit(text, x, color, anchor="left"):
        img = font.render(text, True, color)
        if anchor == "right":
            x -= img.get_width()
        elif anchor == "center":
            x -= img.get_width() // 2
        screen.blit(img, (ox + x, oy + (height - img.get_height()) // 2))

    pad = height // 3
    blit(f"{hud.title}  -  {hud.subtitle}", pad, (220, 220, 220))
    if hud.clock_text:
        blit(hud.clock_text, width - pad, clock_color(hud), anchor="right")
    if hud.notice:
        blit(hud.notice, width // 2, (255, 220, 0), anchor="center")
