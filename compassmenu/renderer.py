"""Raylib renderer - draws the ring from the state the controller pushes.

The controller only calls the ``Renderer`` methods; this class records what
they ask for and ``draw()`` paints it once per frame.
"""

from __future__ import annotations
import math
from typing import List, Optional

from .rl_compat import (
    rl, make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
    draw_text as RL_DrawText, measure_text as RL_MeasureText,
)
from .config import (
    SLOT_COUNT, RING_OUTER_RADIUS, RING_HOLE_RADIUS, RING_ICON_RADIUS, RING_ICON_SIZE,
    RING_MARKER_RADIUS, RING_MARKER_SIZE, LABEL_DISTANCE, LABEL_FONT_SIZE, LABEL_PADDING,
    COLOR_RING, COLOR_HOLE, COLOR_ICON, COLOR_MARKER, COLOR_BALLOON, COLOR_BALLOON_TEXT,
)
from .geometry import SECTOR_BOUNDARIES, AffineTransform, Vector2D, sector_direction
from .interfaces import Renderer

# Slots whose label balloon grows to the right of its anchor
_LEFT_TO_RIGHT = (True, True, False, False, False, False, True, True)


def icon_caption(icon: str) -> str:
    """Short text standing in for an icon reference such as ``#open_link``."""
    name = icon.lstrip("#")
    words = [w for w in name.split("_") if w]
    if len(words) > 1:
        return "".join(w[0] for w in words[:2]).upper()
    return name[:2].capitalize()


class RaylibRenderer(Renderer):
    """Keeps slot state pushed by the controller and draws it with raylib."""

    def __init__(self, outer_radius: float = RING_OUTER_RADIUS,
                 hole_radius: float = RING_HOLE_RADIUS):
        self.outer_radius = outer_radius
        self.hole_radius = hole_radius
        self.visible = False
        self.offset = Vector2D()
        self.icons: List[Optional[str]] = [None] * SLOT_COUNT
        self.markers: List[bool] = [False] * SLOT_COUNT
        self.labels: List[Optional[str]] = [None] * SLOT_COUNT

    # ═══════════════════════════════════════════════════════════════════════
    # Renderer interface
    # ═══════════════════════════════════════════════════════════════════════

    def show_container(self) -> None:
        self.visible = True

    def hide_container(self) -> None:
        self.visible = False

    def move_container_by(self, movement: Vector2D) -> None:
        self.offset = self.offset + movement

    def set_icon(self, slot: int, icon: Optional[str]) -> None:
        self.icons[slot] = icon

    def set_marker_visible(self, slot: int, visible: bool) -> None:
        self.markers[slot] = visible

    def set_label_text(self, slot: int, text: Optional[str]) -> None:
        self.labels[slot] = text

    # ═══════════════════════════════════════════════════════════════════════
    # Drawing
    # ═══════════════════════════════════════════════════════════════════════

    def draw(self, to_screen: AffineTransform = AffineTransform()) -> None:
        """Draw the ring between Begin/EndDrawing.

        The offset is in local (document) coordinates; to_screen maps it to
        window coordinates, usually the inverse of the controller's
        client_to_local.
        """
        if not self.visible:
            return
        center = to_screen.apply(self.offset)

        rl.DrawCircleV(RL_V2(center.x, center.y), self.outer_radius, RL_Color(COLOR_RING))
        self._draw_separators(center)
        rl.DrawCircleV(RL_V2(center.x, center.y), self.hole_radius, RL_Color(COLOR_HOLE))

        for i in range(SLOT_COUNT):
            if self.icons[i] is not None:
                self._draw_icon(center, i, self.icons[i])
            if self.markers[i]:
                p = center + sector_direction(i).scale(RING_MARKER_RADIUS)
                rl.DrawCircleV(RL_V2(p.x, p.y), RING_MARKER_SIZE, RL_Color(COLOR_MARKER))

        for i in range(SLOT_COUNT):
            if self.labels[i]:
                self._draw_balloon(center, i, self.labels[i])

    def _draw_separators(self, center: Vector2D) -> None:
        color = RL_Color(COLOR_HOLE)
        for theta in SECTOR_BOUNDARIES:
            d = Vector2D(math.cos(theta), math.sin(theta))
            start = center + d.scale(self.hole_radius)
            end = center + d.scale(self.outer_radius)
            rl.DrawLineV(RL_V2(start.x, start.y), RL_V2(end.x, end.y), color)

    def _draw_icon(self, center: Vector2D, slot: int, icon: str) -> None:
        caption = icon_caption(icon)
        p = center + sector_direction(slot).scale(RING_ICON_RADIUS)
        w = RL_MeasureText(caption, RING_ICON_SIZE)
        RL_DrawText(caption, int(p.x - w / 2), int(p.y - RING_ICON_SIZE / 2),
                    RING_ICON_SIZE, RL_Color(COLOR_ICON))

    def _draw_balloon(self, center: Vector2D, slot: int, text: str) -> None:
        anchor = center + sector_direction(slot).scale(LABEL_DISTANCE)
        w = RL_MeasureText(text, LABEL_FONT_SIZE) + 2 * LABEL_PADDING
        h = LABEL_FONT_SIZE + 2 * LABEL_PADDING
        x = anchor.x if _LEFT_TO_RIGHT[slot] else anchor.x - w
        y = anchor.y - h / 2
        rl.DrawRectangleRounded(RL_Rect(x, y, w, h), 0.4, 6, RL_Color(COLOR_BALLOON))
        RL_DrawText(text, int(x + LABEL_PADDING), int(y + LABEL_PADDING),
                    LABEL_FONT_SIZE, RL_Color(COLOR_BALLOON_TEXT))

