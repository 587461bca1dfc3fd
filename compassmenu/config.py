"""Application configuration constants."""

from __future__ import annotations

# Performance
TARGET_FPS = 60
PAGE_STATE_WORKERS = 2

# Ring geometry (local units, same as client pixels at zoom 1)
RING_OUTER_RADIUS = 96.0
RING_HOLE_RADIUS = 24.0
RING_ICON_RADIUS = 60.0
RING_ICON_SIZE = 18
RING_MARKER_RADIUS = 88.0
RING_MARKER_SIZE = 4.0
SLOT_COUNT = 8

# Labels
LABEL_DELAY_MS = 500
LABEL_DISTANCE = 120.0
LABEL_FONT_SIZE = 16
LABEL_PADDING = 6

# Mouse buttons (DOM MouseEvent.button numbering)
BUTTON_LEFT = 0
BUTTON_MIDDLE = 1
BUTTON_RIGHT = 2

# Default option values (mirrors the add-on option page defaults)
DEFAULT_OPEN_BUTTON = BUTTON_RIGHT
DEFAULT_REQUIRE_CTRL = False
DEFAULT_REQUIRE_SHIFT = False
DEFAULT_IS_CTRL_SUPPRESS = False
DEFAULT_IS_SHIFT_SUPPRESS = True

# Context used when no rule matches
DEFAULT_CONTEXT = "page"

# Schemes accepted by "open selection"
OPENABLE_URL_SCHEMES = frozenset({"http", "https", "ftp", "file"})

# Keys
KEY_ESCAPE = "Escape"
KEY_ALT = "Alt"

# Demo window
WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 720
PAGE_HEIGHT = 1400
WINDOW_TITLE = "CompassMenu"
FONT_SIZE = 20

# Demo colors (r, g, b, a)
COLOR_PAGE_BG = (245, 245, 240, 255)
COLOR_RING = (40, 44, 52, 230)
COLOR_HOLE = (245, 245, 240, 255)
COLOR_ICON = (235, 235, 235, 255)
COLOR_MARKER = (255, 196, 0, 255)
COLOR_BALLOON = (255, 255, 225, 240)
COLOR_BALLOON_TEXT = (20, 20, 20, 255)
COLOR_REGION = (210, 220, 235, 255)
COLOR_REGION_TEXT = (60, 60, 60, 255)
