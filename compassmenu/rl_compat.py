"""Raylib compatibility layer - hides the differences between raylibpy and python-raylib."""

from __future__ import annotations
from typing import Any, Callable, Tuple

try:
    import raylibpy as rl
    RL_VERSION = "raylibpy"
except Exception:
    import raylib as rl
    RL_VERSION = "python-raylib"


def _make_struct(name: str, **values: Any) -> Any:
    """Build a raylib struct by name: class constructor first, cffi otherwise."""
    ctor = getattr(rl, name, None)
    if ctor is not None:
        try:
            return ctor(*values.values())
        except Exception:
            pass
    ptr = rl.ffi.new(f"{name} *")
    for field_name, value in values.items():
        setattr(ptr[0], field_name, value)
    return ptr[0]


def _call_text(fn: Callable[..., Any], text: str, *args: Any) -> Any:
    """Call fn with text as str, retrying with UTF-8 bytes for cffi bindings."""
    try:
        return fn(text, *args)
    except TypeError:
        return fn(text.encode('utf-8'), *args)


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    return _make_struct("Rectangle", x=float(x), y=float(y), width=float(w), height=float(h))


def make_vec2(x: float, y: float) -> Any:
    return _make_struct("Vector2", x=float(x), y=float(y))


def make_color(rgba: Tuple[int, int, int, int]) -> Any:
    """Color from an (r, g, b, a) tuple as stored in config."""
    r, g, b, a = (int(c) for c in rgba)
    return _make_struct("Color", r=r, g=g, b=b, a=a)


def draw_text(text: str, x: int, y: int, size: int, color: Any) -> None:
    _call_text(rl.DrawText, text, x, y, size, color)


def measure_text(text: str, size: int) -> int:
    return _call_text(rl.MeasureText, text, size)


def set_clipboard_text(text: str) -> None:
    _call_text(rl.SetClipboardText, text)


def init_window(width: int, height: int, title: str) -> None:
    try:
        rl.InitWindow(width, height, title)
    except TypeError:
        rl.InitWindow(width, height, title.encode('utf-8'))


__all__ = [
    'rl',
    'RL_VERSION',
    'make_rect',
    'make_vec2',
    'make_color',
    'draw_text',
    'measure_text',
    'set_clipboard_text',
    'init_window',
]
