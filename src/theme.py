"""Colour & font helpers.

Decisions:
- tk has no per-widget opacity, so "opacity" and "glow" are simulated by
  blending a colour towards another (usually the background).
- Supports palette overrides via environment or project .env file
  (priority: real env var > .env override > default).
- Invalid hex codes are ignored.
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

HEX_BG_DEFAULT = '#2B2D42'
HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_ACCENT_DEFAULT = '#48B3AF'
HEX_TEXT_DEFAULT = '#EDF2F4'
HEX_DONE_DEFAULT = '#A7E399'

PALETTE_KEYS = ('TODO_BG', 'TODO_PRIMARY', 'TODO_ACCENT', 'TODO_TEXT', 'TODO_DONE')

FONT_FAMILY = 'Helvetica'
TITLE_SIZE = 22
BODY_SIZE = 12
BUTTON_SIZE = 11

CHECKED = '☑'
UNCHECKED = '☐'


def is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _rgb_to_hex(r: float, g: float, b: float) -> str:
    def clamp(x: float) -> int:
        return max(0, min(255, int(round(x))))
    return f"#{clamp(r):02x}{clamp(g):02x}{clamp(b):02x}"


def blend(from_hex: str, to_hex: str, amount: float) -> str:
    """Mix two colours; amount 0 -> from_hex, 1 -> to_hex (clamped)."""
    amount = max(0.0, min(1.0, amount))
    fr, fg, fb = _hex_to_rgb(from_hex)
    tr, tg, tb = _hex_to_rgb(to_hex)
    return _rgb_to_hex(fr + (tr - fr) * amount, fg + (tg - fg) * amount, fb + (tb - fb) * amount)


def fade(hex_code: str, background: str, opacity: float) -> str:
    """Colour of ``hex_code`` drawn at ``opacity`` over ``background``."""
    return blend(background, hex_code, opacity)


def read_env_file(path: Path) -> Dict[str, str]:
    """Palette overrides from a KEY=VALUE file; unknown keys and bad hex are skipped."""
    overrides: Dict[str, str] = {}
    if not path.exists():
        return overrides
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip().strip('"\'')
        if k in PALETTE_KEYS and is_hex(v):
            overrides[k] = '#' + v.lstrip('#')
    return overrides


class Palette:
    def __init__(self, bg: str = HEX_BG_DEFAULT, primary: str = HEX_PRIMARY_DEFAULT,
                 accent: str = HEX_ACCENT_DEFAULT, text: str = HEX_TEXT_DEFAULT,
                 done: str = HEX_DONE_DEFAULT):
        self.bg = bg
        self.primary = primary
        self.accent = accent
        self.text = text
        self.done = done

    @property
    def glow(self) -> str:
        return '#FFFFFF'

    @property
    def hover_row(self) -> str:
        return blend(self.bg, self.primary, 0.35)

    @property
    def done_text(self) -> str:
        """Completed rows: dimmed towards the background."""
        return blend(self.bg, self.done, 0.6)

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None,
             env_file: Optional[Path] = None) -> 'Palette':
        environ = os.environ if environ is None else environ
        if env_file is None:
            env_file = Path(__file__).resolve().parent.parent / '.env'
        file_overrides = read_env_file(env_file)

        def pick(key: str, default: str) -> str:
            raw = environ.get(key)
            if raw and is_hex(raw):
                return '#' + raw.lstrip('#')
            return file_overrides.get(key, default)

        return cls(
            bg=pick('TODO_BG', HEX_BG_DEFAULT),
            primary=pick('TODO_PRIMARY', HEX_PRIMARY_DEFAULT),
            accent=pick('TODO_ACCENT', HEX_ACCENT_DEFAULT),
            text=pick('TODO_TEXT', HEX_TEXT_DEFAULT),
            done=pick('TODO_DONE', HEX_DONE_DEFAULT),
        )


def task_label(description: str, completed: bool) -> str:
    """Row text with a checkbox glyph in front."""
    return f"{CHECKED if completed else UNCHECKED}  {description}"


__all__ = [
    'Palette', 'blend', 'fade', 'is_hex', 'read_env_file', 'task_label',
    'FONT_FAMILY', 'TITLE_SIZE', 'BODY_SIZE', 'BUTTON_SIZE', 'CHECKED', 'UNCHECKED',
]
