"""Color & style helpers.

Decisions:
- Colors are on only for a TTY unless FORCE_COLOR=1; NO_COLOR always wins.
- Truecolor when COLORTERM advertises it, else the 256-color cube.
- Palette overrides come from the environment, then a .env file in the
  working directory (same directory tasks.json lives in).
"""
from __future__ import annotations
import logging
import os, sys
from pathlib import Path
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

PALETTE_KEYS = ("TODO_HEADER_COLOR", "TODO_ROW_COLOR", "TODO_BANNER_COLOR")

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))


def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''


def normalize_hex(value: Optional[str]) -> Optional[str]:
    """Return '#rrggbb' for a valid 6-digit hex value (with or without '#'), else None."""
    if not value:
        return None
    h = value.strip().lstrip('#')
    if len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h):
        return '#' + h.lower()
    return None


def hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


def fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    idx = 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)
    return f"\033[38;5;{idx}m"


def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return fg_truecolor(r, g, b)
    return fg_256(r, g, b)


def read_env_file(path: Path) -> Dict[str, str]:
    """Collect valid palette overrides from a KEY=VALUE file.

    Blank lines, comments, unknown keys and malformed hex values are skipped.
    """
    overrides: Dict[str, str] = {}
    try:
        text = path.read_text()
    except FileNotFoundError:
        return overrides
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {path}: {e}")
        return overrides
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        if k not in PALETTE_KEYS:
            continue
        h = normalize_hex(v)
        if h:
            overrides[k] = h
    return overrides


def resolve_palette(env: Mapping[str, str], file_overrides: Mapping[str, str]) -> Dict[str, str]:
    """Priority: real env var > .env override > default."""
    palette: Dict[str, str] = {}
    for key, default in DEFAULT_PALETTE.items():
        palette[key] = normalize_hex(env.get(key)) or file_overrides.get(key) or default
    return palette


RESET = _code('0')
BOLD = _code('1')
UNDERLINE = _code('4')

DEFAULT_PALETTE: Dict[str, str] = {
    'TODO_HEADER_COLOR': '#55ff55',  # bright green
    'TODO_ROW_COLOR': '#00cdcd',     # cyan
    'TODO_BANNER_COLOR': '#ff5555',  # bright red
}

PALETTE = resolve_palette(os.environ, read_env_file(Path.cwd() / '.env'))

HEADER_COLOR = _from_hex(PALETTE['TODO_HEADER_COLOR'])
ROW_COLOR = _from_hex(PALETTE['TODO_ROW_COLOR'])
BANNER_COLOR = _from_hex(PALETTE['TODO_BANNER_COLOR'])
SECTION_COLOR = HEADER_COLOR + BOLD + UNDERLINE


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE or not any(styles):
        return text
    return ''.join(styles) + text + RESET


__all__ = [
    'color', 'RESET', 'BOLD', 'UNDERLINE', 'HEADER_COLOR', 'ROW_COLOR', 'BANNER_COLOR',
    'SECTION_COLOR', 'PALETTE', 'DEFAULT_PALETTE', 'read_env_file', 'resolve_palette',
    'normalize_hex', 'hex_to_rgb', 'fg_256', 'fg_truecolor',
]
