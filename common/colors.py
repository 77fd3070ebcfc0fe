# common/colors.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple
import colorsys
import zlib

from models.match_model import DifficultyLevel


# -------------------- Difficulty palette --------------------
@dataclass(frozen=True)
class DifficultyPalette:
    background: str
    text: str
    css_class: str


DIFFICULTY_PALETTES: Dict[int, DifficultyPalette] = {
    DifficultyLevel.VERY_EASY: DifficultyPalette("#22C55E", "#FFFFFF", "fdr-very-easy"),  # dark green
    DifficultyLevel.EASY:      DifficultyPalette("#86EFAC", "#1F2937", "fdr-easy"),       # light green
    DifficultyLevel.MEDIUM:    DifficultyPalette("#D1D5DB", "#1F2937", "fdr-medium"),     # gray
    DifficultyLevel.HARD:      DifficultyPalette("#FCA5A5", "#1F2937", "fdr-hard"),       # light red
    DifficultyLevel.VERY_HARD: DifficultyPalette("#DC2626", "#FFFFFF", "fdr-very-hard"),  # dark red
}
UNKNOWN_PALETTE = DifficultyPalette("#E5E7EB", "#1F2937", "fdr-unknown")


def difficulty_label(level) -> str:
    """'1'..'5' for a valid level, '-' otherwise."""
    try:
        return str(int(DifficultyLevel(level)))
    except (TypeError, ValueError):
        return "-"


def difficulty_colors(level) -> DifficultyPalette:
    try:
        return DIFFICULTY_PALETTES[DifficultyLevel(level)]
    except (TypeError, ValueError, KeyError):
        return UNKNOWN_PALETTE


def difficulty_css(level) -> str:
    """Inline CSS for a table cell (used with pandas Styler)."""
    pal = difficulty_colors(level)
    return f"background-color: {pal.background}; color: {pal.text}; text-align: center"


# -------------------- Simple color math --------------------
def _hex_to_rgb(hexs: str) -> Tuple[float, float, float]:
    h = hexs.strip().lstrip("#")
    return int(h[0:2], 16) / 255.0, int(h[2:4], 16) / 255.0, int(h[4:6], 16) / 255.0


def _lighten_or_darken(hexs: str, factor: float = 0.15) -> str:
    """Positive factor lightens, negative darkens."""
    r, g, b = _hex_to_rgb(hexs)
    if factor >= 0:
        r += (1 - r) * factor; g += (1 - g) * factor; b += (1 - b) * factor
    else:
        r *= (1 + factor); g *= (1 + factor); b *= (1 + factor)
    return "#{:02X}{:02X}{:02X}".format(int(r * 255), int(g * 255), int(b * 255))


def _rgb_to_lab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    # sRGB -> XYZ -> Lab (D65)
    def f(u): return (u / 12.92) if u <= 0.04045 else (((u + 0.055) / 1.055) ** 2.4)
    r, g, b = f(r), f(g), f(b)
    X = r * 0.4124 + g * 0.3576 + b * 0.1805
    Y = r * 0.2126 + g * 0.7152 + b * 0.0722
    Z = r * 0.0193 + g * 0.1192 + b * 0.9505
    Xn, Yn, Zn = 0.95047, 1.00000, 1.08883

    def gfun(t): return t ** (1 / 3) if t > 0.008856 else (7.787 * t + 16 / 116)
    fx, fy, fz = gfun(X / Xn), gfun(Y / Yn), gfun(Z / Zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def _similar(c1: str, c2: str, delta: float = 12.0) -> bool:
    """Rough similarity check using ΔE76; ~10–20 is 'perceptible'."""
    L1, a1, b1 = _rgb_to_lab(*_hex_to_rgb(c1))
    L2, a2, b2 = _rgb_to_lab(*_hex_to_rgb(c2))
    return ((L1 - L2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2) ** 0.5 < delta


def is_light_color(hexs: str, thr: float = 0.90) -> bool:
    """Perceived luminance threshold (Y) to decide if we need an outline."""
    try:
        r, g, b = _hex_to_rgb(hexs)
    except (ValueError, IndexError):
        return False
    return 0.2126 * r + 0.7152 * g + 0.0722 * b >= thr


# -------------------- Team line colors --------------------
def team_color(name: str) -> str:
    """
    Deterministic, nice-looking color for a team.
    crc32 instead of hash(): str hashes change between processes.
    """
    h = (zlib.crc32((name or "").encode("utf-8")) % 360) / 360.0
    r, g, b = colorsys.hsv_to_rgb(h, 0.65, 0.95)
    return "#{:02X}{:02X}{:02X}".format(int(r * 255), int(g * 255), int(b * 255))


def team_line_colors(teams: Iterable[str]) -> Dict[str, str]:
    """
    {team -> hex} for the history chart.
    Rule: base color from the name; if it is too close to a color already
    used, darken it so neighbouring lines stay apart.
    """
    out: Dict[str, str] = {}
    for team in teams:
        col = team_color(team)
        if any(_similar(col, used) for used in out.values()):
            col = _lighten_or_darken(col, -0.35)
        out[team] = col
    return out
