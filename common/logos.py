from __future__ import annotations
import re
from typing import Dict

from common.constants import LOGO_BASE_URL

DEFAULT_LOGO = "default.png"

# Exact team name (as entered in matches) -> logo file stem.
# Only needed where the slug fallback below would not match the file on disk.
TEAM_LOGO_MAP: Dict[str, str] = {
    "Germanesia": "germanesia",
    "B-One": "b_one",
    "GWN FC": "gwn_fc",
    "Funball": "funball",
    "Siliwangi": "siliwangi",
    "Bandung Mengbal": "bandung_mengbal",
    "Ilgie Parahyangan": "ilgie_parahyangan",
    "World Young United": "world_young_united",
    "Norden Cub": "norden_cub",
    "Apookat United": "apookat_united",
    "Victory": "victory",
    "Bungas Sav'hil": "bungas_savhil",
    "Andir United": "andir_united",
    "Expose": "expose",
}


def logo_slug(team_name: str) -> str:
    """'Bungas Sav'hil' -> 'bungas_savhil', 'B-One' -> 'b_one'."""
    s = str(team_name).lower()
    s = s.replace("'", "")
    s = s.replace("-", "_")
    s = re.sub(r"[^\w\s]", "", s)
    return re.sub(r"\s+", "_", s.strip())


def team_logo_filename(team_name: str) -> str:
    """Logo file name for a team: explicit map first, then the slug fallback."""
    if not team_name:
        return DEFAULT_LOGO
    stem = TEAM_LOGO_MAP.get(team_name) or logo_slug(team_name)
    return f"{stem}.png" if stem else DEFAULT_LOGO


def team_logo_url(team_name: str) -> str:
    return f"{LOGO_BASE_URL.rstrip('/')}/{team_logo_filename(team_name)}"
