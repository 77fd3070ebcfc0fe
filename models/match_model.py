"""
Small data models for match records and the tables computed from them.

`MatchRecord` is frozen (immutable) so a list of matches can be handed to
every engine without any of them modifying it. The other classes are the
outputs of the engines under `common/` and are rebuilt on every call.

Fields mirror the columns of the `matches` table and of the CSV import:
    - `competition`, `date`, `home`, `away`, `score_home`, `score_away`,
        `matchweek` (plus the optional database `id`).
A record with either score missing is a fixture that has not been played.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import IntEnum
from typing import Any, Dict, List, Optional

import pandas as pd


def _to_int(val: Any) -> Optional[int]:
    """Coerce a loosely typed value (str, float, NaN, None) into an int or None."""
    if val is None:
        return None
    if isinstance(val, str):
        val = val.strip()
        if not val:
            return None
    try:
        if pd.isna(val):
            return None
    except (TypeError, ValueError):
        pass
    try:
        return int(float(val))
    except (TypeError, ValueError):
        return None


def _to_date(val: Any) -> Optional[date]:
    """Parse a kickoff date; invalid or empty values become None."""
    if val is None:
        return None
    # pd.Timestamp subclasses datetime, which subclasses date
    if isinstance(val, datetime):
        return val.date()
    if isinstance(val, date):
        return val
    ts = pd.to_datetime(val, errors="coerce")
    return ts.date() if pd.notnull(ts) else None


@dataclass(frozen=True)
class MatchRecord:
    competition: str
    date: Optional[date]
    home: str
    away: str
    score_home: Optional[int]
    score_away: Optional[int]
    matchweek: int
    id: Optional[int] = None

    @property
    def is_played(self) -> bool:
        return self.score_home is not None and self.score_away is not None

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "MatchRecord":
        """Build a record from a REST/CSV/cache row, coercing numbers and dates."""
        return cls(
            competition=str(row.get("competition") or "").strip(),
            date=_to_date(row.get("date")),
            home=str(row.get("home") or "").strip(),
            away=str(row.get("away") or "").strip(),
            score_home=_to_int(row.get("score_home")),
            score_away=_to_int(row.get("score_away")),
            matchweek=_to_int(row.get("matchweek")) or 0,
            id=_to_int(row.get("id")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict; `id` is left out until the store assigns one."""
        out: Dict[str, Any] = {
            "competition": self.competition,
            "date": self.date.isoformat() if self.date else None,
            "home": self.home,
            "away": self.away,
            "score_home": self.score_home,
            "score_away": self.score_away,
            "matchweek": self.matchweek,
        }
        if self.id is not None:
            out["id"] = self.id
        return out


@dataclass(frozen=True)
class Competition:
    name: str
    id: Optional[int] = None


@dataclass
class StandingRow:
    position: int
    club: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0
    form: List[str] = field(default_factory=list)
    next_opponent: Optional[str] = None
    previous_position: int = 0

    def __post_init__(self):
        # A row without history is treated as "no change"
        if not self.previous_position:
            self.previous_position = self.position

    @property
    def movement(self) -> int:
        """Places gained since the previous matchweek (negative = dropped)."""
        return self.previous_position - self.position


class DifficultyLevel(IntEnum):
    VERY_EASY = 1
    EASY = 2
    MEDIUM = 3
    HARD = 4
    VERY_HARD = 5


@dataclass(frozen=True)
class TeamDifficulty:
    team: str
    difficulty_score: float
    difficulty_level: DifficultyLevel


@dataclass(frozen=True)
class FixtureWithDifficulty:
    matchweek: int
    date: Optional[date]
    opponent: str
    is_home: bool
    difficulty: DifficultyLevel


@dataclass
class TeamFixtures:
    team: str
    fixtures: List[FixtureWithDifficulty] = field(default_factory=list)
