"""
Fixture difficulty rating (FDR).

Each team gets a 0-10 difficulty score from its league position and its form
guide, bucketed into five levels (1 = very easy ... 5 = very hard). The level
of the opponent is then projected onto every remaining fixture:
    - at home the fixture is one level easier (never below 1),
    - away it is one level harder (never above 5).
"""

#Import libraries
from __future__ import annotations
import logging
from datetime import date
from typing import Dict, List, Optional

from models.match_model import (
    DifficultyLevel, FixtureWithDifficulty, MatchRecord, StandingRow, TeamDifficulty, TeamFixtures,
)
from common.standings import compute_standings, filter_competition
from common.utils import date_sort_key, is_upcoming, team_sort_key

logger = logging.getLogger(__name__)

# --- Constants ---
POSITION_WEIGHT = 0.7
FORM_WEIGHT     = 0.3
FORM_POINTS     = {"W": 3, "D": 1, "L": 0}
MAX_FORM_POINTS = 15            # five wins

# Lower bound (inclusive) of each level, hardest first
LEVEL_THRESHOLDS = [
    (8.0, DifficultyLevel.VERY_HARD),
    (6.0, DifficultyLevel.HARD),
    (4.0, DifficultyLevel.MEDIUM),
    (2.0, DifficultyLevel.EASY),
]


def difficulty_level_for(score: float) -> DifficultyLevel:
    for lower, level in LEVEL_THRESHOLDS:
        if score >= lower:
            return level
    return DifficultyLevel.VERY_EASY


def team_difficulty(row: StandingRow, team_count: int) -> TeamDifficulty:
    # 10 for the leader, approaching 0 for the bottom side
    position_score = 10 * (1 - (row.position - 1) / team_count)
    form_points = sum(FORM_POINTS.get(r, 0) for r in (row.form or []))
    form_score = (form_points / MAX_FORM_POINTS) * 10
    # min(): 0.7*10 + 0.3*10 is a hair above 10 in floating point
    score = min(10.0, POSITION_WEIGHT * position_score + FORM_WEIGHT * form_score)
    return TeamDifficulty(team=row.club, difficulty_score=score, difficulty_level=difficulty_level_for(score))


def compute_team_difficulties(standings: List[StandingRow]) -> Dict[str, TeamDifficulty]:
    """Return {club -> TeamDifficulty} for every row of a ranked table."""
    if not standings:
        return {}
    try:
        team_count = len(standings)
        return {row.club: team_difficulty(row, team_count) for row in standings}
    except Exception:
        logger.exception("Error computing team difficulties")
        return {}


def _home_difficulty(away_level: int) -> DifficultyLevel:
    return DifficultyLevel(max(DifficultyLevel.VERY_EASY, away_level - 1))


def _away_difficulty(home_level: int) -> DifficultyLevel:
    return DifficultyLevel(min(DifficultyLevel.VERY_HARD, home_level + 1))


def project_fixture_difficulty(
    matches: List[MatchRecord],
    difficulties: Dict[str, TeamDifficulty],
    today: Optional[date] = None,
) -> List[TeamFixtures]:
    """
    Rate every remaining fixture from both sides.

    A fixture is "remaining" when it is dated today or later, or when neither
    score has been entered. Matches involving a team without a rating are
    skipped. The result is sorted by team name; each team's fixtures are
    sorted by matchweek.
    """
    today = today or date.today()
    try:
        remaining = sorted(
            (m for m in matches
             if is_upcoming(m.date, today) or (m.score_home is None and m.score_away is None)),
            key=lambda m: date_sort_key(m.date),
        )

        by_team: Dict[str, List[FixtureWithDifficulty]] = {}
        for m in remaining:
            home_rating, away_rating = difficulties.get(m.home), difficulties.get(m.away)
            if home_rating is None or away_rating is None:
                continue
            by_team.setdefault(m.home, []).append(FixtureWithDifficulty(
                matchweek=m.matchweek, date=m.date, opponent=m.away, is_home=True,
                difficulty=_home_difficulty(away_rating.difficulty_level),
            ))
            by_team.setdefault(m.away, []).append(FixtureWithDifficulty(
                matchweek=m.matchweek, date=m.date, opponent=m.home, is_home=False,
                difficulty=_away_difficulty(home_rating.difficulty_level),
            ))

        return [
            TeamFixtures(team=team, fixtures=sorted(fixtures, key=lambda f: f.matchweek))
            for team, fixtures in sorted(by_team.items(), key=lambda kv: team_sort_key(kv[0]))
        ]
    except Exception:
        logger.exception("Error projecting fixture difficulty")
        return []


def compute_fixture_difficulty(competition: str, matches, today: Optional[date] = None) -> List[TeamFixtures]:
    """Season-wide table -> team ratings -> remaining fixtures, for one competition."""
    standings = compute_standings(competition, matches, today=today)
    difficulties = compute_team_difficulties(standings)
    if not difficulties:
        return []
    return project_fixture_difficulty(filter_competition(competition, matches), difficulties, today=today)
