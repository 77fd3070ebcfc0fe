"""
League table computation.

This module folds a list of `MatchRecord`s into a ranked table of
`StandingRow`s. It provides:
    - `compute_standings`: the table for one competition, optionally cut off
        at a matchweek (used once per week by `common.history`),
    - `compute_current_standings`: the live table for the latest matchweek
        with results, with each team's position one matchweek earlier copied
        into `previous_position` so the UI can draw movement arrows.

Function notes:
    - Every call builds its own `{team -> TeamStats}` dict from scratch, so
        no statistics are shared between calls or between matches.
    - Bad input never raises: a missing competition, a non-list argument or
        an unexpected error inside the fold all return `[]`. Callers treat an
        empty table as "unavailable", not as "zero teams".
"""

# Import libraries
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional

from models.match_model import MatchRecord, StandingRow
from common.utils import date_sort_key, is_upcoming, team_sort_key

logger = logging.getLogger(__name__)

# --- Constants ---
POINTS_WIN  = 3
POINTS_DRAW = 1
FORM_LENGTH = 5     # results kept in the form guide (oldest dropped first)


@dataclass
class TeamStats:
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

    def record(self, scored: int, conceded: int) -> None:
        """Add one completed match seen from this team's side."""
        self.played += 1
        self.goals_for += scored
        self.goals_against += conceded
        self.goal_difference = self.goals_for - self.goals_against

        if scored > conceded:
            self.won += 1
            self.points += POINTS_WIN
            result = "W"
        elif scored < conceded:
            self.lost += 1
            result = "L"
        else:
            self.drawn += 1
            self.points += POINTS_DRAW
            result = "D"
        self.form = (self.form + [result])[-FORM_LENGTH:]


def filter_competition(competition: str, matches) -> List[MatchRecord]:
    """Return the competition's matches, or [] for a missing name / non-list input."""
    if not competition or not isinstance(matches, (list, tuple)):
        return []
    return [m for m in matches if m is not None and m.competition == competition]


def _valid_teams(match: MatchRecord) -> bool:
    if not match.home or not match.away:
        logger.warning("Skipping match without both teams: %r", match)
        return False
    return True


def _assign_next_opponents(stats: Dict[str, TeamStats], matches: Iterable[MatchRecord], today: date) -> None:
    # Upcoming = dated today or later and not fully scored; earliest first.
    upcoming = sorted(
        (m for m in matches if is_upcoming(m.date, today) and not m.is_played),
        key=lambda m: date_sort_key(m.date),
    )
    for m in upcoming:
        home, away = stats.get(m.home), stats.get(m.away)
        if home is not None and home.next_opponent is None:
            home.next_opponent = f"{m.away} (H)"
        if away is not None and away.next_opponent is None:
            away.next_opponent = f"{m.home} (A)"


def _rank(stats: Dict[str, TeamStats]) -> List[StandingRow]:
    ordered = sorted(
        stats.items(),
        key=lambda kv: (-kv[1].points, -kv[1].goal_difference, -kv[1].goals_for, team_sort_key(kv[0])),
    )
    return [
        StandingRow(
            position=i + 1,
            club=team,
            played=s.played,
            won=s.won,
            drawn=s.drawn,
            lost=s.lost,
            goals_for=s.goals_for,
            goals_against=s.goals_against,
            goal_difference=s.goal_difference,
            points=s.points,
            form=list(s.form),
            next_opponent=s.next_opponent,
        )
        for i, (team, s) in enumerate(ordered)
    ]


def compute_standings(
    competition: str,
    matches,
    upto_matchweek: Optional[int] = None,
    today: Optional[date] = None,
) -> List[StandingRow]:
    """
    Return the ranked table for `competition`.

    Steps performed:
      1. Register every team that appears in any of the competition's
         matches, so teams with no completed games still get a row.
      2. Label each team's next opponent from the earliest upcoming fixture,
         e.g. "Rovers (H)". This ignores `upto_matchweek`.
      3. Fold every completed match with `matchweek <= upto_matchweek` (all
         matchweeks when the cutoff is None) into both teams' stats.
      4. Sort by points, goal difference, goals for, then team name, and
         number the rows 1..N.
    """
    today = today or date.today()
    try:
        comp_matches = filter_competition(competition, matches)
        if not comp_matches:
            logger.debug("No matches for competition %r", competition)
            return []

        stats: Dict[str, TeamStats] = {}
        valid = [m for m in comp_matches if _valid_teams(m)]
        for m in valid:
            stats.setdefault(m.home, TeamStats())
            stats.setdefault(m.away, TeamStats())

        _assign_next_opponents(stats, valid, today)

        for m in valid:
            if not m.is_played:
                continue
            if upto_matchweek is not None and m.matchweek > upto_matchweek:
                continue
            stats[m.home].record(m.score_home, m.score_away)
            stats[m.away].record(m.score_away, m.score_home)

        return _rank(stats)
    except Exception:
        logger.exception("Error calculating standings for %r", competition)
        return []


def latest_completed_matchweek(matches: Iterable[MatchRecord]) -> int:
    """Highest matchweek with at least one result (0 when nothing is played)."""
    return max((m.matchweek for m in matches if m.is_played), default=0)


def compute_current_standings(competition: str, matches, today: Optional[date] = None) -> List[StandingRow]:
    """
    Live table with each team's previous-matchweek position.

    The table covers every matchweek up to the latest one with results; the
    comparison table stops one matchweek earlier. Teams missing from the
    earlier table keep their own position (shown as "no change").
    """
    try:
        comp_matches = filter_competition(competition, matches)
        latest = latest_completed_matchweek(comp_matches)
    except Exception:
        logger.exception("Error reading matches for %r", competition)
        return []
    if latest == 0:
        return compute_standings(competition, comp_matches, today=today)

    current = compute_standings(competition, comp_matches, upto_matchweek=latest, today=today)
    if latest > 1:
        previous = {r.club: r.position for r in compute_standings(competition, comp_matches, latest - 1, today)}
        for row in current:
            row.previous_position = previous.get(row.club, row.position)
    return current
