"""
Standings history: one league table per matchweek.

`compute_standings_history` replays `compute_standings` with a growing
matchweek cutoff and returns `{matchweek -> [StandingRow, ...]}`. The helper
functions below turn that map into the series the position chart needs.

Notes:
    - Weeks without any completed match are left out of the map rather than
        stored as empty tables.
    - Rows for teams that have not played yet are dropped from each week, so
        a team only enters the history once it has a result. The live table
        in `common.standings.compute_current_standings` keeps those teams.
"""

from __future__ import annotations
import logging
from typing import Dict, List

from models.match_model import StandingRow
from common.standings import compute_standings, filter_competition
from common.utils import team_sort_key

logger = logging.getLogger(__name__)

DEFAULT_MAX_MATCHWEEK = 40


def compute_standings_history(
    competition: str,
    matches,
    max_matchweek: int = DEFAULT_MAX_MATCHWEEK,
) -> Dict[int, List[StandingRow]]:
    try:
        comp_matches = filter_competition(competition, matches)
        if not comp_matches:
            return {}

        last_week = min(max_matchweek, max(m.matchweek or 0 for m in comp_matches))
        history: Dict[int, List[StandingRow]] = {}
        for week in range(1, last_week + 1):
            played = [m for m in comp_matches if m.matchweek <= week and m.is_played]
            if not played:
                continue
            table = compute_standings(competition, played, upto_matchweek=week)
            history[week] = [row for row in table if row.played > 0]
        return history
    except Exception:
        logger.exception("Error calculating standings history for %r", competition)
        return {}


def get_matchweeks(history: Dict[int, List[StandingRow]]) -> List[int]:
    return sorted(history)


def get_team_positions_by_matchweek(history: Dict[int, List[StandingRow]], team: str) -> List[int]:
    """
    Position of `team` for every stored matchweek, in week order.

    A week where the team has no row repeats its last known position; before
    its first appearance the team is placed one below the bottom of that
    week's table.
    """
    positions: List[int] = []
    for week in get_matchweeks(history):
        table = history.get(week) or []
        row = next((r for r in table if r.club == team), None)
        if row is not None:
            positions.append(row.position)
        else:
            positions.append(positions[-1] if positions else len(table) + 1)
    return positions


def get_team_names(history: Dict[int, List[StandingRow]]) -> List[str]:
    teams = {row.club for table in history.values() for row in table}
    return sorted(teams, key=team_sort_key)
