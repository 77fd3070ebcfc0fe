"""
Turn engine output into DataFrames the pages can render directly.

Each function returns a `pandas.DataFrame` with display-ready columns (logo
URL first, then the values) so pages only have to pick a column config.
"""

from __future__ import annotations
from datetime import date
from typing import Dict, List, Optional

import pandas as pd

from models.match_model import StandingRow, TeamDifficulty, TeamFixtures
from common.colors import difficulty_label
from common.history import get_matchweeks, get_team_positions_by_matchweek
from common.logos import team_logo_url

STANDINGS_COLUMNS = [
    "Logo", "Pos", "Move", "Club", "P", "W", "D", "L", "GF", "GA", "GD", "Pts", "Form", "Next",
]


def movement_arrow(movement: int) -> str:
    if movement > 0:
        return f"▲ {movement}"
    if movement < 0:
        return f"▼ {-movement}"
    return "–"


def standings_frame(rows: List[StandingRow]) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame(columns=STANDINGS_COLUMNS)
    return pd.DataFrame([
        {
            "Logo": team_logo_url(r.club),
            "Pos": r.position,
            "Move": movement_arrow(r.movement),
            "Club": r.club,
            "P": r.played, "W": r.won, "D": r.drawn, "L": r.lost,
            "GF": r.goals_for, "GA": r.goals_against, "GD": r.goal_difference,
            "Pts": r.points,
            "Form": " ".join(r.form),
            "Next": r.next_opponent or "",
        }
        for r in rows
    ], columns=STANDINGS_COLUMNS)


def positions_frame(history: Dict[int, List[StandingRow]], teams: List[str]) -> pd.DataFrame:
    """Matchweek index, one column of league positions per team."""
    weeks = get_matchweeks(history)
    data = {team: get_team_positions_by_matchweek(history, team) for team in teams}
    return pd.DataFrame(data, index=pd.Index(weeks, name="Matchweek"))


def difficulties_frame(difficulties: Dict[str, TeamDifficulty]) -> pd.DataFrame:
    df = pd.DataFrame(
        [{"Logo": team_logo_url(d.team), "Club": d.team,
          "Score": round(d.difficulty_score, 2), "FDR": int(d.difficulty_level)}
         for d in difficulties.values()],
        columns=["Logo", "Club", "Score", "FDR"],
    )
    return df.sort_values(["Score", "Club"], ascending=[False, True], kind="mergesort").reset_index(drop=True)


def fixture_label(opponent: str, is_home: bool) -> str:
    return f"{opponent} ({'H' if is_home else 'A'})"


def fixtures_grid(team_fixtures: List[TeamFixtures], horizon: Optional[int] = None) -> tuple[pd.DataFrame, pd.DataFrame]:
    """
    Two aligned frames indexed by team, one column per upcoming matchweek:
      - labels: "Opponent (H/A)" (several fixtures in a week are joined by " / ")
      - levels: the hardest difficulty level among that week's fixtures
    `horizon` keeps only the first N matchweeks.
    """
    weeks = sorted({f.matchweek for tf in team_fixtures for f in tf.fixtures})
    if horizon:
        weeks = weeks[:horizon]
    columns = [f"MW{w}" for w in weeks]

    labels: Dict[str, Dict[str, str]] = {}
    levels: Dict[str, Dict[str, object]] = {}
    for tf in team_fixtures:
        lab_row: Dict[str, str] = {}
        lvl_row: Dict[str, object] = {}
        for f in tf.fixtures:
            if f.matchweek not in weeks:
                continue
            col = f"MW{f.matchweek}"
            text = fixture_label(f.opponent, f.is_home)
            lab_row[col] = f"{lab_row[col]} / {text}" if col in lab_row else text
            lvl_row[col] = max(int(f.difficulty), lvl_row.get(col, 0))
        labels[tf.team] = lab_row
        levels[tf.team] = lvl_row

    df_labels = pd.DataFrame.from_dict(labels, orient="index").reindex(index=list(labels), columns=columns).fillna("")
    df_levels = pd.DataFrame.from_dict(levels, orient="index").reindex(index=list(levels), columns=columns)
    df_labels.index.name = df_levels.index.name = "Club"
    return df_labels, df_levels


def fixtures_table(tf: TeamFixtures) -> pd.DataFrame:
    """One team's remaining fixtures as rows."""
    return pd.DataFrame(
        [{"MW": f.matchweek,
          "Date": f.date.isoformat() if isinstance(f.date, date) else "",
          "Opponent": f.opponent,
          "Venue": "H" if f.is_home else "A",
          "FDR": difficulty_label(f.difficulty)}
         for f in tf.fixtures],
        columns=["MW", "Date", "Opponent", "Venue", "FDR"],
    )
