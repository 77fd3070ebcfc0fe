"""
Tests for logo names, difficulty colors and the DataFrames shown on pages.

Run with: python -m pytest tests/test_display.py -v
"""

import pytest

from conftest import LEAGUE, TODAY
from models.match_model import DifficultyLevel
from common.colors import (
    UNKNOWN_PALETTE, difficulty_colors, difficulty_css, difficulty_label, team_color, team_line_colors,
)
from common.difficulty import compute_fixture_difficulty, compute_team_difficulties
from common.history import compute_standings_history
from common.logos import logo_slug, team_logo_filename, team_logo_url
from common.standings import compute_current_standings, compute_standings
from controllers.standings_controller import (
    STANDINGS_COLUMNS, difficulties_frame, fixtures_grid, fixtures_table, movement_arrow, positions_frame,
    standings_frame,
)


class TestLogos:

    @pytest.mark.parametrize("name, filename", [
        ("B-One", "b_one.png"),                       # explicit map
        ("Bungas Sav'hil", "bungas_savhil.png"),
        ("Manchester United", "manchester_united.png"),
        ("  Brighton & Hove   Albion ", "brighton_hove_albion.png"),
        ("Paris Saint-Germain", "paris_saint_germain.png"),
        ("", "default.png"),
        ("!!!", "default.png"),
    ])
    def test_filename(self, name, filename):
        assert team_logo_filename(name) == filename

    def test_slug(self):
        assert logo_slug("St. Mirren") == "st_mirren"

    def test_url(self):
        assert team_logo_url("Arsenal").endswith("/arsenal.png")


class TestDifficultyDisplay:

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5])
    def test_labels(self, level):
        assert difficulty_label(level) == str(level)
        assert difficulty_label(DifficultyLevel(level)) == str(level)

    @pytest.mark.parametrize("level", [0, 6, None, "x", float("nan")])
    def test_unknown_levels(self, level):
        assert difficulty_label(level) == "-"
        assert difficulty_colors(level) == UNKNOWN_PALETTE

    def test_palette_buckets(self):
        assert difficulty_colors(1).css_class == "fdr-very-easy"
        assert difficulty_colors(5).css_class == "fdr-very-hard"
        assert difficulty_colors(4.0) == difficulty_colors(DifficultyLevel.HARD)
        assert "background-color: #DC2626" in difficulty_css(5)

    def test_team_colors_are_stable(self):
        assert team_color("Arsenal") == team_color("Arsenal")
        colors = team_line_colors(["Arsenal", "Chelsea", "Everton"])
        assert list(colors) == ["Arsenal", "Chelsea", "Everton"]
        assert all(c.startswith("#") and len(c) == 7 for c in colors.values())


class TestStandingsController:

    def test_movement_arrow(self):
        assert movement_arrow(2) == "▲ 2"
        assert movement_arrow(-1) == "▼ 1"
        assert movement_arrow(0) == "–"

    def test_standings_frame(self, season):
        df = standings_frame(compute_current_standings(LEAGUE, season, today=TODAY))
        assert list(df.columns) == STANDINGS_COLUMNS
        assert df["Club"].tolist() == ["Arsenal", "Chelsea", "Fulham", "Everton"]
        chelsea = df.set_index("Club").loc["Chelsea"]
        assert chelsea["Move"] == "▲ 2"
        assert chelsea["Form"] == "L W"
        assert chelsea["Next"] == "Fulham (H)"

    def test_empty_standings_frame(self):
        df = standings_frame([])
        assert df.empty and list(df.columns) == STANDINGS_COLUMNS

    def test_positions_frame(self, season):
        history = compute_standings_history(LEAGUE, season)
        df = positions_frame(history, ["Chelsea", "Everton"])
        assert df.index.tolist() == [1, 2, 3]
        assert df["Chelsea"].tolist() == [4, 2, 2]
        assert df["Everton"].tolist() == [2, 4, 4]

    def test_difficulties_frame(self, season):
        df = difficulties_frame(compute_team_difficulties(compute_standings(LEAGUE, season, today=TODAY)))
        assert df["Club"].tolist() == ["Arsenal", "Chelsea", "Fulham", "Everton"]
        assert df["FDR"].tolist() == [4, 3, 2, 1]

    def test_fixtures_grid(self, season):
        labels, levels = fixtures_grid(compute_fixture_difficulty(LEAGUE, season, today=TODAY))
        assert list(labels.columns) == ["MW3"]
        assert labels.loc["Everton", "MW3"] == "Arsenal (A)"
        assert levels.loc["Everton", "MW3"] == 5
        assert levels.loc["Arsenal", "MW3"] == 1

    def test_fixtures_table(self, season):
        tf = compute_fixture_difficulty(LEAGUE, season, today=TODAY)[0]
        df = fixtures_table(tf)
        assert df.to_dict(orient="records") == [
            {"MW": 3, "Date": "2024-03-08", "Opponent": "Everton", "Venue": "H", "FDR": "1"},
        ]
