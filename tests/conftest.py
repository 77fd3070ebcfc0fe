"""
Shared fixtures for the engine and store tests.

All tests pin `TODAY` so "upcoming fixture" checks do not depend on the
date the suite runs.
"""

from datetime import date, timedelta

import pytest

from models.match_model import MatchRecord

TODAY = date(2024, 3, 1)
LEAGUE = "Premier"


def match(home, away, score_home=None, score_away=None, matchweek=1, days=-30, competition=LEAGUE):
    """Build a MatchRecord dated `days` from TODAY (negative = in the past)."""
    return MatchRecord(
        competition=competition,
        date=TODAY + timedelta(days=days),
        home=home,
        away=away,
        score_home=score_home,
        score_away=score_away,
        matchweek=matchweek,
    )


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def season():
    """Four teams, two played matchweeks and one upcoming."""
    return [
        match("Arsenal", "Chelsea", 2, 0, matchweek=1, days=-14),
        match("Everton", "Fulham", 1, 1, matchweek=1, days=-14),
        match("Chelsea", "Everton", 3, 1, matchweek=2, days=-7),
        match("Fulham", "Arsenal", 0, 0, matchweek=2, days=-7),
        match("Arsenal", "Everton", matchweek=3, days=7),
        match("Chelsea", "Fulham", matchweek=3, days=8),
        match("Other", "Team", 5, 0, matchweek=1, days=-14, competition="Cup"),
    ]
