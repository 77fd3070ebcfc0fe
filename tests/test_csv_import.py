"""
Tests for the CSV bulk import.

Run with: python -m pytest tests/test_csv_import.py -v
"""

from datetime import date
from unittest.mock import MagicMock

import pytest

from common.csv_import import CSVImportError, import_matches_csv, parse_matches_csv

HEADER = "competition,date,home,away,score_home,score_away,matchweek\n"


class TestParseMatchesCsv:

    def test_valid_rows_are_coerced(self):
        records = parse_matches_csv(HEADER + "Premier,2024-08-17,Arsenal,Chelsea,2,1,1\n")
        rec, = records
        assert rec.competition == "Premier"
        assert rec.date == date(2024, 8, 17)
        assert (rec.home, rec.away) == ("Arsenal", "Chelsea")
        assert (rec.score_home, rec.score_away, rec.matchweek) == (2, 1, 1)
        assert all(isinstance(v, int) for v in (rec.score_home, rec.score_away, rec.matchweek))

    def test_non_numeric_score_is_dropped(self):
        text = HEADER + (
            "Premier,2024-08-17,Arsenal,Chelsea,two,1,1\n"
            "Premier,2024-08-17,Everton,Fulham,0,0,1\n"
        )
        records = parse_matches_csv(text)
        assert [(r.home, r.away) for r in records] == [("Everton", "Fulham")]

    @pytest.mark.parametrize("score", ["inf", "-inf", "Infinity"])
    def test_infinite_score_is_dropped(self, score):
        text = HEADER + (
            f"Premier,2024-08-17,Arsenal,Chelsea,{score},1,1\n"
            "Premier,2024-08-17,Everton,Fulham,0,0,1\n"
        )
        records = parse_matches_csv(text)
        assert [(r.home, r.away) for r in records] == [("Everton", "Fulham")]

    @pytest.mark.parametrize("week", ["0", "-3"])
    def test_matchweek_below_one_is_dropped(self, week):
        text = HEADER + (
            f"Premier,2024-08-17,Arsenal,Chelsea,2,1,{week}\n"
            "Premier,2024-08-17,Everton,Fulham,0,0,1\n"
        )
        records = parse_matches_csv(text)
        assert [(r.home, r.matchweek) for r in records] == [("Everton", 1)]

    def test_rows_missing_required_text_are_dropped(self):
        text = HEADER + (
            ",2024-08-17,Arsenal,Chelsea,1,0,1\n"
            "Premier,2024-08-17,,Chelsea,1,0,1\n"
            "Premier,2024-08-17,Arsenal,,1,0,1\n"
            "Premier,2024-08-17,Arsenal,Chelsea,1,0,x\n"
            "Premier,2024-08-17,Arsenal,Chelsea,1,,1\n"
            "Premier,2024-08-24,Chelsea,Arsenal,3,3,2\n"
        )
        records = parse_matches_csv(text)
        assert len(records) == 1
        assert records[0].matchweek == 2

    def test_whitespace_and_column_case(self):
        text = (
            "Competition, Date, Home, Away, Score_Home, Score_Away, Matchweek\n"
            " Premier , 2024-08-17 , Arsenal , Chelsea , 2 , 1 , 1 \n"
        )
        rec, = parse_matches_csv(text)
        assert (rec.competition, rec.home, rec.away) == ("Premier", "Arsenal", "Chelsea")

    def test_bad_date_is_kept_without_date(self):
        rec, = parse_matches_csv(HEADER + "Premier,someday,Arsenal,Chelsea,2,1,1\n")
        assert rec.date is None

    def test_reads_bytes(self):
        records = parse_matches_csv((HEADER + "Premier,2024-08-17,Arsenal,Chelsea,2,1,1\n").encode("utf-8"))
        assert len(records) == 1

    def test_reads_path(self, tmp_path):
        path = tmp_path / "matches.csv"
        path.write_text(HEADER + "Premier,2024-08-17,Arsenal,Chelsea,2,1,1\n", encoding="utf-8")
        assert len(parse_matches_csv(str(path))) == 1

    @pytest.mark.parametrize("text", [
        HEADER,
        HEADER + "Premier,2024-08-17,Arsenal,Chelsea,a,b,c\n",
        "competition,home,away\nPremier,Arsenal,Chelsea\n",
        b"",
    ])
    def test_nothing_valid_raises(self, text):
        with pytest.raises(CSVImportError):
            parse_matches_csv(text)


class TestImportMatchesCsv:

    def test_hands_rows_to_store(self):
        store = MagicMock()
        store.insert_matches.side_effect = lambda records: records
        saved = import_matches_csv(HEADER + "Premier,2024-08-17,Arsenal,Chelsea,2,1,1\n", store)
        store.insert_matches.assert_called_once()
        assert [r.home for r in saved] == ["Arsenal"]

    def test_invalid_file_never_reaches_store(self):
        store = MagicMock()
        with pytest.raises(CSVImportError):
            import_matches_csv(HEADER + "\n", store)
        store.insert_matches.assert_not_called()
