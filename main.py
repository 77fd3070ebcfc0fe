"""
Main application entry for the League Table Streamlit app.

This module defines the top-level Streamlit page that users see when they
open the app. It handles:
    - application configuration (`st.set_page_config`) and logging setup,
    - loading the match list and competitions from the match store (via
        `controllers.data_controller`, cached between reruns),
    - the shared competition selector in the sidebar (`common.ui`),
    - computing the live table for the selected competition with
        `common.standings.compute_current_standings` and rendering it with
        team logos, movement arrows, form and next opponent.

This file only composes logic from helper modules; the table computation is
implemented under `common/` and the DataFrame shaping under `controllers/`.

Notes:
    - Environment variables (SUPABASE_URL, SUPABASE_KEY, ...) are read from
        `.env` by `common.constants` when it is first imported.
    - An empty table means "no data yet" (no matches, or the store was
        unreachable and the local cache is empty); it is never an error.
"""

# Import libraries
import streamlit as st

from controllers.data_controller import load_matches, load_competitions
from controllers.standings_controller import standings_frame
from common.standings import compute_current_standings, filter_competition, latest_completed_matchweek
from common.ui import sidebar_header, competition_selector
from common.utils import setup_logging

# Configure Streamlit page and logging.
st.set_page_config(page_title="League Table — Standings", layout="wide")
setup_logging()


def main():
    sidebar_header(show_custom_nav=True)

    st.title("🏆 League Table")

    # 1) Load matches and competitions
    with st.spinner("Loading matches..."):
        matches = load_matches()
        competitions = load_competitions()
    if not competitions:
        st.warning("No matches yet. Add a result or import a CSV on the **Add / Import** page.")
        return

    # 2) Competition selector (sidebar, persisted across pages)
    competition = competition_selector(competitions)
    if not competition:
        st.stop()

    comp_matches = filter_competition(competition, matches)
    latest = latest_completed_matchweek(comp_matches)
    played = sum(1 for m in comp_matches if m.is_played)

    st.subheader(competition)
    c1, c2, c3 = st.columns(3)
    c1.metric("Matchweek", latest or "—")
    c2.metric("Matches played", played)
    c3.metric("Fixtures remaining", len(comp_matches) - played)

    # 3) Table with movement since the previous matchweek
    standings = compute_current_standings(competition, matches)
    if not standings:
        st.info("No standings available for this competition yet.")
        return

    st.dataframe(
        standings_frame(standings),
        use_container_width=True,
        hide_index=True,
        column_config={
            "Logo": st.column_config.ImageColumn(" ", width="small"),
            "Move": st.column_config.TextColumn("±", help="Places moved since the previous matchweek"),
            "Form": st.column_config.TextColumn("Form", help="Last 5 results, oldest first"),
        },
    )
    st.caption("Ranking: points, goal difference, goals scored, then club name.")


if __name__ == "__main__":
    main()
