import streamlit as st
import matplotlib.pyplot as plt

from controllers.data_controller import load_matches, load_competitions
from controllers.standings_controller import positions_frame, standings_frame
from common.history import compute_standings_history, get_matchweeks, get_team_names
from common.colors import team_line_colors
from common.plots import plot_position_history
from common.ui import sidebar_header, competition_selector
from common.utils import setup_logging

st.set_page_config(page_title="History", layout="wide")
setup_logging()


def main():
    sidebar_header(show_custom_nav=True)
    competition = competition_selector(load_competitions())
    if not competition:
        st.info("Go to **Standings** and add some matches first.")
        st.stop()

    history = compute_standings_history(competition, load_matches())
    weeks = get_matchweeks(history)

    st.header(f"Standings history — {competition}")
    if not weeks:
        st.info("No completed matches yet.")
        return

    # ------------------------------------------------------------
    # Position chart
    # ------------------------------------------------------------
    teams = get_team_names(history)
    selected = st.multiselect("Teams", teams, default=teams[: min(6, len(teams))])
    if selected:
        positions = positions_frame(history, selected)
        fig, ax = plt.subplots(figsize=(8.0, 4.2), constrained_layout=True)
        plot_position_history(
            positions,
            colors_map=team_line_colors(teams),
            team_count=max(len(rows) for rows in history.values()) + 1,
            ax=ax,
        )
        st.pyplot(fig, use_container_width=True)
        plt.close(fig)

        with st.expander("Positions by matchweek"):
            st.dataframe(positions, use_container_width=True)

    # ------------------------------------------------------------
    # Table after a given matchweek
    # ------------------------------------------------------------
    st.subheader("Table after matchweek")
    week = st.select_slider("Matchweek", options=weeks, value=weeks[-1])
    st.dataframe(
        standings_frame(history[week]).drop(columns=["Move", "Next"]),
        use_container_width=True,
        hide_index=True,
        column_config={"Logo": st.column_config.ImageColumn(" ", width="small")},
    )


if __name__ == "__main__":
    main()
