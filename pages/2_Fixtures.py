import streamlit as st
import matplotlib.pyplot as plt

from controllers.data_controller import load_matches, load_competitions
from controllers.standings_controller import difficulties_frame, fixtures_grid, fixtures_table
from common.colors import difficulty_css, DIFFICULTY_PALETTES, difficulty_label
from common.difficulty import compute_fixture_difficulty, compute_team_difficulties
from common.plots import plot_team_difficulty
from common.standings import compute_standings, filter_competition
from common.ui import sidebar_header, competition_selector
from common.utils import setup_logging

st.set_page_config(page_title="Fixtures", layout="wide")
setup_logging()

LEVEL_NAMES = {1: "Very easy", 2: "Easy", 3: "Medium", 4: "Hard", 5: "Very hard"}


def _legend():
    """Colored chips explaining the 1–5 scale."""
    chip = lambda lvl, pal: (
        f'<span style="display:inline-block;padding:2px 8px;margin-right:6px;border-radius:4px;'
        f'background:{pal.background};color:{pal.text}">{difficulty_label(lvl)} {LEVEL_NAMES[int(lvl)]}</span>'
    )
    st.markdown("".join(chip(lvl, pal) for lvl, pal in DIFFICULTY_PALETTES.items()), unsafe_allow_html=True)


def main():
    sidebar_header(show_custom_nav=True)
    competition = competition_selector(load_competitions())
    if not competition:
        st.info("Go to **Standings** and add some matches first.")
        st.stop()

    matches = filter_competition(competition, load_matches())
    standings = compute_standings(competition, matches)
    difficulties = compute_team_difficulties(standings)
    team_fixtures = compute_fixture_difficulty(competition, matches)

    st.header(f"Fixture difficulty — {competition}")
    st.caption("Opponent rating = 70% league position + 30% form (last 5). "
               "Playing at home is one level easier, away one level harder.")
    _legend()

    if not team_fixtures:
        st.info("No upcoming fixtures.")
    else:
        horizon = st.slider("Matchweeks ahead", min_value=1, max_value=10, value=5)
        labels, levels = fixtures_grid(team_fixtures, horizon=horizon)
        # Color each label cell by the level in the aligned frame
        styled = labels.style.apply(lambda _: levels.map(difficulty_css), axis=None)
        st.dataframe(styled, use_container_width=True)

        team = st.selectbox("Team", [tf.team for tf in team_fixtures])
        tf = next(t for t in team_fixtures if t.team == team)
        st.dataframe(
            fixtures_table(tf).style.map(difficulty_css, subset=["FDR"]),
            use_container_width=True,
            hide_index=True,
        )

    st.subheader("Team ratings")
    df = difficulties_frame(difficulties)
    if df.empty:
        st.info("No ratings yet.")
        return
    fig, ax = plt.subplots(figsize=(6.0, max(2.0, 0.28 * len(df) + 0.6)), constrained_layout=True)
    plot_team_difficulty(df, ax=ax)
    st.pyplot(fig, use_container_width=False)
    plt.close(fig)


if __name__ == "__main__":
    main()
