import streamlit as st
from datetime import date

from models.match_model import MatchRecord
from controllers.data_controller import load_competitions, save_match, import_csv
from common.constants import CSV_COLUMNS
from common.csv_import import CSVImportError
from common.store import MatchStoreError
from common.ui import sidebar_header
from common.utils import setup_logging

st.set_page_config(page_title="Add / Import", layout="wide")
setup_logging()


def _match_form(competitions):
    st.subheader("Add a match")
    with st.form("add_match", clear_on_submit=True):
        c1, c2, c3 = st.columns([2, 1, 1])
        competition = c1.selectbox("Competition", competitions, index=None,
                                   placeholder="Choose or type a new one", accept_new_options=True)
        match_date = c2.date_input("Date", value=date.today())
        matchweek = c3.number_input("Matchweek", min_value=1, step=1, value=1)

        h1, h2, a2, a1 = st.columns([3, 1, 1, 3])
        home = h1.text_input("Home")
        score_home = h2.number_input("Home goals", min_value=0, step=1, value=None)
        score_away = a2.number_input("Away goals", min_value=0, step=1, value=None)
        away = a1.text_input("Away")
        st.caption("Leave both scores empty to add an upcoming fixture.")
        ok = st.form_submit_button("Save match")

    if not ok:
        return
    if not competition or not home.strip() or not away.strip():
        st.error("Competition, home and away teams are required.")
        return
    if home.strip() == away.strip():
        st.error("A team cannot play itself.")
        return

    saved = save_match(MatchRecord(
        competition=competition.strip(),
        date=match_date,
        home=home.strip(),
        away=away.strip(),
        score_home=None if score_home is None else int(score_home),
        score_away=None if score_away is None else int(score_away),
        matchweek=int(matchweek),
    ))
    if saved is None:
        st.error("Could not save the match.")
    else:
        st.success(f"Saved: {saved.home} vs {saved.away} (matchweek {saved.matchweek}).")


def _csv_import():
    st.subheader("Import from CSV")
    st.caption("Header row: " + ", ".join(f"`{c}`" for c in CSV_COLUMNS) +
               ". Rows with a missing team or non-numeric score/matchweek are skipped.")
    uploaded = st.file_uploader("CSV file", type=["csv"])
    if uploaded is None or not st.button("Import"):
        return
    try:
        with st.spinner("Importing matches..."):
            saved = import_csv(uploaded)
    except (CSVImportError, MatchStoreError) as exc:
        st.error(str(exc))
        return
    st.success(f"Imported {len(saved)} matches.")


def main():
    sidebar_header(show_custom_nav=True)
    st.header("Add / Import matches")
    _match_form(load_competitions())
    st.divider()
    _csv_import()


if __name__ == "__main__":
    main()
