# common/ui.py
from __future__ import annotations
from typing import List, Optional
import streamlit as st

from common.constants import APP_ROOT


def _link_if_exists(rel_path: str, label: str, icon: str = "📄"):
    """Safely add a page link if the target file exists."""
    target = (APP_ROOT / rel_path)
    if target.exists():
        # Streamlit expects an app-relative path with forward slashes
        st.sidebar.page_link(rel_path.replace("\\", "/"), label=label, icon=icon)


def sidebar_header(show_custom_nav: bool = True):
    # Hide the built-in pages nav so only our custom links appear
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none !important;}</style>",
        unsafe_allow_html=True,
    )
    with st.sidebar:
        st.markdown("### ⚽ League Table")
        if show_custom_nav:
            st.divider()
            st.markdown("#### Pages")
            _link_if_exists("main.py", "Standings", "🏆")
            _link_if_exists("pages/1_History.py", "History", "📈")
            _link_if_exists("pages/2_Fixtures.py", "Fixtures", "📅")
            _link_if_exists("pages/3_Import.py", "Add / Import", "➕")


def selectbox_with_placeholder(
    label: str,
    options: List[str],
    key: Optional[str] = None,
    default_index: Optional[int] = None,
):
    """
    A selectbox that can start empty (placeholder) or preselect an item (default_index).
    Uses a hidden label to avoid duplicate text under the title.
    """
    return st.selectbox(
        label,
        options=options,
        index=default_index,            # None -> placeholder shown; int -> preselect
        placeholder=label,
        label_visibility="collapsed",
        key=key,
    )


def competition_selector(competitions: List[str]) -> Optional[str]:
    """
    Sidebar competition picker shared by every page.
    The choice is kept in `st.session_state["competition"]` so switching
    pages keeps the same league selected.
    """
    if not competitions:
        return None
    prev = st.session_state.get("competition")
    default_index = competitions.index(prev) if prev in competitions else 0
    with st.sidebar:
        st.divider()
        choice = selectbox_with_placeholder(
            "Competition", competitions, key="competition_select", default_index=default_index,
        )
    st.session_state["competition"] = choice
    return choice
