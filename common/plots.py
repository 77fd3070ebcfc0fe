# common/plots.py
from __future__ import annotations
from typing import Dict, Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.patheffects as pe
from matplotlib.ticker import MaxNLocator

from common.colors import difficulty_colors, is_light_color

DEFAULT_FIGSIZE = (8.0, 4.2)


def _new_ax(ax=None, figsize=DEFAULT_FIGSIZE):
    """Return a compact figure/axes when ax is None; otherwise reuse the axes."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
    else:
        fig = ax.figure
    return fig, ax


def _outline_line_if_light(line_obj, hexs: str):
    """Give a black stroke outline to very light lines so they’re visible."""
    if is_light_color(hexs):
        lw = line_obj.get_linewidth()
        line_obj.set_path_effects([pe.Stroke(linewidth=lw + 1.5, foreground="black"), pe.Normal()])


# --- League position by matchweek ----------------
def plot_position_history(positions: pd.DataFrame,
                          colors_map: Optional[Dict[str, str]] = None,
                          team_count: Optional[int] = None,
                          ax: Optional[plt.Axes] = None,
                          show_legend: bool = True) -> plt.Axes:
    """
    One line per column of `positions` (index = matchweek, values = position).
    Position 1 is drawn at the top.
    """
    colors = colors_map or {}
    fig, ax = _new_ax(ax)

    x = positions.index.values
    for team in positions.columns:
        col = colors.get(team, "#888888")
        line = ax.plot(x, positions[team].values, marker="o", markersize=3,
                       linewidth=2, color=col, label=team)[0]
        _outline_line_if_light(line, col)

    bottom = team_count or (int(np.nanmax(positions.values)) if positions.size else 1)
    ax.set_ylim(bottom + 0.5, 0.5)                  # inverted: 1st at the top
    ax.yaxis.set_major_locator(MaxNLocator(integer=True))
    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.set_xlabel("Matchweek", fontsize=8); ax.set_ylabel("Position", fontsize=8)
    ax.grid(axis="y", linestyle=":", linewidth=0.6, alpha=0.6)
    ax.tick_params(axis="both", labelsize=7)

    if show_legend and len(positions.columns):
        ax.legend(fontsize=7, loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    return ax


# --- Team difficulty ratings (horizontal bars) ----------------
def plot_team_difficulty(difficulties: pd.DataFrame,
                         ax: Optional[plt.Axes] = None) -> plt.Axes:
    """Bars of 'Score' per 'Club', colored by the 'FDR' level (hardest on top)."""
    fig, ax = _new_ax(ax, figsize=(6.0, max(2.0, 0.28 * len(difficulties) + 0.6)))

    bar_colors = [difficulty_colors(lvl).background for lvl in difficulties["FDR"]]
    bars = ax.barh(difficulties["Club"], difficulties["Score"], color=bar_colors)
    for patch, c in zip(bars, bar_colors):
        if is_light_color(c):
            patch.set_edgecolor("black"); patch.set_linewidth(1.0)

    ax.invert_yaxis()
    ax.set_xlim(0, 10)
    ax.set_xlabel("Difficulty score (0–10)", fontsize=8)
    ax.tick_params(axis="both", labelsize=7)

    for i, v in enumerate(difficulties["Score"]):
        ax.text(v + 0.1, i, f"{v:.1f}", va="center", fontsize=6)
    return ax
