from __future__ import annotations

from matplotlib.axes import Axes

from .artists import get_axes

__all__ = [
    "arrowaxes",
    "removeaxes"
]


def arrowaxes(
    ax: Axes | None = None,
    xlabel: str = "",
    ylabel: str = "",
    color: str = "black",
    linewidth: float = 0.6
) -> Axes:
    """
    Turns the left and bottom spines of `ax` into an x- and y-axis through
    the origin with an arrow tip at their positive end, and puts `xlabel` and
    `ylabel` next to the arrow tips. The top and right spines are hidden.

    Returns
    -------
    Axes
    """
    ax = get_axes(ax)
    for side in ("top", "right"):
        ax.spines[side].set_visible(False)
    for side in ("left", "bottom"):
        ax.spines[side].set_position("zero")
        ax.spines[side].set_color(color)
        ax.spines[side].set_linewidth(linewidth)
    # x: axes coordinates, y: data coordinates
    ax.plot(
        1, 0, ">",
        color=color,
        markersize=4,
        transform=ax.get_yaxis_transform(),
        clip_on=False
    )
    ax.text(
        1, 0, xlabel,
        ha="right", va="bottom",
        transform=ax.get_yaxis_transform()
    )
    # x: data coordinates, y: axes coordinates
    ax.plot(
        0, 1, "^",
        color=color,
        markersize=4,
        transform=ax.get_xaxis_transform(),
        clip_on=False
    )
    ax.text(
        0, 1, ylabel,
        ha="left", va="top",
        transform=ax.get_xaxis_transform()
    )
    return ax


def removeaxes(ax: Axes | None = None) -> Axes:
    """Hides all spines and ticks of `ax`."""
    ax = get_axes(ax)
    for spine in ax.spines.values():
        spine.set_visible(False)
    ax.set_xticks([])
    ax.set_yticks([])
    return ax
