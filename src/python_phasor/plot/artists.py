"""
Low-level matplotlib calls shared by the drawing functions.
"""
from __future__ import annotations

import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from ..geometry import Point, EndMarker, MarkerKind

__all__ = [
    "get_axes",
    "draw_line",
    "draw_arrow_head",
    "draw_marker",
    "draw_label"
]


def get_axes(ax: Axes | None) -> Axes:
    """Returns `ax`, or the current axes of matplotlib if `ax` is None."""
    if ax is None:
        return plt.gca()
    return ax


def draw_line(
    ax: Axes,
    xy1: Point,
    xy2: Point,
    color: str = "black",
    linestyle: str = "-",
    linewidth: float = 1.0
) -> None:
    ax.plot(
        [xy1[0], xy2[0]], [xy1[1], xy2[1]],
        color=color,
        linestyle=linestyle,
        linewidth=linewidth,
        clip_on=False
    )


def draw_arrow_head(
    ax: Axes,
    xy: Point,
    xytext: Point,
    color: str = "black",
    width: float = 0.2,
    headlength: float = 10.0,
    headwidth: float = 5.0
) -> None:
    """
    Draws a short arrow from `xytext` to `xy` with a solid line style. Only
    the head of this arrow is visible, as `xytext` lies very close to `xy`;
    the shaft is drawn separately, so that its line style is not messed up
    by the contour of the arrow.
    """
    ax.annotate(
        "",
        xy=xy,
        xytext=xytext,
        xycoords="data",
        arrowprops={
            "edgecolor": color,
            "facecolor": color,
            "width": width,
            "linestyle": "-",
            "headlength": headlength,
            "headwidth": headwidth
        },
        annotation_clip=False
    )


def draw_marker(
    ax: Axes,
    marker: EndMarker | None,
    color: str = "black",
    width: float = 0.2,
    headlength: float = 5.0,
    headwidth: float = 2.5
) -> None:
    if marker is None:
        return
    if marker.kind == MarkerKind.ARROW:
        draw_arrow_head(
            ax, marker.xy, marker.xytext,
            color=color,
            width=width,
            headlength=headlength,
            headwidth=headwidth
        )
    elif marker.kind == MarkerKind.DOT:
        ax.plot(
            marker.xy[0], marker.xy[1],
            marker=".",
            color=color,
            clip_on=False
        )


def draw_label(
    ax: Axes,
    xy: Point,
    label: str,
    rotation: float = 0.0,
    ha: str = "center",
    va: str = "center",
    backgroundcolor: str = "none"
) -> None:
    ax.text(
        xy[0], xy[1], label,
        ha=ha,
        va=va,
        rotation=rotation,
        backgroundcolor=backgroundcolor
    )
