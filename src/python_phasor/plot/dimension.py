from __future__ import annotations

import math

from matplotlib.axes import Axes

from ..pint_setup import Quantity
from ..config import DrawingConfig
from ..geometry import (
    LengthDimensionGeometry,
    lengthdimension_geometry,
    ArcGeometry,
    arc_geometry
)
from .artists import get_axes, draw_line, draw_marker, draw_label

__all__ = [
    "lengthdimension",
    "angulardimension"
]


def lengthdimension(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    label: str = "",
    labeltsep: float = 0.1,
    labelrsep: float = 0.5,
    labelrelrot: bool = False,
    labelrelangle: float | Quantity = 0.0,
    ha: str = "center",
    va: str = "center",
    color: str = "black",
    backgroundcolor: str = "none",
    arrowstyle1: str = "<|-",
    arrowstyle2: str = "-|>",
    linewidth: float = 0.6,
    linestyle: str = "-",
    width: float = 0.2,
    headlength: float = 5.0,
    headwidth: float = 2.5,
    par: float = 0.0,
    paroverhang: float = 0.02,
    parcolor: str = "black",
    parlinewidth: float = 0.6,
    parlinestyle: str = "-",
    ax: Axes | None = None,
    config: DrawingConfig | None = None
) -> LengthDimensionGeometry | None:
    """
    Draws a length dimension with label from point (`x1`, `y1`) to point
    (`x2`, `y2`).

    The dimension line can be shifted parallel to the dimensioned points by
    means of `par`. In that case auxiliary lines are drawn from the
    dimensioned points to the dimension line, with an overhang `paroverhang`.

    Parameters
    ----------
    x1, y1, x2, y2: float
        Dimensioned points.
    label: str, default ""
        Label of the dimension.
    labeltsep: float, default 0.1
        Tangential displacement of the label with respect to the dimension
        line.
    labelrsep: float, default 0.5
        Location of the label along the dimension line: 0 is the start and 1
        is the end.
    labelrelrot: bool, default False
        Rotate the label along with the dimension line.
    labelrelangle: float | Quantity, default 0.0
        Rotation of the label relative to the dimension line; only applied
        if `labelrelrot` is True.
    ha, va: str, default "center"
        Alignment of the label.
    color: str, default "black"
        Color of the dimension line and its markers.
    backgroundcolor: str, default "none"
        Background color of the label.
    arrowstyle1: str, default "<|-"
        Marker at the start: "<|-" (arrow) or "." (dot); anything else draws
        no marker.
    arrowstyle2: str, default "-|>"
        Marker at the end: "-|>" (arrow) or "." (dot); anything else draws
        no marker.
    linewidth, linestyle:
        Line properties of the dimension line.
    width, headlength, headwidth:
        Properties of the arrow heads.
    par: float, default 0.0
        Tangential shift of the dimension line.
    paroverhang: float, default 0.02
        Overhang of the auxiliary lines beyond the dimension line.
    parcolor, parlinewidth, parlinestyle:
        Line properties of the auxiliary lines.
    ax: Axes, optional
        Axes to draw on. Defaults to the current axes.
    config: DrawingConfig, optional
        Visual constants.

    Returns
    -------
    LengthDimensionGeometry | None
        None if both points coincide; nothing is drawn in that case.
    """
    ax = get_axes(ax)
    geom = lengthdimension_geometry(
        x1, y1, x2, y2,
        par=par,
        paroverhang=paroverhang,
        labelrsep=labelrsep,
        labeltsep=labeltsep,
        labelrelrot=labelrelrot,
        labelrelangle=labelrelangle,
        arrowstyle1=arrowstyle1,
        arrowstyle2=arrowstyle2,
        config=config
    )
    if geom is None:
        return None
    for xy1, xy2 in geom.aux_lines:
        draw_line(
            ax, xy1, xy2,
            color=parcolor,
            linestyle=parlinestyle,
            linewidth=parlinewidth
        )
    draw_line(
        ax, geom.start, geom.end,
        color=color,
        linestyle=linestyle,
        linewidth=linewidth
    )
    for marker in (geom.start_marker, geom.end_marker):
        draw_marker(
            ax, marker,
            color=color,
            width=width,
            headlength=headlength,
            headwidth=headwidth
        )
    draw_label(
        ax, geom.label_xy, label,
        rotation=geom.label_rotation,
        ha=ha,
        va=va,
        backgroundcolor=backgroundcolor
    )
    return geom


def angulardimension(
    r: float = 1.0,
    phi1: float | Quantity = 0.0,
    phi2: float | Quantity = math.pi / 2,
    origin: complex = 0j,
    label: str = "",
    labelphisep: float = 0.5,
    labelrsep: float = 0.1,
    labelrelrot: bool = False,
    labelrelangle: float | Quantity = 0.0,
    ha: str = "center",
    va: str = "center",
    color: str = "black",
    backgroundcolor: str = "none",
    arrowstyle1: str = ".",
    arrowstyle2: str = "-|>",
    dot90: bool = False,
    linewidth: float = 0.6,
    linestyle: str = "-",
    width: float = 0.2,
    headlength: float = 5.0,
    headwidth: float = 2.5,
    ax: Axes | None = None,
    config: DrawingConfig | None = None
) -> ArcGeometry:
    """
    Draws an arrowed arc to label the angle between two phasors.

    The arc is drawn from angle `phi1` (begin) to `phi2` (end) with radius
    `r` around `origin`. The markers at begin and end of the arc can be set.
    Optionally a dot inside the arc indicates a right angle.

    Parameters
    ----------
    r: float, default 1.0
        Per unit radius of the arc; typically between 0 and 1.
    phi1: float | Quantity, default 0.0
        Angle at the begin of the arc.
    phi2: float | Quantity, default pi/2
        Angle at the end of the arc.
    origin: complex, default 0j
        Per unit center of the arc.
    label: str, default ""
        Label of the angle.
    labelphisep: float, default 0.5
        Angular location of the label: 0 is at `phi1`, 1 at `phi2`.
    labelrsep: float, default 0.1
        Radial separation of the label from the arc; positive values locate
        the label outside, negative values inside the arc.
    labelrelrot: bool, default False
        Rotate the label by the angle in the middle of the arc plus
        `labelrelangle`.
    labelrelangle: float | Quantity, default 0.0
        Relative rotation of the label; only applied if `labelrelrot` is
        True.
    ha, va: str, default "center"
        Alignment of the label.
    color: str, default "black"
        Color of the arc.
    backgroundcolor: str, default "none"
        Background color of the label.
    arrowstyle1: str, default "."
        Marker at the begin of the arc: "<|-" (arrow) or "." (dot).
    arrowstyle2: str, default "-|>"
        Marker at the end of the arc: "-|>" (arrow) or "." (dot).
    dot90: bool, default False
        Draw a dot inside the arc to indicate a right angle.
    linewidth, linestyle:
        Line properties of the arc.
    width, headlength, headwidth:
        Properties of the arrow heads.
    ax: Axes, optional
        Axes to draw on. Defaults to the current axes.
    config: DrawingConfig, optional
        Visual constants.

    Returns
    -------
    ArcGeometry
    """
    ax = get_axes(ax)
    geom = arc_geometry(
        r=r,
        phi1=phi1,
        phi2=phi2,
        origin=origin,
        labelphisep=labelphisep,
        labelrsep=labelrsep,
        labelrelrot=labelrelrot,
        labelrelangle=labelrelangle,
        arrowstyle1=arrowstyle1,
        arrowstyle2=arrowstyle2,
        dot90=dot90,
        config=config
    )
    ax.plot(
        geom.x, geom.y,
        color=color,
        linewidth=linewidth,
        linestyle=linestyle
    )
    for marker in (geom.start_marker, geom.end_marker):
        draw_marker(
            ax, marker,
            color=color,
            width=width,
            headlength=headlength,
            headwidth=headwidth
        )
    draw_label(
        ax, geom.label_xy, label,
        rotation=geom.label_rotation,
        ha=ha,
        va=va,
        backgroundcolor=backgroundcolor
    )
    if geom.dot90_xy is not None:
        ax.plot(
            geom.dot90_xy[0], geom.dot90_xy[1],
            marker=".",
            color=color,
            clip_on=False
        )
    return geom
