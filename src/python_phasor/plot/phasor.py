from __future__ import annotations

from matplotlib.axes import Axes

from ..pint_setup import Quantity
from ..config import DrawingConfig
from ..calc import per_unit, resolve_origin, resolve_ref
from ..geometry import PhasorGeometry, LengthDimensionGeometry, phasor_geometry
from .artists import get_axes, draw_line, draw_arrow_head, draw_label
from .dimension import lengthdimension

__all__ = [
    "phasor",
    "phasordimension"
]


def phasor(
    c: complex | Quantity,
    origin: complex | Quantity | None = None,
    ref: float | Quantity | None = None,
    par: float = 0.0,
    labelrsep: float = 0.5,
    labeltsep: float = 0.1,
    label: str = "",
    ha: str = "center",
    va: str = "center",
    labelrelrot: bool = False,
    labelrelangle: float | Quantity = 0.0,
    color: str = "black",
    backgroundcolor: str = "none",
    linestyle: str = "-",
    linewidth: float = 1.0,
    width: float = 0.2,
    headlength: float = 10.0,
    headwidth: float = 5.0,
    ax: Axes | None = None,
    config: DrawingConfig | None = None
) -> PhasorGeometry | None:
    """
    Draws a phasor from start point `origin` to end point `origin + c`. The
    phasor consists of a shaft and an arrow head.

    Each phasor is drawn as a per unit quantity, i.e. `c / ref` is actually
    shown in the plot. This makes it possible to draw phasors of different
    quantities, e.g. voltage and current phasors, in the same diagram: one
    (constant) `ref` is used for all voltage phasors and another one for all
    current phasors. `c`, `origin` and `ref` must have the same dimension.

    Parameters
    ----------
    c: complex | Quantity
        Complex phasor, drawn relative to `origin`.
    origin: complex | Quantity, optional
        Start point of the phasor. Defaults to zero in the unit of `c`.
    ref: float | Quantity, optional
        Reference length of scaling. Defaults to one unit of `c`.
    par: float, default 0.0
        Per unit tangential shift of the phasor, to draw parallel phasors;
        typically around 0.05 to 0.1.
    labelrsep: float, default 0.5
        Radial per unit location of the label: 0 is the start and 1 the arrow
        head of the phasor.
    labeltsep: float, default 0.1
        Tangential per unit location of the label: 0 puts the label onto the
        phasor, 0.1 above it and -0.2 below it (with respect to `ref`).
    label: str, default ""
        Label of the phasor.
    ha: str, default "center"
        Horizontal alignment of the label.
    va: str, default "center"
        Vertical alignment of the label.
    labelrelrot: bool, default False
        If True, the label is rotated along with the phasor.
    labelrelangle: float | Quantity, default 0.0
        Relative angle of the label with respect to the phasor; only applied
        if `labelrelrot` is True.
    color: str, default "black"
        Color of shaft and arrow head.
    backgroundcolor: str, default "none"
        Background color of the label; "white" can be useful if the label is
        put onto the phasor (`labeltsep = 0`).
    linestyle: str, default "-"
        Line style of the shaft.
    linewidth: float, default 1.0
        Line width of the shaft.
    width: float, default 0.2
        Line width of the arrow head.
    headlength: float, default 10.0
        Length of the arrow head.
    headwidth: float, default 5.0
        Width of the arrow head.
    ax: Axes, optional
        Axes to draw on. Defaults to the current axes.
    config: DrawingConfig, optional
        Visual constants.

    Returns
    -------
    PhasorGeometry | None
        None if the magnitude of `c` is zero; nothing is drawn in that case.

    Raises
    ------
    DimensionMismatchError
        If `c`, `origin` and `ref` don't have the same dimension.
    """
    ax = get_axes(ax)
    geom = phasor_geometry(
        c,
        origin=origin,
        ref=ref,
        par=par,
        labelrsep=labelrsep,
        labeltsep=labeltsep,
        labelrelrot=labelrelrot,
        labelrelangle=labelrelangle,
        config=config
    )
    if geom is None:
        return None
    draw_line(
        ax, geom.start, geom.end,
        color=color,
        linestyle=linestyle,
        linewidth=linewidth
    )
    draw_arrow_head(
        ax, geom.end, geom.head_start,
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


def phasordimension(
    c: complex | Quantity,
    origin: complex | Quantity | None = None,
    ref: float | Quantity | None = None,
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
    Draws a length dimension along phasor `c`, starting at `origin`.

    `c` and `origin` are scaled by `ref` the same way as in `phasor`, so that
    a phasor and its dimension line coincide. All other parameters are
    passed on to `lengthdimension`.

    Raises
    ------
    DimensionMismatchError
        If `c`, `origin` and `ref` don't have the same dimension.
    """
    if origin is None:
        origin = resolve_origin(c)
    if ref is None:
        ref = resolve_ref(c)
    pu = per_unit(ref, c=c, origin=origin)
    start = pu["origin"]
    end = pu["origin"] + pu["c"]
    return lengthdimension(
        start.real, start.imag,
        end.real, end.imag,
        label=label,
        labeltsep=labeltsep,
        labelrsep=labelrsep,
        labelrelrot=labelrelrot,
        labelrelangle=labelrelangle,
        ha=ha,
        va=va,
        color=color,
        backgroundcolor=backgroundcolor,
        arrowstyle1=arrowstyle1,
        arrowstyle2=arrowstyle2,
        linewidth=linewidth,
        linestyle=linestyle,
        width=width,
        headlength=headlength,
        headwidth=headwidth,
        par=par,
        paroverhang=paroverhang,
        parcolor=parcolor,
        parlinewidth=parlinewidth,
        parlinestyle=parlinestyle,
        ax=ax,
        config=config
    )
