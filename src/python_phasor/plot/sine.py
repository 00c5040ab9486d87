from __future__ import annotations

import logging

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import ConnectionPatch

from ..pint_setup import Quantity
from ..config import DrawingConfig, DEFAULT_CONFIG
from ..geometry import Panel, PhasorSineGeometry, phasorsine_geometry
from .axes import arrowaxes, removeaxes
from .phasor import phasor

__all__ = ["phasorsine"]


logger = logging.getLogger(__name__)


def _tick_labels(maglabel: str) -> list[str]:
    if maglabel:
        return ["$-$" + maglabel, "$0$", maglabel]
    return ["", "", ""]


def phasorsine(
    mag: float | Quantity = 1.0,
    phi: float | Quantity = 0.0,
    add: bool = False,
    axes: tuple[Axes, Axes] | None = None,
    figsize: tuple[float, float] = (6.6, 2.5),
    xlabel: str = r"$\omega t$ ($^\circ$)",
    ylabel: str = "",
    maglabel: str = "",
    phasorlabel: str | None = None,
    color: str = "black",
    backgroundcolor: str = "none",
    linewidth: float = 1.0,
    linestyle: str = "-",
    labeltsep: float = 0.1,
    labelrsep: float = 0.5,
    labelrelrot: bool = True,
    labelrelangle: float | Quantity = 0.0,
    colordash: str = "gray",
    left: float = 0.20,
    right: float = 0.80,
    bottom: float = 0.20,
    top: float = 0.80,
    showsine: bool = True,
    showdashline: bool = True,
    config: DrawingConfig | None = None
) -> tuple[Figure, tuple[Axes, Axes]]:
    """
    Draws a phasor with magnitude between 0 and 1 in the left panel of a
    figure and the corresponding sine wave in the right panel. Such a graph
    is used to explain the relationship between phasors and time domain
    waveforms.

    Parameters
    ----------
    mag: float | Quantity, default 1.0
        Magnitude of the phasor; shall be between 0 and 1.
    phi: float | Quantity, default 0.0
        Phase angle of the phasor.
    add: bool, default False
        If False, a new figure with size `figsize` is created (unless `axes`
        is given). If True, the phasor and sine wave are added to existing
        panels: either `axes`, or the first two axes of the current figure.
        If `axes` is not given and the current figure has fewer than two
        axes, a new figure is created as if `add` were False.
    axes: tuple[Axes, Axes], optional
        The phasor panel and sine panel to draw on, e.g. as returned by a
        previous call.
    figsize: tuple[float, float], default (6.6, 2.5)
        Size of a new figure.
    xlabel: str
        Label of the x-axis of the sine panel.
    ylabel: str, default ""
        Label of the y-axis of the sine panel. It is only drawn when the
        panels are set up (`add` is False), so it should name all quantities
        that will be added.
    maglabel: str, default ""
        Label of the positive and negative amplitude on the y-axis of the
        sine panel.
    phasorlabel: str, optional
        Label of the phasor. Defaults to `maglabel`.
    color, backgroundcolor, linewidth, linestyle:
        Properties of the phasor and the sine wave; `backgroundcolor` applies
        to all labels.
    labeltsep, labelrsep, labelrelrot, labelrelangle:
        Placement of the phasor label; see `phasor`.
    colordash: str, default "gray"
        Color of the dotted circle and the dotted guide lines.
    left, right, bottom, top: float
        Borders of the panels in a new figure.
    showsine: bool, default True
        Draw the sine wave.
    showdashline: bool, default True
        Draw the dotted guide lines.
    config: DrawingConfig, optional
        Visual constants.

    Returns
    -------
    tuple[Figure, tuple[Axes, Axes]]
        The figure and its phasor and sine panel.
    """
    config = config or DEFAULT_CONFIG
    if phasorlabel is None:
        phasorlabel = maglabel
    geom = phasorsine_geometry(mag, phi, config=config)

    if add and axes is None:
        fig = plt.gcf()
        if len(fig.axes) >= 2:
            axes = fig.axes[0], fig.axes[1]
        else:
            logger.debug(
                f"Current figure has {len(fig.axes)} axes; "
                f"phasorsine creates a new figure."
            )
            add = False

    if axes is not None:
        ax1, ax2 = axes
        fig = ax1.figure
    else:
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=figsize)
        fig.subplots_adjust(left=left, right=right, bottom=bottom, top=top)

    _draw_phasor_panel(
        ax1, geom, add,
        phasorlabel=phasorlabel,
        color=color,
        backgroundcolor=backgroundcolor,
        linewidth=linewidth,
        linestyle=linestyle,
        labeltsep=labeltsep,
        labelrsep=labelrsep,
        labelrelrot=labelrelrot,
        labelrelangle=labelrelangle,
        colordash=colordash,
        config=config
    )
    _draw_sine_panel(
        ax2, geom, add,
        xlabel=xlabel,
        ylabel=ylabel,
        maglabel=maglabel,
        color=color,
        backgroundcolor=backgroundcolor,
        linewidth=linewidth,
        linestyle=linestyle,
        showsine=showsine
    )
    if showdashline:
        panels = {Panel.PHASOR: ax1, Panel.SINE: ax2}
        for line in geom.guide_lines:
            con = ConnectionPatch(
                xyA=line.xy_from,
                xyB=line.xy_to,
                coordsA="data",
                coordsB="data",
                axesA=panels[line.panel_from],
                axesB=panels[line.panel_to],
                color=colordash,
                linewidth=config.dash_linewidth,
                linestyle=":",
                clip_on=False
            )
            ax2.add_artist(con)
    return fig, (ax1, ax2)


def _draw_phasor_panel(
    ax: Axes,
    geom: PhasorSineGeometry,
    add: bool,
    phasorlabel: str,
    color: str,
    backgroundcolor: str,
    linewidth: float,
    linestyle: str,
    labeltsep: float,
    labelrsep: float,
    labelrelrot: bool,
    labelrelangle: float | Quantity,
    colordash: str,
    config: DrawingConfig
) -> None:
    ax.plot(
        geom.circle_x, geom.circle_y,
        color=colordash,
        linewidth=1,
        linestyle=":",
        dash_capstyle="round"
    )
    phasor(
        geom.phasor,
        ref=1.0,
        label=phasorlabel,
        labelrsep=labelrsep,
        labeltsep=labeltsep,
        labelrelrot=labelrelrot,
        labelrelangle=labelrelangle,
        color=color,
        backgroundcolor=backgroundcolor,
        linestyle=linestyle,
        linewidth=linewidth,
        ax=ax,
        config=config
    )
    if not add:
        ax.set_xlim(-1.1, 1.1)
        ax.set_ylim(-1.1, 1.1)
        ax.set_aspect("equal", adjustable="box")
        removeaxes(ax)


def _draw_sine_panel(
    ax: Axes,
    geom: PhasorSineGeometry,
    add: bool,
    xlabel: str,
    ylabel: str,
    maglabel: str,
    color: str,
    backgroundcolor: str,
    linewidth: float,
    linestyle: str,
    showsine: bool
) -> None:
    if showsine:
        ax.plot(
            geom.sine_x, geom.sine_y,
            color=color,
            linewidth=linewidth,
            linestyle=linestyle
        )
    if not add:
        ax.set_xlim(0, 360)
        ax.set_ylim(-1.1, 1.1)
        ax.set_xticks(
            geom.xticks,
            labels=[f"{t:g}" for t in geom.xticks],
            backgroundcolor=backgroundcolor
        )
        ax.set_yticks(
            geom.yticks,
            labels=_tick_labels(maglabel),
            backgroundcolor=backgroundcolor
        )
        arrowaxes(ax, xlabel=xlabel, ylabel=ylabel)
    elif maglabel:
        # extend the existing ticks and labels by the new magnitude
        yticks_old = list(ax.get_yticks())
        ylabels_old = [t.get_text() for t in ax.get_yticklabels()]
        logger.debug(
            f"Add y-ticks {-geom.mag:g} and {geom.mag:g} to existing "
            f"y-ticks {yticks_old}."
        )
        ax.set_yticks(
            yticks_old + [-geom.mag, geom.mag],
            labels=ylabels_old + ["$-$" + maglabel, maglabel],
            backgroundcolor=backgroundcolor
        )
