from __future__ import annotations

from dataclasses import dataclass
import logging
import math

import numpy as np
import numpy.typing as npt

from ..pint_setup import Quantity
from ..config import DrawingConfig, DEFAULT_CONFIG
from ..calc import strip, to_radians
from .segment import (
    Point,
    MarkerKind,
    EndMarker,
    SegmentGeometry,
    segment_geometry,
    label_rotation
)

__all__ = [
    "LengthDimensionGeometry",
    "lengthdimension_geometry",
    "ArcGeometry",
    "arc_geometry"
]


logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Length dimension
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class LengthDimensionGeometry(SegmentGeometry):
    """
    Geometry of a length dimension: a (shifted) dimension line with optional
    markers at both ends and auxiliary lines that connect the dimensioned
    points with the shifted dimension line.
    """
    start_marker: EndMarker | None
    end_marker: EndMarker | None
    aux_lines: tuple[tuple[Point, Point], ...]


def lengthdimension_geometry(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    par: float = 0.0,
    paroverhang: float = 0.02,
    labelrsep: float = 0.5,
    labeltsep: float = 0.1,
    labelrelrot: bool = False,
    labelrelangle: float | Quantity = 0.0,
    arrowstyle1: str = "<|-",
    arrowstyle2: str = "-|>",
    config: DrawingConfig | None = None
) -> LengthDimensionGeometry | None:
    """
    Returns the geometry of a length dimension between (`x1`, `y1`) and
    (`x2`, `y2`), or None if both points coincide.

    Parameters
    ----------
    x1, y1, x2, y2: float
        Dimensioned points.
    par: float, default 0.0
        Tangential shift of the dimension line with respect to the
        dimensioned points.
    paroverhang: float, default 0.02
        Overhang of the auxiliary lines beyond the dimension line. Auxiliary
        lines are only present if `par` is not zero.
    labelrsep, labeltsep, labelrelrot, labelrelangle:
        Placement of the label; see `segment_geometry`.
    arrowstyle1: str, default "<|-"
        Marker at the start point: "<|-" (arrow head) or "." (dot). Any other
        string means no marker.
    arrowstyle2: str, default "-|>"
        Marker at the end point: "-|>" (arrow head) or "." (dot). Any other
        string means no marker.
    config: DrawingConfig, optional
        Visual constants.

    Returns
    -------
    LengthDimensionGeometry | None
    """
    config = config or DEFAULT_CONFIG
    seg = segment_geometry(
        x1, y1, x2, y2,
        par=par,
        labelrsep=labelrsep,
        labeltsep=labeltsep,
        labelrelrot=labelrelrot,
        labelrelangle=to_radians(labelrelangle)
    )
    if seg is None:
        logger.debug("Length dimension with zero length is not drawn.")
        return None

    if arrowstyle1 == "<|-":
        start_marker = EndMarker(
            MarkerKind.ARROW,
            xy=seg.start,
            xytext=seg.at(1.0 - config.head_fraction)
        )
    elif arrowstyle1 == ".":
        start_marker = EndMarker(MarkerKind.DOT, xy=seg.start)
    else:
        logger.debug(
            f"No marker at start of length dimension (arrowstyle1={arrowstyle1!r})."
        )
        start_marker = None

    if arrowstyle2 == "-|>":
        end_marker = EndMarker(
            MarkerKind.ARROW,
            xy=seg.end,
            xytext=seg.at(config.head_fraction)
        )
    elif arrowstyle2 == ".":
        end_marker = EndMarker(MarkerKind.DOT, xy=seg.end)
    else:
        logger.debug(
            f"No marker at end of length dimension (arrowstyle2={arrowstyle2!r})."
        )
        end_marker = None

    aux_lines = ()
    if par != 0:
        # unit vector in the direction of the shift
        ux = seg.shift[0] / abs(par)
        uy = seg.shift[1] / abs(par)
        aux_lines = tuple(
            (
                (x, y),
                (x + seg.shift[0] + ux * paroverhang,
                 y + seg.shift[1] + uy * paroverhang)
            )
            for x, y in ((x1, y1), (x2, y2))
        )

    return LengthDimensionGeometry(
        start_marker=start_marker,
        end_marker=end_marker,
        aux_lines=aux_lines,
        **vars(seg)
    )


# ------------------------------------------------------------------------------
# Angular dimension
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class ArcGeometry:
    """
    Geometry of an angular dimension.

    Attributes
    ----------
    x, y: npt.NDArray[np.float64]
        Sample points of the arc, from `phi1` to `phi2` inclusive.
    sign: float
        Sign of `phi2 - phi1`: +1 for a counterclockwise arc, -1 for a
        clockwise arc.
    start_marker, end_marker: EndMarker | None
        Markers at the begin and end of the arc.
    label_xy: Point
        Position of the label.
    label_rotation: float
        Rotation of the label in degrees.
    dot90_xy: Point | None
        Position of the dot that indicates a right angle, if requested.
    """
    x: npt.NDArray[np.float64]
    y: npt.NDArray[np.float64]
    sign: float
    start_marker: EndMarker | None
    end_marker: EndMarker | None
    label_xy: Point
    label_rotation: float
    dot90_xy: Point | None = None

    @property
    def samples(self) -> int:
        return len(self.x)


def arc_geometry(
    r: float = 1.0,
    phi1: float | Quantity = 0.0,
    phi2: float | Quantity = math.pi / 2,
    origin: complex = 0j,
    labelphisep: float = 0.5,
    labelrsep: float = 0.1,
    labelrelrot: bool = False,
    labelrelangle: float | Quantity = 0.0,
    arrowstyle1: str = ".",
    arrowstyle2: str = "-|>",
    dot90: bool = False,
    config: DrawingConfig | None = None
) -> ArcGeometry:
    """
    Returns the geometry of an arc with radius `r` around `origin`, from
    angle `phi1` to `phi2`.

    The number of sample points is the angular span in degrees divided by
    `config.arc_step_deg`, rounded, with a minimum of two points so that both
    ends are always present.

    Parameters
    ----------
    r: float, default 1.0
        Per unit radius of the arc.
    phi1: float | Quantity, default 0.0
        Angle at the begin of the arc.
    phi2: float | Quantity, default pi/2
        Angle at the end of the arc.
    origin: complex, default 0j
        Per unit center of the arc.
    labelphisep: float, default 0.5
        Angular location of the label: 0 is at `phi1` and 1 at `phi2`.
    labelrsep: float, default 0.1
        Radial separation of the label from the arc; positive values are
        outside, negative values inside the arc.
    labelrelrot: bool, default False
        If True, the label is rotated by the angle in the middle of the arc
        plus `labelrelangle`.
    labelrelangle: float | Quantity, default 0.0
        Relative rotation of the label.
    arrowstyle1: str, default "."
        Marker at the begin of the arc: "<|-" (arrow head) or "." (dot). Any
        other string means no marker.
    arrowstyle2: str, default "-|>"
        Marker at the end of the arc: "-|>" (arrow head) or "." (dot). Any
        other string means no marker.
    dot90: bool, default False
        Add a dot inside the arc to indicate a right angle.
    config: DrawingConfig, optional
        Visual constants.

    Returns
    -------
    ArcGeometry
    """
    config = config or DEFAULT_CONFIG
    r = float(strip(r))
    origin = complex(strip(origin))
    phi1 = to_radians(phi1)
    phi2 = to_radians(phi2)
    dphi = phi2 - phi1
    sig = float(np.sign(dphi))
    segs = round(math.degrees(abs(dphi)) / config.arc_step_deg)
    phi = np.linspace(phi1, phi2, max(segs, 2))
    x = r * np.cos(phi) + origin.real
    y = r * np.sin(phi) + origin.imag

    head_angle = math.pi / 2 * config.arc_head_angle_factor
    head_length = config.arc_head_length * r
    p0 = (float(x[0]), float(y[0]))
    pn = (float(x[-1]), float(y[-1]))

    if arrowstyle1 == "<|-":
        start_marker = EndMarker(
            MarkerKind.ARROW,
            xy=p0,
            xytext=(
                p0[0] - sig * head_length * math.cos(phi1 - head_angle),
                p0[1] - sig * head_length * math.sin(phi1 - head_angle)
            )
        )
    elif arrowstyle1 == ".":
        start_marker = EndMarker(MarkerKind.DOT, xy=p0)
    else:
        logger.debug(f"No marker at begin of arc (arrowstyle1={arrowstyle1!r}).")
        start_marker = None

    if arrowstyle2 == "-|>":
        end_marker = EndMarker(
            MarkerKind.ARROW,
            xy=pn,
            xytext=(
                pn[0] - sig * head_length * math.cos(phi2 + head_angle),
                pn[1] - sig * head_length * math.sin(phi2 + head_angle)
            )
        )
    elif arrowstyle2 == ".":
        end_marker = EndMarker(MarkerKind.DOT, xy=pn)
    else:
        logger.debug(f"No marker at end of arc (arrowstyle2={arrowstyle2!r}).")
        end_marker = None

    phim = (phi1 + phi2) / 2.0
    rlabel = r + labelrsep
    philabel = phi1 + dphi * labelphisep
    label_xy = (
        rlabel * math.cos(philabel) + origin.real,
        rlabel * math.sin(philabel) + origin.imag
    )

    dot90_xy = None
    if dot90:
        r_dot = r * config.dot90_radius_fraction
        dot90_xy = (
            r_dot * math.cos(phim) + origin.real,
            r_dot * math.sin(phim) + origin.imag
        )

    return ArcGeometry(
        x=x,
        y=y,
        sign=sig,
        start_marker=start_marker,
        end_marker=end_marker,
        label_xy=label_xy,
        label_rotation=label_rotation(
            phim, labelrelrot, to_radians(labelrelangle)
        ),
        dot90_xy=dot90_xy
    )
