"""
Geometry of straight, optionally parallel-shifted segments with a label.

Both phasor arrows and length dimensions are straight segments between two
per unit points. A segment can be shifted parallel to itself (tangential
offset `par`), e.g. to draw several parallel phasors next to each other. The
label of a segment is placed relative to the segment: `labelrsep` along the
segment (radial) and `labeltsep` perpendicular to it (tangential).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import math

__all__ = [
    "Point",
    "MarkerKind",
    "EndMarker",
    "SegmentGeometry",
    "segment_geometry",
    "label_rotation"
]


Point = tuple[float, float]


class MarkerKind(StrEnum):
    ARROW = "arrow"
    DOT = "dot"


@dataclass(frozen=True)
class EndMarker:
    """
    Marker at one end of a dimension line or arc.

    An ARROW marker is an arrow head pointing from `xytext` to `xy`; a DOT
    marker is a dot at `xy` (`xytext` is None).
    """
    kind: MarkerKind
    xy: Point
    xytext: Point | None = None


@dataclass(frozen=True)
class SegmentGeometry:
    """
    Coordinates of a segment after applying the parallel shift.

    Attributes
    ----------
    start: Point
        Shifted start point.
    end: Point
        Shifted end point.
    direction: Point
        Unit vector from start to end.
    tangent: Point
        Unit vector perpendicular to `direction`, lagging by 90°.
    shift: Point
        Parallel shift applied to both end points.
    length: float
        Length of the segment.
    angle: float
        Angle of `direction` in radians.
    label_xy: Point
        Position of the label.
    label_rotation: float
        Rotation of the label in degrees.
    """
    start: Point
    end: Point
    direction: Point
    tangent: Point
    shift: Point
    length: float
    angle: float
    label_xy: Point
    label_rotation: float

    def at(self, fraction: float) -> Point:
        """Returns the point at `fraction` of the (shifted) segment."""
        return (
            self.start[0] + self.length * self.direction[0] * fraction,
            self.start[1] + self.length * self.direction[1] * fraction
        )


def label_rotation(
    angle: float,
    labelrelrot: bool,
    labelrelangle: float
) -> float:
    """
    Returns the rotation of a label in degrees. Without relative rotation the
    label is not rotated; otherwise it is rotated by `angle + labelrelangle`
    (both in radians).
    """
    if not labelrelrot:
        return 0.0
    return math.degrees(angle + labelrelangle)


def segment_geometry(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    par: float = 0.0,
    labelrsep: float = 0.5,
    labeltsep: float = 0.1,
    labelrelrot: bool = False,
    labelrelangle: float = 0.0
) -> SegmentGeometry | None:
    """
    Returns the geometry of the segment from (`x1`, `y1`) to (`x2`, `y2`), or
    None if the segment has zero length.

    Parameters
    ----------
    x1, y1: float
        Start point.
    x2, y2: float
        End point.
    par: float, default 0.0
        Tangential shift of the segment. Both end points are shifted by
        `-par` times the tangential unit vector.
    labelrsep: float, default 0.5
        Radial location of the label: 0 is the start and 1 the end of the
        segment.
    labeltsep: float, default 0.1
        Tangential displacement of the label: a positive value puts the label
        on the left of the segment (seen in the direction of the segment), a
        negative value on the right.
    labelrelrot: bool, default False
        If True, the label is rotated along with the segment.
    labelrelangle: float, default 0.0
        Rotation of the label relative to the segment in radians; only
        applied if `labelrelrot` is True.

    Returns
    -------
    SegmentGeometry | None
    """
    dr = math.hypot(x2 - x1, y2 - y1)
    if dr == 0.0:
        return None
    drx = (x2 - x1) / dr
    dry = (y2 - y1) / dr
    angle = math.atan2(dry, drx)
    # tangential orientation (lagging by 90°)
    dtx = dry
    dty = -drx
    dpx = -par * dtx
    dpy = -par * dty
    label_xy = (
        x1 + dr * drx * labelrsep - dtx * labeltsep + dpx,
        y1 + dr * dry * labelrsep - dty * labeltsep + dpy
    )
    return SegmentGeometry(
        start=(x1 + dpx, y1 + dpy),
        end=(x2 + dpx, y2 + dpy),
        direction=(drx, dry),
        tangent=(dtx, dty),
        shift=(dpx, dpy),
        length=dr,
        angle=angle,
        label_xy=label_xy,
        label_rotation=label_rotation(angle, labelrelrot, labelrelangle)
    )
