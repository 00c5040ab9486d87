from __future__ import annotations

from dataclasses import dataclass
import logging

from ..pint_setup import Quantity
from ..config import DrawingConfig, DEFAULT_CONFIG
from ..calc import per_unit, resolve_origin, resolve_ref, to_radians, is_zero
from .segment import Point, SegmentGeometry, segment_geometry

__all__ = [
    "PhasorGeometry",
    "phasor_geometry"
]


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhasorGeometry(SegmentGeometry):
    """
    Geometry of a phasor arrow. The shaft runs from `start` to `end`; the
    arrow head is drawn separately from `head_start` to `end`.
    """
    head_start: Point


def phasor_geometry(
    c: complex | Quantity,
    origin: complex | Quantity | None = None,
    ref: float | Quantity | None = None,
    par: float = 0.0,
    labelrsep: float = 0.5,
    labeltsep: float = 0.1,
    labelrelrot: bool = False,
    labelrelangle: float | Quantity = 0.0,
    config: DrawingConfig | None = None
) -> PhasorGeometry | None:
    """
    Returns the per unit geometry of phasor `c` drawn from `origin`.

    Parameters
    ----------
    c: complex | Quantity
        Complex phasor.
    origin: complex | Quantity, optional
        Start point of the phasor. Must have the same dimension as `c`.
        Defaults to zero in the unit of `c`.
    ref: float | Quantity, optional
        Reference length used to scale `c` and `origin` to per unit values.
        Must have the same dimension as `c`. Defaults to one unit of `c`.
    par: float, default 0.0
        Per unit tangential shift of the phasor, to draw parallel phasors.
    labelrsep: float, default 0.5
        Radial per unit location of the label along the phasor.
    labeltsep: float, default 0.1
        Tangential per unit displacement of the label.
    labelrelrot: bool, default False
        Rotate the label along with the phasor.
    labelrelangle: float | Quantity, default 0.0
        Relative angle of the label with respect to the phasor; only applied
        if `labelrelrot` is True.
    config: DrawingConfig, optional
        Visual constants.

    Returns
    -------
    PhasorGeometry | None
        None if the magnitude of `c` is zero.

    Raises
    ------
    DimensionMismatchError
        If `c`, `origin` and `ref` don't have the same dimension.
    """
    config = config or DEFAULT_CONFIG
    if origin is None:
        origin = resolve_origin(c)
    if ref is None:
        ref = resolve_ref(c)
    pu = per_unit(ref, c=c, origin=origin)
    if is_zero(c):
        logger.debug("Phasor with zero magnitude is not drawn.")
        return None
    start = pu["origin"]
    end = pu["origin"] + pu["c"]
    seg = segment_geometry(
        start.real, start.imag,
        end.real, end.imag,
        par=par,
        labelrsep=labelrsep,
        labeltsep=labeltsep,
        labelrelrot=labelrelrot,
        labelrelangle=to_radians(labelrelangle)
    )
    if seg is None:
        return None
    return PhasorGeometry(
        head_start=seg.at(config.head_fraction),
        **vars(seg)
    )
