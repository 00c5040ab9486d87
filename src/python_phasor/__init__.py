"""
python_phasor

Phasor diagrams for electrical engineering: phasor arrows, angular and length
dimensions and phasor/sine wave plots, drawn with matplotlib.
"""
from .pint_setup import UNITS, Q_, Quantity
from .config import DrawingConfig, DEFAULT_CONFIG
from .calc import j, pol, pol_deg, polar, DimensionMismatchError
from .plot import (
    phasor,
    phasorsine,
    angulardimension,
    lengthdimension,
    phasordimension,
    arrowaxes,
    removeaxes
)

from . import calc
from . import geometry
from . import plot


__all__ = [
    "UNITS",
    "Q_",
    "Quantity",
    "DrawingConfig",
    "DEFAULT_CONFIG",
    "DimensionMismatchError",
    "j",
    "pol",
    "pol_deg",
    "polar",
    "phasor",
    "phasorsine",
    "angulardimension",
    "lengthdimension",
    "phasordimension",
    "arrowaxes",
    "removeaxes",
    "calc",
    "geometry",
    "plot"
]


__version__ = "0.1.0"
