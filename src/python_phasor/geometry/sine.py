from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import math

import numpy as np
import numpy.typing as npt

from ..pint_setup import Quantity
from ..config import DrawingConfig, DEFAULT_CONFIG
from ..calc import pol, strip, to_radians
from .segment import Point

__all__ = [
    "Panel",
    "GuideLine",
    "PhasorSineGeometry",
    "phasorsine_geometry"
]


class Panel(StrEnum):
    PHASOR = "phasor"
    SINE = "sine"


@dataclass(frozen=True)
class GuideLine:
    """
    Dotted line from `xy_from` in panel `panel_from` to `xy_to` in panel
    `panel_to` (data coordinates of the respective panel).
    """
    xy_from: Point
    xy_to: Point
    panel_from: Panel = Panel.SINE
    panel_to: Panel = Panel.SINE


@dataclass(frozen=True)
class PhasorSineGeometry:
    """
    Data of a phasor diagram (left panel) and its sine wave (right panel).

    Attributes
    ----------
    mag: float
        Magnitude of the phasor and amplitude of the sine wave.
    phi: float
        Phase angle in radians.
    phasor: complex
        The phasor `mag∠phi`.
    circle_x, circle_y: npt.NDArray[np.float64]
        Circle of radius `mag` in the phasor panel.
    sine_x: npt.NDArray[np.float64]
        Angle `ωt` in degrees, from 0 to 360.
    sine_y: npt.NDArray[np.float64]
        `mag * sin(ωt + phi)`.
    xticks: tuple[float, ...]
        Ticks of the x-axis of the sine panel.
    yticks: tuple[float, ...]
        Ticks of the y-axis of the sine panel.
    guide_lines: tuple[GuideLine, ...]
        Dotted lines from the y-axis of the sine panel to the initial value,
        maximum and minimum of the sine wave, and to the tip of the phasor.
    """
    mag: float
    phi: float
    phasor: complex
    circle_x: npt.NDArray[np.float64]
    circle_y: npt.NDArray[np.float64]
    sine_x: npt.NDArray[np.float64]
    sine_y: npt.NDArray[np.float64]
    xticks: tuple[float, ...]
    yticks: tuple[float, ...]
    guide_lines: tuple[GuideLine, ...]


def phasorsine_geometry(
    mag: float | Quantity = 1.0,
    phi: float | Quantity = 0.0,
    config: DrawingConfig | None = None
) -> PhasorSineGeometry:
    """
    Returns the data of a phasor with magnitude `mag` and phase angle `phi`
    and its sine wave over one period.
    """
    config = config or DEFAULT_CONFIG
    mag = float(strip(mag))
    phi = to_radians(phi)
    n = 2 * config.samples_per_half_turn + 1
    psi = np.linspace(0.0, 2.0 * math.pi, n)
    phi_deg = math.degrees(phi)
    y0 = mag * math.sin(phi)
    guide_lines = (
        # initial value, split in two lines to avoid overlay effects when
        # several sine waves are drawn
        GuideLine(xy_from=(0.0, y0), xy_to=(360.0, y0)),
        GuideLine(
            xy_from=(0.0, y0),
            xy_to=(mag * math.cos(phi), y0),
            panel_to=Panel.PHASOR
        ),
        # maximum
        GuideLine(xy_from=(0.0, mag), xy_to=((90.0 - phi_deg) % 360.0, mag)),
        # minimum
        GuideLine(
            xy_from=(0.0, -mag),
            xy_to=((270.0 - phi_deg) % 360.0, -mag)
        )
    )
    return PhasorSineGeometry(
        mag=mag,
        phi=phi,
        phasor=pol(mag, phi),
        circle_x=mag * np.cos(psi),
        circle_y=mag * np.sin(psi),
        sine_x=np.degrees(psi),
        sine_y=mag * np.sin(psi + phi),
        xticks=(90.0, 180.0, 270.0, 360.0),
        yticks=(-mag, 0.0, mag),
        guide_lines=guide_lines
    )
