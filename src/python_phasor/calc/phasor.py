import math

from ..pint_setup import Quantity
from .quantity import to_radians, strip

__all__ = [
    "j",
    "pol",
    "pol_deg",
    "polar"
]


j = 1j


def pol(r: float | Quantity, phi: float | Quantity) -> complex | Quantity:
    """
    Returns a complex quantity with length `r` and angle `phi`.

    Parameters
    ----------
    r: float | Quantity
        Length of the complex quantity. If `r` is a pint quantity, the result
        carries the same unit.
    phi: float | Quantity
        Angle in radians, or a pint angle quantity, e.g. `Q_(45, 'deg')`.

    Returns
    -------
    complex | Quantity
    """
    phi = to_radians(phi)
    return r * complex(math.cos(phi), math.sin(phi))


def pol_deg(r: float | Quantity, angle_deg: float) -> complex | Quantity:
    """Returns a complex quantity with length `r` (angle in degrees)."""
    return pol(r, math.radians(angle_deg))


def polar(z: complex | Quantity) -> tuple[float | Quantity, float]:
    """
    Returns (magnitude, angle_deg). The magnitude keeps the unit of `z`.
    """
    z_m = complex(strip(z))
    magnitude = abs(z_m)
    if isinstance(z, Quantity):
        magnitude = magnitude * z.units
    angle_deg = math.degrees(math.atan2(z_m.imag, z_m.real))
    return magnitude, angle_deg
