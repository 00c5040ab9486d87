"""
Helpers to deal with plain numbers and pint quantities in the same way.

A phasor, its origin and its reference length may be given either as plain
(complex) numbers or as pint quantities. Before anything can be plotted, they
are reduced to plain complex numbers relative to the reference length. The
helpers in this module check that the arguments share the same physical
dimension before doing so.
"""
from __future__ import annotations

from ..pint_setup import UNITS, Quantity
from .exceptions import DimensionMismatchError

__all__ = [
    "dimensionality",
    "strip",
    "to_radians",
    "resolve_origin",
    "resolve_ref",
    "per_unit",
    "is_zero"
]


def dimensionality(value: complex | Quantity):
    """
    Returns the pint dimensionality of `value`. Plain numbers are
    dimensionless.
    """
    if isinstance(value, Quantity):
        return value.dimensionality
    return UNITS.dimensionless.dimensionality


def strip(value: complex | Quantity) -> complex:
    """Returns the magnitude of `value` without its unit."""
    if isinstance(value, Quantity):
        return value.m
    return value


def to_radians(angle: float | Quantity) -> float:
    """
    Returns `angle` in radians. A plain number is taken to be in radians
    already; a pint quantity is converted (e.g. `Q_(45, 'deg')`).
    """
    if isinstance(angle, Quantity):
        return float(angle.to('rad').m)
    return float(angle)


def resolve_origin(c: complex | Quantity) -> complex | Quantity:
    """
    Returns the default origin of phasor `c`: zero, in the same unit as `c`.
    """
    if isinstance(c, Quantity):
        return 0j * c.units
    return 0j


def resolve_ref(c: complex | Quantity) -> float | Quantity:
    """
    Returns the default reference length of phasor `c`: one unit of `c`.
    """
    if isinstance(c, Quantity):
        return 1.0 * c.units
    return 1.0


def per_unit(
    ref: float | Quantity,
    **values: complex | Quantity
) -> dict[str, complex]:
    """
    Returns the given values as plain complex numbers relative to `ref`.

    Parameters
    ----------
    ref: float | Quantity
        Reference length. All `values` must have the same dimension as `ref`.
        The values are divided by `ref` including its sign, so a negative
        reference mirrors them through the origin.
    **values: complex | Quantity
        The values to normalize, passed by name. The names are used in the
        error message if dimensions don't match.

    Returns
    -------
    dict[str, complex]
        The normalized values under the same names.

    Raises
    ------
    DimensionMismatchError
        If any of the values doesn't have the same dimension as `ref`.
    """
    ref_dim = dimensionality(ref)
    mismatched = [
        name for name, value in values.items()
        if dimensionality(value) != ref_dim
    ]
    if mismatched:
        units = ", ".join(
            f"`{name}` [{_unit_str(value)}]"
            for name, value in values.items()
        )
        raise DimensionMismatchError(
            f"Dimension mismatch of arguments {units} and `ref` "
            f"[{_unit_str(ref)}]: the arguments must all have the same "
            f"dimension (coherent SI unit)."
        )
    if isinstance(ref, Quantity):
        ref_units = ref.units
        ref_m = ref.m
    else:
        ref_units = None
        ref_m = ref
    normalized = {}
    for name, value in values.items():
        if ref_units is not None and isinstance(value, Quantity):
            value = value.to(ref_units).m
        elif isinstance(value, Quantity):
            # dimensionless quantity with a plain reference
            value = value.to('dimensionless').m
        normalized[name] = complex(value) / ref_m
    return normalized


def _unit_str(value: complex | Quantity) -> str:
    if isinstance(value, Quantity):
        return f"{value.units:~P}" or "dimensionless"
    return "dimensionless"


def is_zero(value: complex | Quantity) -> bool:
    """Returns True if the stripped magnitude of `value` is zero."""
    return abs(strip(value)) == 0
