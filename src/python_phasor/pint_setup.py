from __future__ import annotations

import pint
from pint.facets.plain.quantity import PlainQuantity as Quantity

UNITS = pint.UnitRegistry()

Q_ = UNITS.Quantity

unit_definitions = [
    'per_unit = [] = pu'
]
for ud in unit_definitions:
    UNITS.define(ud)

pint.set_application_registry(UNITS)

__all__ = ["UNITS", "Q_", "Quantity"]
