"""
Complex quantities, units and the per-unit normalization of phasors.
"""
from .exceptions import *
from .quantity import *
from .phasor import *
