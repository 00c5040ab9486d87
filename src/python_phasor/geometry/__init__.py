"""
Pure geometry of phasor diagrams: per unit coordinates, label positions and
arrow head segments, without any drawing.
"""
from .segment import *
from .phasor import *
from .dimension import *
from .sine import *
