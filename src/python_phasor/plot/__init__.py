"""
Drawing functions for phasor diagrams on matplotlib axes.
"""
from .axes import *
from .phasor import *
from .dimension import *
from .sine import *
