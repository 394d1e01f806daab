"""
Perceptual color model: CAM16 appearance attributes, viewing conditions and
the HCT color space with its gamut solver.
"""

from .viewing_conditions import ViewingConditions
from .cam16 import Cam16
from .solver import HctSolver
from .hct import Hct

__all__ = ["ViewingConditions", "Cam16", "HctSolver", "Hct"]
