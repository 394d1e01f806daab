"""
Dynamic color: UI color roles derived from a seed color.
"""

from .contrast_curve import ContrastCurve
from .dynamic_color import DynamicColor
from .dynamic_scheme import DynamicScheme
from .material_dynamic_colors import ROLE_NAMES, all_dynamic_colors, color_spec
from .tone_delta_pair import DeltaConstraint, ToneDeltaPair, TonePolarity
from .variant import Platform, SpecVersion, Variant

__all__ = [
    "ContrastCurve",
    "DeltaConstraint",
    "DynamicColor",
    "DynamicScheme",
    "Platform",
    "ROLE_NAMES",
    "SpecVersion",
    "ToneDeltaPair",
    "TonePolarity",
    "Variant",
    "all_dynamic_colors",
    "color_spec",
]
