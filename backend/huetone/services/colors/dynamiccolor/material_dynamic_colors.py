"""
The canonical set of dynamic color roles.
"""

from typing import Dict, List

from .color_spec_2021 import ColorSpec2021
from .color_spec_2025 import ColorSpec2025
from .dynamic_color import DynamicColor
from .variant import SpecVersion

_COLOR_SPECS: Dict[SpecVersion, ColorSpec2021] = {
    SpecVersion.SPEC_2021: ColorSpec2021(),
    SpecVersion.SPEC_2025: ColorSpec2025(),
}

# Roles that only exist from the 2025 system on.
DIM_ROLE_NAMES = ("primary_dim", "secondary_dim", "tertiary_dim", "error_dim")

ROLE_NAMES = (
    "primary_palette_key_color",
    "secondary_palette_key_color",
    "tertiary_palette_key_color",
    "neutral_palette_key_color",
    "neutral_variant_palette_key_color",
    "error_palette_key_color",
    "background",
    "on_background",
    "surface",
    "surface_dim",
    "surface_bright",
    "surface_container_lowest",
    "surface_container_low",
    "surface_container",
    "surface_container_high",
    "surface_container_highest",
    "on_surface",
    "surface_variant",
    "on_surface_variant",
    "inverse_surface",
    "inverse_on_surface",
    "outline",
    "outline_variant",
    "shadow",
    "scrim",
    "surface_tint",
    "primary",
    "primary_dim",
    "on_primary",
    "primary_container",
    "on_primary_container",
    "inverse_primary",
    "primary_fixed",
    "primary_fixed_dim",
    "on_primary_fixed",
    "on_primary_fixed_variant",
    "secondary",
    "secondary_dim",
    "on_secondary",
    "secondary_container",
    "on_secondary_container",
    "secondary_fixed",
    "secondary_fixed_dim",
    "on_secondary_fixed",
    "on_secondary_fixed_variant",
    "tertiary",
    "tertiary_dim",
    "on_tertiary",
    "tertiary_container",
    "on_tertiary_container",
    "tertiary_fixed",
    "tertiary_fixed_dim",
    "on_tertiary_fixed",
    "on_tertiary_fixed_variant",
    "error",
    "error_dim",
    "on_error",
    "error_container",
    "on_error_container",
    "control_activated",
    "control_normal",
    "control_highlight",
    "text_primary_inverse",
    "text_secondary_and_tertiary_inverse",
    "text_primary_inverse_disable_only",
    "text_secondary_and_tertiary_inverse_disabled",
    "text_hint_inverse",
)


def color_spec(spec_version: SpecVersion) -> ColorSpec2021:
    """Role definitions for a color system version."""
    return _COLOR_SPECS[SpecVersion(spec_version)]


def role_names(spec_version: SpecVersion) -> List[str]:
    """Names of the roles defined by a version, in canonical order."""
    if SpecVersion(spec_version) == SpecVersion.SPEC_2025:
        return list(ROLE_NAMES)
    return [name for name in ROLE_NAMES if name not in DIM_ROLE_NAMES]


def all_dynamic_colors(spec_version: SpecVersion) -> List[DynamicColor]:
    """
    Every role defined by a version, in canonical order.

    Args:
        spec_version: Color system version

    Returns:
        DynamicColor list; the *_dim roles appear only for 2025
    """
    spec = color_spec(spec_version)
    return [getattr(spec, name) for name in role_names(spec_version)]
