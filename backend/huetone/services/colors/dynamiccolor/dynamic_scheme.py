"""
Dynamic schemes.

A DynamicScheme holds everything needed to resolve the color roles for one
configuration: the source color, variant, dark mode, contrast level, target
platform, color system version and the six tonal palettes. Resolved tones and
colors are cached per role name for the lifetime of the instance.
"""

import threading
from typing import Dict, Optional, Set

from loguru import logger

from ..errors import RoleCycleError
from ..hct import Hct
from ..palettes import TonalPalette
from . import calculation
from .color_spec_2021 import ColorSpec2021
from .dynamic_color import DynamicColor
from .material_dynamic_colors import ROLE_NAMES, color_spec, role_names
from .palettes_spec import PALETTES_SPECS, get_piecewise_value, get_rotated_hue
from .variant import Platform, SpecVersion, Variant

DEFAULT_SOURCE_COLOR = 0xff6750a4


class DynamicScheme:
    """
    A color scheme whose roles are resolved on demand.

    Palettes that are not passed in are derived from the source color with the
    variant's rules for the given color system version.

    Args:
        source_color_hct: Seed color, 0xff6750a4 when omitted
        variant: Palette derivation style
        contrast_level: -1 (reduced) to 1 (highest); 0 is standard
        is_dark: Dark theme when True
        platform: Target device class
        spec_version: Color system version whose rules apply
        primary_palette: Overrides the derived primary palette
        secondary_palette: Overrides the derived secondary palette
        tertiary_palette: Overrides the derived tertiary palette
        neutral_palette: Overrides the derived neutral palette
        neutral_variant_palette: Overrides the derived neutral variant palette
        error_palette: Overrides the derived error palette
    """

    def __init__(
        self,
        source_color_hct: Optional[Hct] = None,
        variant: Variant = Variant.TONAL_SPOT,
        contrast_level: float = 0.0,
        is_dark: bool = False,
        platform: Platform = Platform.PHONE,
        spec_version: SpecVersion = SpecVersion.SPEC_2021,
        primary_palette: Optional[TonalPalette] = None,
        secondary_palette: Optional[TonalPalette] = None,
        tertiary_palette: Optional[TonalPalette] = None,
        neutral_palette: Optional[TonalPalette] = None,
        neutral_variant_palette: Optional[TonalPalette] = None,
        error_palette: Optional[TonalPalette] = None,
    ):
        if source_color_hct is None:
            source_color_hct = Hct.from_int(DEFAULT_SOURCE_COLOR)
        self.source_color_hct = source_color_hct
        self.source_color_argb = source_color_hct.to_int()
        self.variant = Variant(variant)
        self.contrast_level = float(contrast_level)
        self.is_dark = bool(is_dark)
        self.platform = Platform(platform)
        self.spec_version = SpecVersion(spec_version)

        spec = PALETTES_SPECS[self.spec_version]
        args = (self.variant, source_color_hct, self.is_dark, self.platform, self.contrast_level)
        self.primary_palette = primary_palette or spec.get_primary_palette(*args)
        self.secondary_palette = secondary_palette or spec.get_secondary_palette(*args)
        self.tertiary_palette = tertiary_palette or spec.get_tertiary_palette(*args)
        self.neutral_palette = neutral_palette or spec.get_neutral_palette(*args)
        self.neutral_variant_palette = neutral_variant_palette or spec.get_neutral_variant_palette(*args)
        self.error_palette = (
            error_palette
            or spec.get_error_palette(*args)
            or TonalPalette.from_hue_and_chroma(25.0, 84.0)
        )

        self._tones: Dict[str, float] = {}
        self._hcts: Dict[str, Hct] = {}
        self._resolving: Set[str] = set()
        self._lock = threading.RLock()

    @classmethod
    def from_variant(
        cls,
        source_color_hct: Hct,
        variant: Variant,
        is_dark: bool,
        contrast_level: float = 0.0,
        platform: Platform = Platform.PHONE,
        spec_version: SpecVersion = SpecVersion.SPEC_2021,
    ) -> "DynamicScheme":
        """
        Scheme whose palettes are all derived from the source color.

        Args:
            source_color_hct: Seed color
            variant: Palette derivation style
            is_dark: Dark theme when True
            contrast_level: -1 to 1
            platform: Target device class
            spec_version: Color system version

        Returns:
            A new DynamicScheme
        """
        scheme = cls(
            source_color_hct,
            variant=variant,
            contrast_level=contrast_level,
            is_dark=is_dark,
            platform=platform,
            spec_version=spec_version,
        )
        logger.debug(
            f"Built {scheme.spec_version.value} {scheme.variant.value} scheme for "
            f"{scheme.source_color_argb:#010x} (dark={scheme.is_dark}, "
            f"contrast={scheme.contrast_level}, platform={scheme.platform.value})"
        )
        return scheme

    def with_overrides(self, **changes) -> "DynamicScheme":
        """
        Copy of this scheme with some settings changed and the same palettes.

        Accepts `variant`, `contrast_level`, `is_dark`, `platform` and
        `spec_version`. The copy starts with an empty cache.
        """
        settings = {
            "variant": self.variant,
            "contrast_level": self.contrast_level,
            "is_dark": self.is_dark,
            "platform": self.platform,
            "spec_version": self.spec_version,
        }
        unknown = set(changes) - set(settings)
        if unknown:
            raise TypeError(f"Unknown scheme settings: {sorted(unknown)}")
        settings.update(changes)
        return DynamicScheme(
            self.source_color_hct,
            primary_palette=self.primary_palette,
            secondary_palette=self.secondary_palette,
            tertiary_palette=self.tertiary_palette,
            neutral_palette=self.neutral_palette,
            neutral_variant_palette=self.neutral_variant_palette,
            error_palette=self.error_palette,
            **settings,
        )

    get_piecewise_value = staticmethod(get_piecewise_value)
    get_rotated_hue = staticmethod(get_rotated_hue)

    @property
    def color_spec(self) -> ColorSpec2021:
        """Role definitions for this scheme's color system version."""
        return color_spec(self.spec_version)

    def get_tone(self, color: DynamicColor) -> float:
        """
        Resolved tone of a role, computed once per scheme.

        Raises:
            RoleCycleError: If resolving the role requires its own tone
        """
        with self._lock:
            tone = self._tones.get(color.name)
            if tone is not None:
                return tone
            if color.name in self._resolving:
                raise RoleCycleError(f"Role '{color.name}' depends on itself")
            self._resolving.add(color.name)
            try:
                tone = calculation.get_tone(self, color)
            finally:
                self._resolving.discard(color.name)
            self._tones[color.name] = tone
            return tone

    def get_hct(self, color: DynamicColor) -> Hct:
        """Resolved color of a role, computed once per scheme."""
        with self._lock:
            hct = self._hcts.get(color.name)
            if hct is None:
                hct = calculation.get_hct(self, color)
                self._hcts[color.name] = hct
            return hct

    def get_argb(self, color: DynamicColor) -> int:
        """Resolved ARGB of a role, opacity included."""
        return color.get_argb(self)

    def get_role(self, name: str) -> Optional[int]:
        """
        ARGB of a role by name.

        Returns:
            Packed ARGB, or None if this color system version does not define
            the role
        """
        if name not in role_names(self.spec_version):
            return None
        return self.get_argb(getattr(self.color_spec, name))

    def resolve_all(self) -> Dict[str, int]:
        """Every role defined for this scheme's version, in canonical order."""
        resolved = {}
        for name in role_names(self.spec_version):
            resolved[name] = self.get_argb(getattr(self.color_spec, name))
        logger.debug(f"Resolved {len(resolved)} roles for {self!r}")
        return resolved

    def __repr__(self) -> str:
        return (f"DynamicScheme(source={self.source_color_argb:#010x}, variant={self.variant.value}, "
                f"dark={self.is_dark}, contrast={self.contrast_level}, "
                f"platform={self.platform.value}, spec={self.spec_version.value})")


def _role_property(name: str) -> property:
    def getter(self: DynamicScheme) -> Optional[int]:
        return self.get_role(name)

    getter.__name__ = name
    getter.__doc__ = f"ARGB of the {name} role."
    return property(getter)


for _name in ROLE_NAMES:
    setattr(DynamicScheme, _name, _role_property(_name))
del _name
