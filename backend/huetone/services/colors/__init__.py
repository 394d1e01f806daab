"""
HueTone Colors Module

Perceptual color model (HCT on CAM16), tonal palettes, contrast solving,
dynamic color schemes, image quantization and seed scoring.
"""

__version__ = "1.0.0"
