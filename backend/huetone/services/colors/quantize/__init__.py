"""
Image color quantization: exact counting, Wu box splitting and Wu-seeded
weighted k-means.
"""

from .point_provider import PointProviderLab
from .quantizer_result import QuantizerResult
from .quantizer_map import QuantizerMap
from .quantizer_wu import QuantizerWu
from .quantizer_wsmeans import QuantizerWsmeans
from .quantizer_celebi import QuantizerCelebi, quantize

__all__ = [
    "PointProviderLab",
    "QuantizerResult",
    "QuantizerMap",
    "QuantizerWu",
    "QuantizerWsmeans",
    "QuantizerCelebi",
    "quantize",
]
