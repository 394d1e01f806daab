"""
Error types raised by the color core.

Numeric boundary conditions (gamut clamping, iteration caps) are never errors;
contrast infeasibility is reported as a None result by the contrast solver.
"""

from typing import Optional


class ColorValidationError(ValueError):
    """Caller-supplied input is out of range or malformed."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class RoleCycleError(RuntimeError):
    """A dynamic color role was re-entered while it was being resolved."""
    pass
