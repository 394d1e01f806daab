"""Scalar math, color space and hex string helpers for the color core."""
