"""Engine exceptions."""

from __future__ import annotations


class ClipGradError(Exception):
    """Base class for all clip gradient failures."""


class UnusableShapeError(ClipGradError, ValueError):
    """The clip shape cannot be offset (empty, too few points, or only move commands)."""


class GradientConfigError(ClipGradError, ValueError):
    """Gradient configuration is out of range."""
