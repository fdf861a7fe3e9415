"""ClipGrad offset and band generation engine."""

from clipgrad.engine.bands import Band, GradientStack, generate_bands
from clipgrad.engine.config import ColorStop, GradientConfig, GradientPosition
from clipgrad.engine.context import LineContext
from clipgrad.engine.offset import grow
from clipgrad.engine.pipeline import GradientPipeline

__all__ = [
    "grow",
    "generate_bands",
    "Band",
    "GradientStack",
    "ColorStop",
    "GradientConfig",
    "GradientPosition",
    "LineContext",
    "GradientPipeline",
]
