"""POST /api/gradient — ring clips and colors for a gradient along a clip edge."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from clipgrad.config import Settings
from clipgrad.dependencies import get_settings
from clipgrad.engine.bands import Band, GradientStack
from clipgrad.engine.config import GradientConfig, color_stops_from_pairs
from clipgrad.engine.pipeline import create_pipeline
from clipgrad.errors import ClipGradError
from clipgrad.models.requests import GradientBatchRequest, GradientOptions, GradientRequest
from clipgrad.models.responses import (
    BandColor,
    BandOut,
    GradientBatchResponse,
    GradientResponse,
)
from clipgrad.utils.color import parse_color, to_ass, to_hex

router = APIRouter()
logger = logging.getLogger(__name__)


def _build_config(options: GradientOptions, settings: Settings) -> GradientConfig:
    """Fill unspecified options from the app defaults."""
    pairs = {c.channel: (parse_color(c.start), parse_color(c.end)) for c in options.colors}
    return GradientConfig(
        thickness=options.thickness if options.thickness is not None else settings.default_thickness,
        position=options.position or settings.default_position,
        step=options.step if options.step is not None else settings.default_step,
        stops=color_stops_from_pairs(pairs),
    )


def _band_out(band: Band) -> BandOut:
    return BandOut(
        clip=band.clip_text(),
        tag=band.clip_tag,
        inverse=band.inverse,
        colors=[
            BandColor(channel=channel, hex=to_hex(color), ass=to_ass(color))
            for channel, color in sorted(band.colors.items())
        ],
    )


def _stack_out(stack: GradientStack, elapsed_ms: float) -> GradientResponse:
    return GradientResponse(
        bands=[_band_out(b) for b in stack.bands],
        cap=_band_out(stack.cap),
        band_count=len(stack.bands),
        processing_time_ms=elapsed_ms,
    )


@router.post("/gradient", response_model=GradientResponse)
def gradient(request: GradientRequest, settings: Settings = Depends(get_settings)) -> GradientResponse:
    start = time.perf_counter()
    try:
        pipeline = create_pipeline(_build_config(request, settings))
        stack = pipeline.process(request.clip, inverse=request.inverse)
    except ClipGradError as e:
        logger.warning("Gradient failed for %r: %s", request.clip, e)
        return GradientResponse(error=str(e))

    elapsed = round((time.perf_counter() - start) * 1000, 1)
    return _stack_out(stack, elapsed)


@router.post("/gradient/batch", response_model=GradientBatchResponse)
def gradient_batch(
    request: GradientBatchRequest,
    settings: Settings = Depends(get_settings),
) -> GradientBatchResponse:
    start = time.perf_counter()
    try:
        config = _build_config(request, settings)
    except ClipGradError as e:
        return GradientBatchResponse(
            lines_failed=len(request.lines),
            errors={str(i): str(e) for i in range(len(request.lines))},
        )

    pipeline = create_pipeline(config)
    lines = pipeline.run([(line.clip, line.inverse) for line in request.lines])

    results = [
        _stack_out(line.stack, line.elapsed_ms) if line.ok else GradientResponse(error=line.error)
        for line in lines
    ]
    errors = {str(line.index): line.error for line in lines if not line.ok}
    return GradientBatchResponse(
        results=results,
        lines_completed=len(lines) - len(errors),
        lines_failed=len(errors),
        errors=errors,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
    )
