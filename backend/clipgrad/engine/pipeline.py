"""Gradient pipeline — runs parse → band generation for each clip line.

Lines are independent: a line that fails is recorded and skipped, and never
touches results already produced for other lines.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Generator, Sequence
from typing import Any

from clipgrad.clip.parser import parse_clip
from clipgrad.engine.bands import GradientStack, generate_bands
from clipgrad.engine.config import GradientConfig
from clipgrad.engine.context import LineContext
from clipgrad.errors import ClipGradError

logger = logging.getLogger(__name__)


class GradientPipeline:
    """Applies one gradient configuration to a batch of clips."""

    def __init__(self, config: GradientConfig | None = None) -> None:
        self.config = config or GradientConfig()

    def process(self, clip: str, inverse: bool = False) -> GradientStack:
        """Build the gradient stack for a single clip, raising on failure."""
        path = parse_clip(clip)
        return generate_bands(path, self.config, inverse=inverse)

    def run(self, clips: Sequence[tuple[str, bool]]) -> list[LineContext]:
        """Process ``(clip, inverse)`` pairs, collecting per-line results and errors."""
        start = time.perf_counter()
        lines = [self._run_line(i, clip, inverse) for i, (clip, inverse) in enumerate(clips)]

        total = (time.perf_counter() - start) * 1000
        failed = sum(1 for line in lines if not line.ok)
        logger.info("Pipeline complete: %d/%d lines in %.0fms", len(lines) - failed, len(lines), total)
        return lines

    def run_streaming(self, clips: Sequence[tuple[str, bool]]) -> Generator[dict[str, Any], None, list[LineContext]]:
        """Process lines one at a time, yielding a progress dict after each.

        The generator's return value is the full list of line results.
        """
        total = len(clips)
        lines: list[LineContext] = []
        for i, (clip, inverse) in enumerate(clips):
            yield {
                "index": i,
                "total": total,
                "status": "running",
                "message": f"Processing line {i + 1}/{total}",
                "progress": round(100 * i / total, 1),
                "elapsed_ms": 0.0,
                "error": "",
            }
            line = self._run_line(i, clip, inverse)
            lines.append(line)
            yield {
                "index": i,
                "total": total,
                "status": "ok" if line.ok else "error",
                "message": f"Processed line {i + 1}/{total}",
                "progress": round(100 * (i + 1) / total, 1),
                "elapsed_ms": line.elapsed_ms,
                "error": line.error,
            }
        return lines

    def _run_line(self, index: int, clip: str, inverse: bool) -> LineContext:
        ctx = LineContext(index=index, clip=clip, inverse=inverse)
        t0 = time.perf_counter()
        try:
            ctx.path = parse_clip(clip)
            ctx.stack = generate_bands(ctx.path, self.config, inverse=inverse)
        except ClipGradError as e:
            ctx.error = str(e)
            logger.warning("  line %d FAILED: %s", index, e)
        ctx.elapsed_ms = round((time.perf_counter() - t0) * 1000, 1)
        if ctx.ok:
            logger.debug("  line %d: %d layers in %.1fms", index, len(ctx.stack.layers), ctx.elapsed_ms)
        return ctx


def create_pipeline(config: GradientConfig | None = None) -> GradientPipeline:
    """Factory function for creating a pipeline instance."""
    return GradientPipeline(config=config)
