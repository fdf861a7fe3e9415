"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from clipgrad.config import APP_VERSION


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = APP_VERSION


class BandColor(BaseModel):
    channel: int
    hex: str
    ass: str


class BandOut(BaseModel):
    clip: str
    tag: str = "clip"
    inverse: bool = False
    colors: list[BandColor] = Field(default_factory=list)


class GradientResponse(BaseModel):
    bands: list[BandOut] = Field(default_factory=list)
    cap: BandOut | None = None
    band_count: int = 0
    processing_time_ms: float = 0.0
    error: str = ""


class GradientBatchResponse(BaseModel):
    results: list[GradientResponse] = Field(default_factory=list)
    lines_completed: int = 0
    lines_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)
    processing_time_ms: float = 0.0


class OffsetResponse(BaseModel):
    clip: str = ""
    winding: int = 0
    vertex_count: int = 0
    error: str = ""
