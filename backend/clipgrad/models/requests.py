"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from clipgrad.utils.color import parse_color


class ColorPair(BaseModel):
    channel: int = Field(..., ge=1, le=4, description="1 fill, 2 secondary, 3 border, 4 shadow")
    start: str = Field(..., description="Color at the inner edge (#RRGGBB or &HBBGGRR&)")
    end: str = Field(..., description="Color at the outer edge")

    @field_validator("start", "end")
    @classmethod
    def _valid_color(cls, value: str) -> str:
        parse_color(value)
        return value


class GradientOptions(BaseModel):
    thickness: float | None = Field(None, ge=0, multiple_of=0.5, description="Gradient size in pixels")
    position: Literal["outside", "middle", "inside"] | None = None
    step: int | None = Field(None, ge=1, le=20, description="Pixels per color band")
    colors: list[ColorPair] = Field(default_factory=list)

    @field_validator("colors")
    @classmethod
    def _unique_channels(cls, value: list[ColorPair]) -> list[ColorPair]:
        channels = [c.channel for c in value]
        if len(channels) != len(set(channels)):
            raise ValueError(f"Duplicate color channels: {channels}")
        return value


class GradientRequest(GradientOptions):
    clip: str = Field(..., description="Clip argument: vector drawing or x1,y1,x2,y2")
    inverse: bool = Field(default=False, description="Source is an inverse clip")


class ClipLine(BaseModel):
    clip: str
    inverse: bool = False


class GradientBatchRequest(GradientOptions):
    lines: list[ClipLine] = Field(..., description="Clips to process, one per subtitle line")


class OffsetRequest(BaseModel):
    clip: str = Field(..., description="Clip argument: vector drawing or x1,y1,x2,y2")
    radius: float = Field(default=0.0, description="Offset in drawing units; negative shrinks")
    scale: int = Field(default=1, ge=1, description="Coordinate multiplier applied before offsetting")
