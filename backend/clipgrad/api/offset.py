"""POST /api/offset — grow or shrink a single clip shape."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from clipgrad.clip.parser import parse_clip
from clipgrad.clip.serializer import format_clip
from clipgrad.engine.offset import grow
from clipgrad.errors import ClipGradError
from clipgrad.models.requests import OffsetRequest
from clipgrad.models.responses import OffsetResponse
from clipgrad.utils.geometry import signed_winding

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/offset", response_model=OffsetResponse)
def offset(request: OffsetRequest) -> OffsetResponse:
    path = parse_clip(request.clip)
    try:
        winding = signed_winding(path)
        grown = grow(path, request.radius, request.scale)
    except ClipGradError as e:
        logger.warning("Offset failed for %r: %s", request.clip, e)
        return OffsetResponse(error=str(e))

    return OffsetResponse(clip=format_clip(grown), winding=winding, vertex_count=len(grown))
