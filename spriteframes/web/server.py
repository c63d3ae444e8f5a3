"""FastAPI surface for frame sequence parsing."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core import FrameSequenceDescriptor
from ..core import sequence_parser
from ..core.errors import FrameSequenceError

logger = logging.getLogger(__name__)

MAX_LISTED_FRAMES = int(os.environ.get("SPRITEFRAMES_MAX_LISTED_FRAMES", "400"))
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("SPRITEFRAMES_ALLOWED_ORIGINS", "http://localhost:8000").split(",")
    if origin.strip()
]


class SequenceRequest(BaseModel):
    """Incoming configuration: example first frame and total frame count."""

    model_config = ConfigDict(populate_by_name=True)

    frame_path: Any = Field("", alias="framePath")
    frame_count: Any = Field(None, alias="frameCount")
    include_frames: bool = Field(False, alias="includeFrames")

    @field_validator("frame_path", mode="before")
    @classmethod
    def _normalize_path(cls, value):
        if value is None:
            return ""
        return value


class SequenceResponse(BaseModel):
    """Inferred naming pattern, optionally with the generated frame paths."""

    model_config = ConfigDict(populate_by_name=True)

    base_path: str = Field(alias="basePath")
    prefix: str
    sequence_start: int = Field(alias="sequenceStart")
    pad_width: int = Field(alias="padWidth")
    suffix: str
    extension: str
    frame_count: int = Field(alias="frameCount")
    file_name: str = Field(alias="fileName")
    frames: Optional[list[str]] = None
    truncated: bool = False

    @classmethod
    def from_descriptor(cls, descriptor: FrameSequenceDescriptor, include_frames: bool = False) -> "SequenceResponse":
        frames = None
        truncated = False
        if include_frames:
            frames = []
            for path in descriptor.frame_paths():
                if len(frames) >= MAX_LISTED_FRAMES:
                    truncated = True
                    break
                frames.append(path)
        return cls(
            file_name=descriptor.file_name,
            frames=frames,
            truncated=truncated,
            **descriptor.to_dict(),
        )


def create_app() -> FastAPI:
    app = FastAPI(title="spriteframes", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/sequence", response_model=SequenceResponse, response_model_by_alias=True)
    async def parse_sequence(request: SequenceRequest) -> SequenceResponse:
        try:
            descriptor = sequence_parser.parse(request.frame_path, request.frame_count)
        except FrameSequenceError as exc:
            logger.info("Rejected frame sequence %r: %s", request.frame_path, exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return SequenceResponse.from_descriptor(descriptor, include_frames=request.include_frames)

    return app
