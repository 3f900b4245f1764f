"""FastAPI request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class InspectRequest(BaseModel):
    path: str = Field(min_length=1)
    preview_frames: int = Field(default=4, ge=0, le=64)


class WaveInfoPayload(BaseModel):
    audio_format: int
    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    total_frames: int
    data_size: int
    duration_sec: float


class InspectResponse(BaseModel):
    info: WaveInfoPayload
    preview: list[list[int]]
    frames_read: int
