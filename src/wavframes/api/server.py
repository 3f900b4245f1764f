"""HTTP inspection endpoints for server-side WAV files."""

from __future__ import annotations

import os
from itertools import islice
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from wavframes.api.schemas import InspectRequest, InspectResponse, WaveInfoPayload
from wavframes.riff.errors import (
    TruncatedDataError,
    UnsupportedFormatError,
    WavIOError,
    WavParseError,
)
from wavframes.riff.models import WaveInfo
from wavframes.riff.settings import ReaderSettings
from wavframes.riff.wave_file import open_wave


MEDIA_ROOT_ENV = "WAVFRAMES_MEDIA_ROOT"


def create_app(settings: ReaderSettings | None = None, media_root: str | Path | None = None) -> FastAPI:
    app = FastAPI(title="wavframes API", version="0.1.0")
    reader_settings = settings or ReaderSettings.from_env()
    root_dir = Path(media_root or os.getenv(MEDIA_ROOT_ENV) or Path.cwd()).resolve()

    @app.get("/")
    def root() -> dict[str, str]:
        return {
            "service": "wavframes API",
            "status": "ok",
            "docs": "/docs",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    def favicon() -> Response:
        return Response(status_code=204)

    @app.post("/v1/wav/inspect", response_model=InspectResponse)
    def inspect_wav(payload: InspectRequest) -> InspectResponse:
        wav_path = _resolve_media_path(root_dir, payload.path)
        try:
            with open_wave(wav_path, reader_settings) as wav:
                preview = [list(frame.samples) for frame in islice(wav, payload.preview_frames)]
                info = wav.info
        except WavIOError as exc:
            if isinstance(exc.__cause__, FileNotFoundError):
                raise HTTPException(status_code=404, detail=str(exc)) from exc
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        except UnsupportedFormatError as exc:
            raise HTTPException(status_code=415, detail=str(exc)) from exc
        except (WavParseError, TruncatedDataError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        return InspectResponse(
            info=_info_payload(info),
            preview=preview,
            frames_read=len(preview),
        )

    return app


def _resolve_media_path(root_dir: Path, raw_path: str) -> Path:
    candidate = (root_dir / raw_path).resolve()
    if not candidate.is_relative_to(root_dir):
        raise HTTPException(status_code=403, detail="path is outside the media root")
    return candidate


def _info_payload(info: WaveInfo) -> WaveInfoPayload:
    return WaveInfoPayload(
        audio_format=info.audio_format,
        channels=info.channels,
        sample_rate=info.sample_rate,
        byte_rate=info.byte_rate,
        block_align=info.block_align,
        bits_per_sample=info.bits_per_sample,
        total_frames=info.total_frames,
        data_size=info.data_size,
        duration_sec=info.duration_sec,
    )


app = create_app()
