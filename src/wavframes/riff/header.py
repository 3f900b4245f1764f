"""RIFF/WAVE header parsing.

The parser walks the sub-chunks that follow the ``RIFF``/``WAVE`` envelope,
reads the ``fmt `` chunk, skips ``LIST`` metadata and stops at the ``data``
chunk, leaving the stream positioned at its first sample byte. Any other
chunk id is rejected.
"""

from __future__ import annotations

import logging
import os
from typing import BinaryIO

from wavframes.riff.constants import (
    DATA_TAG,
    FMT_CHUNK_MIN_SIZE,
    FMT_TAG,
    FORMAT_PCM,
    LIST_TAG,
    RIFF_TAG,
    WAVE_TAG,
)
from wavframes.riff.errors import UnsupportedFormatError, WavIOError, WavParseError
from wavframes.riff.models import WaveInfo

logger = logging.getLogger(__name__)


def read_header_chunks(stream: BinaryIO) -> WaveInfo:
    chunk_id = _read_uint(stream, 4)
    _read_uint(stream, 4)
    riff_type = _read_uint(stream, 4)

    if chunk_id != RIFF_TAG or riff_type != WAVE_TAG:
        raise WavParseError("not a WAV file")

    fmt_fields: tuple[int, int, int, int, int, int] | None = None

    while True:
        chunk_id = _read_uint(stream, 4)
        chunk_size = _read_uint(stream, 4)
        logger.debug("chunk %s size=%d", _tag_name(chunk_id), chunk_size)

        if chunk_id == FMT_TAG:
            fmt_fields = _read_fmt_chunk(stream, chunk_size)
        elif chunk_id == DATA_TAG:
            data_size = chunk_size
            break
        elif chunk_id == LIST_TAG:
            _skip(stream, chunk_size)
        else:
            raise WavParseError(f"unexpected chunk id {_tag_name(chunk_id)!r}")

    if fmt_fields is None:
        raise WavParseError("format chunk not found")

    audio_format, channels, sample_rate, byte_rate, block_align, bits_per_sample = fmt_fields

    if audio_format != FORMAT_PCM:
        raise UnsupportedFormatError(f"non-PCM format {audio_format:#06x}")
    if channels == 0 or bits_per_sample < 8:
        raise WavParseError("invalid channel or bits per sample value")

    frame_width = channels * (bits_per_sample // 8)
    info = WaveInfo(
        audio_format=audio_format,
        channels=channels,
        sample_rate=sample_rate,
        byte_rate=byte_rate,
        block_align=block_align,
        bits_per_sample=bits_per_sample,
        total_frames=data_size // frame_width,
        data_size=data_size,
    )
    logger.debug("parsed %s", info)
    return info


def _read_fmt_chunk(stream: BinaryIO, chunk_size: int) -> tuple[int, int, int, int, int, int]:
    if chunk_size < FMT_CHUNK_MIN_SIZE:
        raise WavParseError(f"format chunk too short ({chunk_size} bytes)")
    fields = (
        _read_uint(stream, 2),
        _read_uint(stream, 2),
        _read_uint(stream, 4),
        _read_uint(stream, 4),
        _read_uint(stream, 2),
        _read_uint(stream, 2),
    )
    # Extension bytes (cbSize and beyond) are not decoded.
    _skip(stream, chunk_size - FMT_CHUNK_MIN_SIZE)
    return fields


def _read_uint(stream: BinaryIO, width: int) -> int:
    try:
        raw = stream.read(width)
    except (OSError, ValueError) as exc:
        raise WavIOError(f"read failed: {exc}") from exc
    if len(raw) < width:
        raise WavParseError("unexpected end of file")
    return int.from_bytes(raw, "little", signed=False)


def _skip(stream: BinaryIO, size: int) -> None:
    if size <= 0:
        return
    try:
        stream.seek(size, os.SEEK_CUR)
    except (OSError, ValueError) as exc:
        raise WavIOError(f"seek failed: {exc}") from exc


def _tag_name(tag: int) -> str:
    return tag.to_bytes(4, "little").decode("latin-1")
