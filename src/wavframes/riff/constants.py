"""RIFF/WAVE tag values and audio format codes."""

from __future__ import annotations

# Chunk tags as little-endian u32 values of their ASCII bytes.
RIFF_TAG = 0x46464952
WAVE_TAG = 0x45564157
FMT_TAG = 0x20746D66
DATA_TAG = 0x61746164
LIST_TAG = 0x5453494C

FORMAT_PCM = 1
FORMAT_IEEE_FLOAT = 3
FORMAT_WAV_EXTENSIBLE = 0xFFFE

FMT_CHUNK_MIN_SIZE = 16
