"""PCM WAV header parsing and lazy frame decoding."""

from wavframes.riff.constants import FORMAT_IEEE_FLOAT, FORMAT_PCM, FORMAT_WAV_EXTENSIBLE
from wavframes.riff.errors import (
    TruncatedDataError,
    UnsupportedFormatError,
    WavError,
    WavIOError,
    WavParseError,
)
from wavframes.riff.header import read_header_chunks
from wavframes.riff.models import Frame, MonoFrame, MultiFrame, StereoFrame, WaveInfo, frame_from_samples
from wavframes.riff.settings import ReaderSettings
from wavframes.riff.wave_file import WaveFile, open_wave

__all__ = [
    "FORMAT_IEEE_FLOAT",
    "FORMAT_PCM",
    "FORMAT_WAV_EXTENSIBLE",
    "Frame",
    "MonoFrame",
    "MultiFrame",
    "ReaderSettings",
    "StereoFrame",
    "TruncatedDataError",
    "UnsupportedFormatError",
    "WavError",
    "WavIOError",
    "WavParseError",
    "WaveFile",
    "WaveInfo",
    "frame_from_samples",
    "open_wave",
    "read_header_chunks",
]
