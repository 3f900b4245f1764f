"""Exceptions raised while opening and decoding WAV files."""

from __future__ import annotations


class WavError(RuntimeError):
    """Base class for every WAV reading failure."""


class WavIOError(WavError):
    """Raised when the underlying byte source fails to open, read or seek."""


class UnsupportedFormatError(WavError):
    """Raised for a structurally valid WAV file that is not plain PCM."""


class WavParseError(WavError, ValueError):
    """Raised when the bytes do not form a valid RIFF/WAVE header."""


class TruncatedDataError(WavError):
    """Raised by a strict reader when the data chunk ends before the declared frame count."""

    def __init__(self, frames_read: int, total_frames: int) -> None:
        super().__init__(f"data chunk truncated after {frames_read} of {total_frames} frames")
        self.frames_read = frames_read
        self.total_frames = total_frames
