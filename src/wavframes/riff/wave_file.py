"""Lazy frame reader over the data chunk of a PCM WAV file."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, NoReturn

from wavframes.riff.errors import TruncatedDataError, WavIOError
from wavframes.riff.header import read_header_chunks
from wavframes.riff.models import Frame, WaveInfo, frame_from_samples
from wavframes.riff.settings import ReaderSettings

logger = logging.getLogger(__name__)


class WaveFile:
    """Forward-only iterator of frames; owns its stream and cannot be restarted.

    A read failure in the data chunk ends iteration. With the ``strict`` decode
    policy the failure is reported once as ``TruncatedDataError`` first.
    """

    def __init__(self, stream: BinaryIO, info: WaveInfo, settings: ReaderSettings | None = None) -> None:
        self._stream = stream
        self._info = info
        self._settings = settings or ReaderSettings()
        self._current_frame = 0
        self._failed = False

    @classmethod
    def open(cls, path: str | Path, settings: ReaderSettings | None = None) -> WaveFile:
        file_path = Path(path)
        try:
            stream = file_path.open("rb")
        except OSError as exc:
            raise WavIOError(f"cannot open {file_path}: {exc}") from exc
        try:
            return cls.from_stream(stream, settings)
        except Exception:
            stream.close()
            raise

    @classmethod
    def from_stream(cls, stream: BinaryIO, settings: ReaderSettings | None = None) -> WaveFile:
        info = read_header_chunks(stream)
        return cls(stream, info, settings)

    @property
    def info(self) -> WaveInfo:
        return self._info

    @property
    def current_frame(self) -> int:
        return self._current_frame

    @property
    def exhausted(self) -> bool:
        return self._failed or self._current_frame >= self._info.total_frames

    @property
    def remaining_frames(self) -> int:
        if self._failed:
            return 0
        return max(self._info.total_frames - self._current_frame, 0)

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> WaveFile:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __iter__(self) -> WaveFile:
        return self

    def __next__(self) -> Frame:
        if self.exhausted:
            raise StopIteration

        bytes_per_sample = self._info.bytes_per_sample
        samples: list[int] = []
        for _ in range(self._info.channels):
            try:
                raw = self._stream.read(bytes_per_sample)
            except (OSError, ValueError) as exc:
                self._stop(f"read failed: {exc}")
            if len(raw) < bytes_per_sample:
                self._stop("unexpected end of data chunk")
            samples.append(int.from_bytes(raw, "little", signed=False))

        self._current_frame += 1
        return frame_from_samples(samples)

    def _stop(self, reason: str) -> NoReturn:
        self._failed = True
        if self._settings.strict:
            raise TruncatedDataError(self._current_frame, self._info.total_frames)
        logger.warning(
            "stopping after %d of %d frames: %s",
            self._current_frame,
            self._info.total_frames,
            reason,
        )
        raise StopIteration

    def __repr__(self) -> str:
        return (
            f"WaveFile(channels={self._info.channels}, sample_rate={self._info.sample_rate}, "
            f"bits_per_sample={self._info.bits_per_sample}, "
            f"frame={self._current_frame}/{self._info.total_frames})"
        )


def open_wave(path: str | Path, settings: ReaderSettings | None = None) -> WaveFile:
    return WaveFile.open(path, settings)
