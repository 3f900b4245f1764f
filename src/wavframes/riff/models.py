"""Descriptor and frame models for decoded PCM audio."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class WaveInfo:
    audio_format: int
    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    total_frames: int
    data_size: int = 0

    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8

    @property
    def duration_sec(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return self.total_frames / self.sample_rate


@dataclass(slots=True, frozen=True)
class MonoFrame:
    sample: int

    @property
    def samples(self) -> tuple[int, ...]:
        return (self.sample,)


@dataclass(slots=True, frozen=True)
class StereoFrame:
    left: int
    right: int

    @property
    def samples(self) -> tuple[int, ...]:
        return (self.left, self.right)


@dataclass(slots=True, frozen=True)
class MultiFrame:
    samples: tuple[int, ...]


Frame = MonoFrame | StereoFrame | MultiFrame


def frame_from_samples(samples: Sequence[int]) -> Frame:
    """Wrap one sample per channel in the frame shape matching the channel count."""
    if len(samples) == 1:
        return MonoFrame(samples[0])
    if len(samples) == 2:
        return StereoFrame(samples[0], samples[1])
    if len(samples) >= 3:
        return MultiFrame(tuple(samples))
    raise ValueError("frame must carry at least one sample")
