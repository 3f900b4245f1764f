"""Reader configuration with keyword and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

DecodePolicy = Literal["lenient", "strict"]

DECODE_POLICY_ENV = "WAVFRAMES_DECODE_POLICY"


def normalize_decode_policy(policy: str | None) -> DecodePolicy:
    if policy is None:
        return "lenient"
    normalized = policy.strip().lower()
    if normalized in {"", "lenient", "stop", "stop-on-error"}:
        return "lenient"
    if normalized in {"strict", "raise"}:
        return "strict"
    raise ValueError(f"Unsupported decode policy '{policy}'")


@dataclass(slots=True, frozen=True)
class ReaderSettings:
    decode_policy: DecodePolicy = "lenient"

    def __post_init__(self) -> None:
        object.__setattr__(self, "decode_policy", normalize_decode_policy(self.decode_policy))

    @property
    def strict(self) -> bool:
        return self.decode_policy == "strict"

    @staticmethod
    def from_env() -> ReaderSettings:
        return ReaderSettings(decode_policy=normalize_decode_policy(os.getenv(DECODE_POLICY_ENV)))
