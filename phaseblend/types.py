from __future__ import annotations

from dataclasses import dataclass

import numpy as np

BIT_DEPTH_8 = 8
BIT_DEPTH_16 = 16
BIT_DEPTH_24 = 24
BIT_DEPTH_32_FLOAT = 32

SUPPORTED_BIT_DEPTHS = (BIT_DEPTH_8, BIT_DEPTH_16, BIT_DEPTH_24, BIT_DEPTH_32_FLOAT)


@dataclass(frozen=True)
class WavHeader:
    sampling_rate: int
    channel_count: int
    bit_depth: int  # 8 | 16 | 24 | 32 (float)


@dataclass
class MonoSignal:
    samples: np.ndarray  # int16 mono
    sample_rate: int

    @property
    def num_frames(self) -> int:
        return int(self.samples.size)
