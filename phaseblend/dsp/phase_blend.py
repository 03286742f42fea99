from __future__ import annotations

from typing import Optional

import numpy as np

from phaseblend.dsp.downmix import trunc_div
from phaseblend.errors import RateMismatchError
from phaseblend.types import MonoSignal

# Blend is mixed in phase into both channels at 1/16 of its amplitude.
BLEND_ATTENUATION = 16
# Primary goes into left inverted and into right as is, at unit gain.
PRIMARY_GAIN = 1

STEREO_CHANNELS = 2


def check_rates(primary: MonoSignal, blend: MonoSignal) -> None:
    if int(primary.sample_rate) != int(blend.sample_rate):
        raise RateMismatchError(primary.sample_rate, blend.sample_rate)


def phase_blend(primary: MonoSignal, blend: Optional[MonoSignal] = None) -> np.ndarray:
    """Render the interleaved int16 stereo signal for ``primary``.

    Frame ``i`` becomes ``(y/16 - x, y/16 + x)`` where ``x`` is the primary
    sample and ``y`` the blend sample, or 0 once the blend has run out.
    Without a blend each frame is simply ``(x, -x)``.
    Output length is always twice the primary's. Sums are not clamped and
    wrap around in 16 bits.
    """
    x = np.asarray(primary.samples, dtype=np.int16).reshape(-1).astype(np.int32)

    if blend is None:
        left = x * PRIMARY_GAIN
        right = -x * PRIMARY_GAIN
    else:
        check_rates(primary, blend)
        left = -x * PRIMARY_GAIN
        right = x * PRIMARY_GAIN

        # Only the overlap carries a blend contribution; past it y is 0.
        y = np.asarray(blend.samples, dtype=np.int16).reshape(-1)[: x.size]
        contribution = trunc_div(y.astype(np.int32), BLEND_ATTENUATION)
        overlap = int(contribution.size)
        left[:overlap] += contribution
        right[:overlap] += contribution

    stereo = np.empty((x.size * STEREO_CHANNELS,), dtype=np.int32)
    stereo[0::STEREO_CHANNELS] = left
    stereo[1::STEREO_CHANNELS] = right
    # int32 -> int16 keeps the low 16 bits (two's complement wrap).
    return stereo.astype(np.int16)
