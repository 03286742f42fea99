from __future__ import annotations

import numpy as np


def trunc_div(values: np.ndarray, divisor: int) -> np.ndarray:
    # Integer division rounding toward zero (numpy's // floors).
    return np.sign(values) * (np.abs(values) // int(divisor))


def downmix(samples: np.ndarray, channel_count: int) -> np.ndarray:
    """Average interleaved frames into one int16 value per frame.

    A trailing partial frame is dropped.
    """
    channel_count = int(channel_count)
    if channel_count < 1:
        raise ValueError(f"channel_count must be >= 1, got {channel_count}")

    samples = np.asarray(samples, dtype=np.int16).reshape(-1)
    num_frames = samples.size // channel_count
    if num_frames == 0:
        return np.zeros((0,), dtype=np.int16)

    frames = samples[: num_frames * channel_count].reshape((num_frames, channel_count))
    sums = frames.astype(np.int64).sum(axis=1)
    return trunc_div(sums, channel_count).astype(np.int16)
