from __future__ import annotations

from pathlib import Path

import numpy as np
import soundfile as sf

from phaseblend.errors import EncodeError

OUTPUT_CHANNELS = 2
OUTPUT_FORMAT = "WAV"
OUTPUT_SUBTYPE = "PCM_16"


def write_stereo_wav(
    path: Path, samples: np.ndarray, sample_rate: int, *, overwrite: bool = True
) -> None:
    path = Path(path)
    samples = np.asarray(samples, dtype=np.int16).reshape(-1)
    if samples.size % OUTPUT_CHANNELS:
        raise ValueError(f"Expected interleaved stereo samples, got odd length {samples.size}")

    if not overwrite and path.exists():
        raise EncodeError(f"Refusing to overwrite existing file: {path}")

    frames = samples.reshape((-1, OUTPUT_CHANNELS))
    try:
        sf.write(
            str(path),
            frames,
            int(sample_rate),
            subtype=OUTPUT_SUBTYPE,
            format=OUTPUT_FORMAT,
        )
    except (RuntimeError, OSError) as exc:
        raise EncodeError(f"Failed to write {path}: {exc}") from exc
