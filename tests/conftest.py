from pathlib import Path

import numpy as np
import pytest
import soundfile as sf


@pytest.fixture
def write_wav(tmp_path):
    """Write ``frames`` (shape ``(n,)`` or ``(n, channels)``) to a WAVE file in tmp_path."""

    def _write(name, frames, sample_rate=44100, subtype="PCM_16", file_format="WAV"):
        path = Path(tmp_path) / name
        sf.write(str(path), np.asarray(frames), sample_rate, subtype=subtype, format=file_format)
        return path

    return _write
