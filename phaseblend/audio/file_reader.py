from __future__ import annotations

import logging
import struct
from pathlib import Path
from typing import Tuple

import numpy as np
import soundfile as sf

from phaseblend.dsp.downmix import downmix
from phaseblend.errors import DecodeError
from phaseblend.types import (
    BIT_DEPTH_8,
    BIT_DEPTH_16,
    BIT_DEPTH_24,
    BIT_DEPTH_32_FLOAT,
    MonoSignal,
    WavHeader,
)

logger = logging.getLogger(__name__)

WAVE_FORMATS = ("WAV", "WAVEX")

# libsndfile subtype -> (bit depth, dtype to read it with)
_SUBTYPES = {
    "PCM_U8": (BIT_DEPTH_8, "int32"),
    "PCM_16": (BIT_DEPTH_16, "int16"),
    "PCM_24": (BIT_DEPTH_24, "int32"),
    "FLOAT": (BIT_DEPTH_32_FLOAT, "float32"),
}

SHIFT_24_BIT = 8
FLOAT_SCALE = 32767.0

_INT16_MIN = int(np.iinfo(np.int16).min)
_INT16_MAX = int(np.iinfo(np.int16).max)


def _data_chunk_sizes(path: Path) -> Tuple[int, int]:
    """Return (declared, present) byte counts of the RIFF ``data`` chunk."""
    file_size = path.stat().st_size
    with path.open("rb") as f:
        riff = f.read(12)
        if len(riff) < 12 or riff[:4] != b"RIFF" or riff[8:12] != b"WAVE":
            raise DecodeError(f"{path} has no RIFF/WAVE header")
        while True:
            head = f.read(8)
            if len(head) < 8:
                raise DecodeError(f"{path} has no data chunk")
            chunk_id, size = struct.unpack("<4sI", head)
            if chunk_id == b"data":
                return int(size), int(file_size - f.tell())
            # Chunks are word aligned.
            f.seek(size + (size & 1), 1)


def read_wav(path: Path) -> Tuple[np.ndarray, WavHeader]:
    """Read a WAVE file and return its interleaved samples at native bit depth.

    libsndfile hands integer PCM back left-justified in the requested dtype, so
    8-bit data comes back as ``(u8 - 128) << 24`` and 24-bit data as
    ``s24 << 8`` when read as int32. Both are shifted back here: 8-bit samples
    are returned as ``0..255`` and 24-bit samples as sign-extended int32.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(str(path))

    try:
        info = sf.info(str(path))
    except RuntimeError as exc:
        raise DecodeError(f"Failed to read WAVE header from {path}: {exc}") from exc

    if info.format not in WAVE_FORMATS:
        raise DecodeError(f"{path} is not a WAVE file (container: {info.format})")

    try:
        bit_depth, dtype = _SUBTYPES[info.subtype]
    except KeyError:
        raise DecodeError(
            f"Unsupported sample format {info.subtype} in {path}; "
            "expected 8/16/24-bit PCM or 32-bit float"
        ) from None

    declared, present = _data_chunk_sizes(path)
    if present < declared:
        raise DecodeError(
            f"{path} is truncated: data chunk declares {declared} bytes, {present} present"
        )

    try:
        data, sr = sf.read(str(path), dtype=dtype, always_2d=True)
    except RuntimeError as exc:
        raise DecodeError(f"Failed to decode samples from {path}: {exc}") from exc

    raw = data.reshape(-1)
    if bit_depth == BIT_DEPTH_8:
        raw = (raw >> 24) + 128
    elif bit_depth == BIT_DEPTH_24:
        raw = raw >> 8

    header = WavHeader(
        sampling_rate=int(sr),
        channel_count=int(info.channels),
        bit_depth=int(bit_depth),
    )
    return raw, header


def to_int16(raw: np.ndarray, bit_depth: int) -> np.ndarray:
    raw = np.asarray(raw).reshape(-1)
    if raw.size == 0:
        return np.zeros((0,), dtype=np.int16)

    if bit_depth == BIT_DEPTH_8:
        # Direct cast, no rescaling to the 16-bit range.
        return raw.astype(np.int16)
    if bit_depth == BIT_DEPTH_16:
        return raw.astype(np.int16, copy=False)
    if bit_depth == BIT_DEPTH_24:
        return (raw.astype(np.int32, copy=False) >> SHIFT_24_BIT).astype(np.int16)
    if bit_depth == BIT_DEPTH_32_FLOAT:
        scaled = np.trunc(raw.astype(np.float32, copy=False) * np.float32(FLOAT_SCALE))
        scaled = np.nan_to_num(scaled, nan=0.0, posinf=_INT16_MAX, neginf=_INT16_MIN)
        return np.clip(scaled, _INT16_MIN, _INT16_MAX).astype(np.int16)

    raise DecodeError(f"Unrecognized bit depth: {bit_depth}")


def load_mono(path: Path) -> MonoSignal:
    raw, header = read_wav(path)
    logger.debug(
        f"Decoded {path}: {header.sampling_rate} Hz, {header.channel_count} ch, "
        f"{header.bit_depth}-bit, {raw.size} samples"
    )
    samples = downmix(to_int16(raw, header.bit_depth), header.channel_count)
    return MonoSignal(samples=samples, sample_rate=header.sampling_rate)
