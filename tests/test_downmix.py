"""Tests for channel reduction."""

import numpy as np
import pytest

from phaseblend.dsp.downmix import downmix


def test_mono_is_unchanged():
    out = downmix(np.array([5, -7, 0], dtype=np.int16), 1)
    assert out.dtype == np.int16
    assert out.tolist() == [5, -7, 0]


def test_stereo_mean():
    assert downmix(np.array([10, 20, -4, 8], dtype=np.int16), 2).tolist() == [15, 2]


def test_division_truncates_toward_zero():
    # -3 / 2 -> -1 (flooring would give -2)
    assert downmix(np.array([-3, 0, 3, 0], dtype=np.int16), 2).tolist() == [-1, 1]


def test_trailing_partial_frame_is_dropped():
    out = downmix(np.array([1, 2, 3, 4, 5], dtype=np.int16), 2)
    assert out.tolist() == [1, 3]


@pytest.mark.parametrize("length", [0, 1, 5, 6, 7, 11])
@pytest.mark.parametrize("channels", [1, 2, 3, 6])
def test_output_length_is_floor_division(length, channels):
    samples = np.arange(length, dtype=np.int16)
    assert downmix(samples, channels).size == length // channels


def test_trailing_samples_do_not_affect_output():
    base = np.array([7, 9, -2, 4], dtype=np.int16)
    noisy = np.concatenate([base, np.array([32767], dtype=np.int16)])
    assert downmix(noisy, 2).tolist() == downmix(base, 2).tolist()


def test_loud_frames_do_not_overflow():
    samples = np.array([32767, 32767, 32767, -32768, -32768, -32768], dtype=np.int16)
    assert downmix(samples, 3).tolist() == [32767, -32768]


def test_empty_input():
    out = downmix(np.zeros((0,), dtype=np.int16), 4)
    assert out.dtype == np.int16
    assert out.size == 0


def test_channel_count_must_be_positive():
    with pytest.raises(ValueError):
        downmix(np.array([1, 2], dtype=np.int16), 0)
