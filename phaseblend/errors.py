from __future__ import annotations


class PhaseBlendError(RuntimeError):
    """Base class for every failure that aborts a render."""


class DecodeError(PhaseBlendError):
    """Input container is malformed, not WAVE, or has an unsupported sample format."""


class RateMismatchError(PhaseBlendError):
    def __init__(self, rate: int, blend_rate: int) -> None:
        super().__init__(
            f"Sampling rate mismatch: input is {rate} Hz, blend is {blend_rate} Hz"
        )
        self.rate = int(rate)
        self.blend_rate = int(blend_rate)


class EncodeError(PhaseBlendError):
    """Output container could not be written."""


class ConfigError(PhaseBlendError):
    """config.yaml could not be parsed or holds an invalid value."""
