from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from phaseblend.audio.file_reader import load_mono
from phaseblend.audio.file_writer import write_stereo_wav
from phaseblend.config import AppConfig
from phaseblend.dsp.phase_blend import phase_blend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlendResult:
    output_path: str
    sample_rate: int
    frames: int
    blend_frames: int
    blended: bool


def render_phase_blend(
    *,
    input_path: Path,
    output_path: Path,
    blend_path: Optional[Path] = None,
    config: Optional[AppConfig] = None,
) -> BlendResult:
    config = config or AppConfig()
    output_path = Path(output_path)

    primary = load_mono(Path(input_path))
    logger.info(f"Loaded input {input_path}: {primary.num_frames} frames at {primary.sample_rate} Hz")

    blend = None
    if blend_path is not None:
        blend = load_mono(Path(blend_path))
        logger.info(f"Loaded blend {blend_path}: {blend.num_frames} frames at {blend.sample_rate} Hz")
        if blend.num_frames < primary.num_frames:
            logger.debug(
                f"Blend is {primary.num_frames - blend.num_frames} frames shorter than input; "
                "tail is mixed with silence"
            )

    stereo = phase_blend(primary, blend)

    write_stereo_wav(
        output_path,
        stereo,
        primary.sample_rate,
        overwrite=bool(config.output.overwrite),
    )
    logger.info(f"Wrote {output_path}: {primary.num_frames} stereo frames at {primary.sample_rate} Hz")

    return BlendResult(
        output_path=str(output_path),
        sample_rate=int(primary.sample_rate),
        frames=int(primary.num_frames),
        blend_frames=int(blend.num_frames) if blend is not None else 0,
        blended=blend is not None,
    )
