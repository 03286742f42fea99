from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from phaseblend.config import load_config
from phaseblend.errors import PhaseBlendError
from phaseblend.pipeline import render_phase_blend

logger = logging.getLogger("phaseblend")

DEFAULT_CONFIG = Path("config.yaml")


def build_parser(default_config: Optional[Path] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phaseblend",
        description="Render a WAVE file as out-of-phase 16-bit stereo, optionally blending in a second file.",
    )
    parser.add_argument("-i", "--input", required=True, type=Path, help="Input file name")
    parser.add_argument("-b", "--blend", default=None, type=Path, help="Blend input file")
    parser.add_argument("-o", "--output", required=True, type=Path, help="Output file name")
    parser.add_argument(
        "-c",
        "--config",
        default=default_config or DEFAULT_CONFIG,
        type=Path,
        help="YAML config (default: %(default)s; built-in defaults are used when missing)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[Sequence[str]] = None, *, default_config: Optional[Path] = None) -> int:
    args = build_parser(default_config).parse_args(argv)

    try:
        config = load_config(args.config)
    except (PhaseBlendError, OSError) as exc:
        logging.basicConfig(level=logging.ERROR)
        logger.error(str(exc))
        return 1

    level = "DEBUG" if args.verbose else config.logging.level
    logging.basicConfig(level=level, format=config.logging.format)

    try:
        render_phase_blend(
            input_path=args.input,
            output_path=args.output,
            blend_path=args.blend,
            config=config,
        )
    except (PhaseBlendError, OSError) as exc:
        logger.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
