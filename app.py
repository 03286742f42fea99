from __future__ import annotations

from pathlib import Path

from phaseblend.cli import main

if __name__ == "__main__":
    raise SystemExit(main(default_config=Path(__file__).with_name("config.yaml")))
