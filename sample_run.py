"""Quick local sample run for squirrelnoise."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists() and str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from squirrelnoise import BitNoiseHasher  # noqa: E402

SHADES = " .:-=+*#%@"


def main() -> int:
    try:
        hasher = BitNoiseHasher(seed=42)
        preview = hasher.grid((12, 48), mode="zero_to_one")
    except Exception as exc:
        print(f"[SAMPLE RUN ERROR] {exc}", file=sys.stderr)
        print("Tip: install dependencies with `pip install -e .`", file=sys.stderr)
        return 1

    for index in range(4):
        print(
            f"[SAMPLE RUN] index={index} raw={hasher.noise(index)} "
            f"zero_to_one={hasher.zero_to_one(index):.6f}"
        )
    top = len(SHADES) - 1
    for row in preview:
        print("".join(SHADES[min(int(v * len(SHADES)), top)] for v in row))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
