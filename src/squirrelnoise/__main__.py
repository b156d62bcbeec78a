"""Module execution stub for the API-only squirrelnoise package."""

from __future__ import annotations

import sys


def main() -> int:
    print(
        "squirrelnoise does not provide a CLI. "
        "Import the noise functions (see README) or run sample_run.py.",
        file=sys.stderr,
    )
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
