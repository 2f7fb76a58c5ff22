from __future__ import annotations

import argparse
from pathlib import Path

SAMPLE_LINES = [
    "101, Alice Smith, 84",
    "102, Bob Johnson, 72",
    "103, Clara Williams, 65",
    "",
    "104, David Brown, 55",
    "105, Eva Green, 38",
]


def main() -> int:
    parser = argparse.ArgumentParser(description="Write a sample student results file")
    parser.add_argument(
        "--out",
        type=Path,
        default=Path("students_input.txt"),
        help="Destination file (default: students_input.txt)",
    )
    parser.add_argument(
        "--broken",
        action="store_true",
        help="Append a line with a missing score to exercise the error path",
    )
    args = parser.parse_args()

    lines = list(SAMPLE_LINES)
    if args.broken:
        lines.append("106, Frank White")
    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"Wrote {len(lines)} lines to: {args.out.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
