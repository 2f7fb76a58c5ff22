"""Run every console program in sequence with default settings."""

from __future__ import annotations

import argparse
from typing import Callable, Sequence

from recordkeeper.cli import finance, grades, health, inventory_log, warehouse

PROGRAMS: dict[str, Callable[[Sequence[str] | None], int]] = {
    "warehouse": warehouse.main,
    "health": health.main,
    "grades": grades.main,
    "finance": finance.main,
    "inventory-log": inventory_log.main,
}


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the recordkeeper demo programs")
    parser.add_argument(
        "--patient-id",
        default="101",
        help="Patient passed to the health lookup so the run needs no input (default: 101)",
    )
    args = parser.parse_args()

    failures = 0
    for name, run in PROGRAMS.items():
        print(f"\n##### {name} #####\n")
        argv = ["--patient-id", args.patient_id] if name == "health" else []
        rc = run(argv)
        if rc != 0:
            failures += 1
    print(f"\nFinished: {len(PROGRAMS) - failures} succeeded, {failures} failed.")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
