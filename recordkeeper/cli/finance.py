from __future__ import annotations

import argparse
from typing import Sequence

from recordkeeper.application.services.finance_service import FinanceApp
from recordkeeper.config.settings import settings
from recordkeeper.logging_config import get_logger


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Simulate processing transactions on a savings account")
    p.add_argument(
        "--currency",
        choices=("HUF", "EUR", "USD"),
        default=settings.currency,
        help=f"Currency of the simulated account (default: {settings.currency})",
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    get_logger(settings.log_file, settings.log_level)

    app = FinanceApp(currency=args.currency)
    for line in app.run():
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
