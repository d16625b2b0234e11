"""Command-line interface for the trailing-return report."""

from __future__ import annotations

import argparse
import sys

from yearreturns.config import Settings
from yearreturns.errors import ConfigError
from yearreturns.runtime import run


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    return argparse.ArgumentParser(
        prog="yearreturns",
        description=(
            "Print the distribution of trailing one-year returns for sp500.csv "
            "and Coinbase_BTCUSD_d.csv in the data directory"
        ),
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    parser.parse_args(argv)
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
