"""Runtime wiring for the percentile report."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from yearreturns.analysis.percentiles import nearest_rank_percentiles
from yearreturns.analysis.returns import trailing_returns
from yearreturns.config import SeriesSource, Settings
from yearreturns.data.base import PriceLoader
from yearreturns.data.csv_data import CsvPriceLoader
from yearreturns.domain.models import SeriesReport
from yearreturns.domain.series import PriceSeries
from yearreturns.errors import ReturnsError
from yearreturns.logging_utils import setup_logger
from yearreturns.report import render_series_report

logger = logging.getLogger(__name__)


def analyze_series(name: str, series: PriceSeries, settings: Settings) -> SeriesReport:
    """Sample trailing returns for one series and rank them."""
    start, end = series.range()
    sample = trailing_returns(
        series,
        horizon_days=settings.horizon_days,
        step_days=settings.step_days,
    )
    report = SeriesReport(
        name=name,
        start=start,
        end=end,
        sample_size=len(sample),
        percentiles=nearest_rank_percentiles(sample, step=settings.percentile_step),
    )
    logger.info("%s: %d return windows", name, report.sample_size)
    return report


def build_report(source: SeriesSource, loader: PriceLoader, settings: Settings) -> SeriesReport:
    return analyze_series(source.name, loader.load(source), settings)


def run(settings: Settings, stream: TextIO | None = None, loader: PriceLoader | None = None) -> int:
    """Print one block per configured source, aborting on the first error.

    Each block is computed in full before it is written, so a failure never
    leaves a partial block behind.
    """
    setup_logger(settings.log_level, settings.log_file)
    output = stream if stream is not None else sys.stdout
    price_loader = loader if loader is not None else CsvPriceLoader(settings.data_dir)

    try:
        for source in settings.sources:
            block = render_series_report(build_report(source, price_loader, settings))
            output.write(block)
            output.flush()
    except ReturnsError as exc:
        logger.error("%s", exc)
        return 1
    except Exception as exc:  # pragma: no cover - top-level guard
        logger.exception("Unexpected fatal error: %s", exc)
        return 1
    return 0
