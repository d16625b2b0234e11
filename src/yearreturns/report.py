"""Plain-text rendering of per-series return distributions."""

from __future__ import annotations

import math

from yearreturns.domain.models import Percentile, SeriesReport


def format_percentile_line(percentile: Percentile) -> str:
    return f"  {percentile.rank:3d}'th percentile return: {_format_return(percentile.value)}%"


def _format_return(value: float) -> str:
    # Non-finite returns (zero start price) print as +NaN, +Inf and -Inf.
    if math.isnan(value):
        return f"{'+NaN':>5}"
    if math.isinf(value):
        return f"{'+Inf' if value > 0 else '-Inf':>5}"
    return f"{value:+5.0f}"


def render_series_report(report: SeriesReport) -> str:
    """Render one series block, including its trailing blank line."""
    lines = [f"{report.name} data from {report.start.isoformat()} to {report.end.isoformat()}:"]
    lines.extend(format_percentile_line(percentile) for percentile in report.percentiles)
    return "\n".join(lines) + "\n\n"
