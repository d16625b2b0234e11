"""Tests for plain-text report rendering."""

from __future__ import annotations

from datetime import date

from yearreturns.domain.models import Percentile, SeriesReport
from yearreturns.report import format_percentile_line, render_series_report


def test_percentile_line_is_signed_and_padded() -> None:
    assert format_percentile_line(Percentile(0, 22.378)) == "    0'th percentile return:   +22%"
    assert format_percentile_line(Percentile(45, 0.2)) == "   45'th percentile return:    +0%"
    assert format_percentile_line(Percentile(100, -5.6)) == "  100'th percentile return:    -6%"
    assert format_percentile_line(Percentile(95, 1234.4)) == "   95'th percentile return: +1234%"


def test_render_series_report_block() -> None:
    report = SeriesReport(
        name="sp500",
        start=date(1950, 1, 3),
        end=date(2021, 2, 26),
        sample_size=3,
        percentiles=[Percentile(0, -40.2), Percentile(50, 9.6), Percentile(100, 61.0)],
    )

    text = render_series_report(report)

    assert text == (
        "sp500 data from 1950-01-03 to 2021-02-26:\n"
        "    0'th percentile return:   -40%\n"
        "   50'th percentile return:   +10%\n"
        "  100'th percentile return:   +61%\n"
        "\n"
    )


def test_non_finite_returns_are_spelled_out() -> None:
    assert format_percentile_line(Percentile(0, float("nan"))) == "    0'th percentile return:  +NaN%"
    assert format_percentile_line(Percentile(95, float("inf"))) == "   95'th percentile return:  +Inf%"
    assert format_percentile_line(Percentile(100, float("-inf"))) == "  100'th percentile return:  -Inf%"
