"""CSV-backed price loaders."""

from __future__ import annotations

import csv
import io
import logging
import re
from datetime import datetime
from pathlib import Path

import pandas as pd

from yearreturns.config import BTC_SOURCE, SP500_SOURCE, SeriesSource
from yearreturns.domain.series import PriceSeries
from yearreturns.errors import DataFileError, EmptySeriesError, MalformedRowError, ParseError

ISO_DATE_PATTERN = r"\d{4}-\d{2}-\d{2}"
ISO_DATE_FORMAT = "%Y-%m-%d"
# Whole days representable at nanosecond resolution.
EARLIEST_DATE = pd.Timestamp.min.ceil("D")
LATEST_DATE = pd.Timestamp.max.floor("D")

logger = logging.getLogger(__name__)


def load_price_csv(path: str | Path, date_column: int, price_column: int) -> PriceSeries:
    """Load a headed CSV file into a date-sorted ``PriceSeries``.

    Row 0 is the header and is skipped. Every later row must have as many
    fields as the header, a ``YYYY-MM-DD`` date in ``date_column`` and a
    decimal number in ``price_column``. The first offending row aborts the
    load with a ``MalformedRowError`` naming its index (header = row 0).
    """
    csv_path = Path(path)
    raw = _read_raw(csv_path)

    width = raw.shape[1]
    for label, column in (("date", date_column), ("price", price_column)):
        if column >= width:
            raise ParseError(
                f"{csv_path}: {label} column {column} is outside the {width}-column header"
            )

    header_date = raw.iloc[0][date_column]
    if _is_calendar_date(header_date):
        raise ParseError(f"{csv_path}: header row missing, first row holds date {header_date!r}")

    rows = raw.iloc[1:]
    if rows.empty:
        raise EmptySeriesError(f"{csv_path}: no data rows after the header")

    date_text = rows[date_column]
    dates = _parse_dates(date_text)
    bad_dates = dates.isna() | (dates < EARLIEST_DATE) | (dates > LATEST_DATE)
    if bad_dates.any():
        if _is_calendar_date(date_text[bad_dates.idxmax()]):
            reason = (
                f"date in column {date_column} is outside the supported range "
                f"{EARLIEST_DATE:%Y-%m-%d} to {LATEST_DATE:%Y-%m-%d}"
            )
        else:
            reason = f"date in column {date_column} is not YYYY-MM-DD"
        _raise_first_bad_row(csv_path, rows, bad_dates, reason)

    price_text = rows[price_column]
    prices = pd.to_numeric(price_text, errors="coerce")
    _raise_first_bad_row(
        csv_path,
        rows,
        prices.isna() | (price_text.str.strip() != price_text),
        f"price in column {price_column} is not a number",
    )

    logger.debug("Parsed %d rows from %s", len(rows), csv_path)
    return PriceSeries(pd.Series(prices.to_numpy(dtype=float), index=pd.DatetimeIndex(dates)))


def _read_raw(path: Path) -> pd.DataFrame:
    """Read every record as text, rejecting rows whose width differs from the header."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataFileError(f"Cannot open {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path}: malformed CSV: {exc}") from exc

    try:
        records = [record for record in csv.reader(io.StringIO(text)) if record]
    except csv.Error as exc:
        raise ParseError(f"{path}: malformed CSV: {exc}") from exc
    if not records:
        raise EmptySeriesError(f"{path}: file is empty")

    width = len(records[0])
    for row, record in enumerate(records):
        if len(record) != width:
            raise MalformedRowError(
                str(path), row, ",".join(record), f"expected {width} fields, found {len(record)}"
            )
    return pd.DataFrame(records, dtype=str)


def _is_calendar_date(text: str) -> bool:
    if re.fullmatch(ISO_DATE_PATTERN, text) is None:
        return False
    try:
        datetime.strptime(text, ISO_DATE_FORMAT)
    except ValueError:
        return False
    return True


def _parse_dates(values: pd.Series) -> pd.Series:
    well_formed = values.str.fullmatch(ISO_DATE_PATTERN, na=False)
    return pd.to_datetime(values.where(well_formed), format=ISO_DATE_FORMAT, errors="coerce")


def _raise_first_bad_row(path: Path, rows: pd.DataFrame, bad: pd.Series, reason: str) -> None:
    if not bad.any():
        return
    row = bad.idxmax()
    content = ",".join("" if pd.isna(value) else str(value) for value in rows.loc[row])
    raise MalformedRowError(str(path), int(row), content, reason)


class CsvPriceLoader:
    """Load named price series from CSV files under one directory.

    Both named loaders go through ``load_price_csv``; only the file name and
    column offsets differ.
    """

    def __init__(self, data_dir: str = ".") -> None:
        self.data_dir = Path(data_dir)

    def load(self, source: SeriesSource) -> PriceSeries:
        path = self.data_dir / source.filename
        logger.info("Loading %s from %s", source.name, path)
        series = load_price_csv(
            path,
            date_column=source.date_column,
            price_column=source.price_column,
        )
        earliest, latest = series.range()
        logger.info("%s: %d observations, %s to %s", source.name, len(series), earliest, latest)
        return series

    def load_sp500(self) -> PriceSeries:
        return self.load(SP500_SOURCE)

    def load_btc(self) -> PriceSeries:
        return self.load(BTC_SOURCE)
