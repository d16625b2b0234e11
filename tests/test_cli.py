from __future__ import annotations

from pathlib import Path

import pytest

from yearreturns.cli import build_parser, main


def _isolate(monkeypatch: pytest.MonkeyPatch, data_dir: Path) -> None:
    monkeypatch.setattr("yearreturns.config.load_dotenv", lambda *args, **kwargs: None)
    for key in ("YEARRETURNS_LOG_LEVEL", "YEARRETURNS_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("YEARRETURNS_DATA_DIR", str(data_dir))


def _write_inputs(data_dir: Path) -> None:
    (data_dir / "sp500.csv").write_text(
        "Date,Open,High,Low,Close,Adj Close,Volume\n"
        "2019-01-02,1,1,1,2640.00,1,1\n"
        "2020-01-02,1,1,1,3230.78,1,1\n",
        encoding="utf-8",
    )
    (data_dir / "Coinbase_BTCUSD_d.csv").write_text(
        "unix,date,symbol,open,high,low,close,Volume BTC,Volume USD\n"
        "1546300800,2019-01-01,BTC/USD,3700.00,1,1,1,1,1\n"
        "1577836800,2020-01-01,BTC/USD,7200.00,1,1,1,1,1\n",
        encoding="utf-8",
    )


def test_parser_accepts_no_arguments() -> None:
    parser = build_parser()

    parser.parse_args([])


def test_parser_rejects_options() -> None:
    parser = build_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["--data-dir", "elsewhere"])


def test_main_prints_report(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _isolate(monkeypatch, tmp_path)
    _write_inputs(tmp_path)

    code = main([])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("sp500 data from 2019-01-02 to 2020-01-02:\n")
    assert "btc data from 2019-01-01 to 2020-01-01:\n" in out
    assert "  100'th percentile return:   +95%\n" in out
    assert out.endswith("\n\n")
    assert len(out.splitlines()) == 2 * (1 + 21 + 1)


def test_main_returns_one_when_inputs_missing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _isolate(monkeypatch, tmp_path)

    code = main([])

    assert code == 1
    assert capsys.readouterr().out == ""


def test_main_returns_two_on_bad_configuration(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _isolate(monkeypatch, tmp_path)
    monkeypatch.setenv("YEARRETURNS_LOG_LEVEL", "loud")

    code = main([])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err
