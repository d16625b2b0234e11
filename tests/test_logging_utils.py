from __future__ import annotations

import logging
from pathlib import Path

from yearreturns.logging_utils import LOGGER_NAME, setup_logger


def _reset_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    return logger


def test_setup_logger_configures_package_logger(tmp_path: Path) -> None:
    _reset_logger()
    log_file = tmp_path / "run.log"

    logger = setup_logger("DEBUG", str(log_file))
    logging.getLogger("yearreturns.data.csv_data").debug("loaded %d rows", 3)
    for handler in logger.handlers:
        handler.flush()

    assert logger.name == "yearreturns"
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert "DEBUG | yearreturns.data.csv_data | loaded 3 rows" in log_file.read_text(
        encoding="utf-8"
    )
    _reset_logger()


def test_setup_logger_does_not_duplicate_handlers() -> None:
    _reset_logger()

    first = setup_logger("INFO")
    second = setup_logger("ERROR")

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.ERROR
    _reset_logger()
