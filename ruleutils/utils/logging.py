from __future__ import annotations

import logging
import logging.config
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

import yaml

from ..dates import log_format_datetime


class LogTimestampFormatter(logging.Formatter):
    """Formatter whose ``asctime`` is the bracketed ``[YYYY-MM-DD hh:mm:ss]`` stamp."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return log_format_datetime(datetime.fromtimestamp(record.created))


def configure_logging(config_path: str) -> None:
    path = Path(config_path)
    if not path.exists():
        logging.basicConfig(level=logging.INFO)
        logging.getLogger(__name__).warning("Logging config %s missing; using basicConfig", config_path)
        return

    with path.open("r", encoding="utf-8") as fh:
        data: Dict[str, Any] = yaml.safe_load(fh)
    logging.config.dictConfig(data)
