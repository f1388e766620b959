# period_tables/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

LOGGING: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": "logs/period_tables.log",
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        "period_tables": {
            "level": "DEBUG",
            "handlers": ["console", "file"],
            "propagate": False,
        },
    },
}


def configure_logging(log_dir: Optional[Path] = None, *, to_file: bool = True) -> Dict[str, Any]:
    """
    Apply ``LOGGING`` via ``logging.config.dictConfig``.

    The rotating file handler writes into ``log_dir`` (default ``./logs``), which
    is created when missing. With ``to_file=False`` only the console handler is
    installed. Returns the dictionary that was applied.
    """
    config = copy.deepcopy(LOGGING)
    if to_file:
        folder = Path(log_dir) if log_dir is not None else Path("logs")
        folder.mkdir(parents=True, exist_ok=True)
        config["handlers"]["file"]["filename"] = str(folder / "period_tables.log")
    else:
        del config["handlers"]["file"]
        config["loggers"]["period_tables"]["handlers"] = ["console"]
    logging.config.dictConfig(config)
    return config
