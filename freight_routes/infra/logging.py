# freight_routes/infra/logging.py
# -*- coding: utf-8 -*-

"""
Logging setup
=============

Library modules only ask for a logger:

    from freight_routes.infra.logging import get_logger
    _log = get_logger(__name__)

Entry points (the CLI, notebooks, ad-hoc scripts) configure the root logger
once:

    init_logging(level="DEBUG", log_file=Path("logs/run.log"))

Notes
-----
- Records go to stderr. stdout belongs to the CLI's JSON document.
- Format: [YYYY-MM-DD HH:MM:SS][LEVEL][logger.name] message
- FREIGHT_LOG_LEVEL, when set, wins over the `level` argument.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_LEVEL_ENV = "FREIGHT_LOG_LEVEL"

_LOG_FORMAT = "[{asctime}][{levelname}][{name}] {message}"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_DEFAULT_LOGS_DIR = Path("logs")

# Set by init_logging when a file handler is attached
_log_file: Optional[Path] = None


# ────────────────────────────────────────────────────────────────────────────────
# Internals
# ────────────────────────────────────────────────────────────────────────────────

def _resolve_level(level: str) -> int:
    """Numeric level for `level` (or the env override); unknown names → INFO."""
    name = os.getenv(LOG_LEVEL_ENV) or level
    numeric = logging.getLevelName(str(name).upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def _run_log_path(logs_dir: Optional[Path]) -> Path:
    """<logs_dir>/<script>__<YYYYmmdd-HHMMSS>.log"""
    stem = Path(sys.argv[0] or "").stem
    if stem in {"", "-m", "-c", "__main__"}:
        stem = "freight_routes"
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    return Path(logs_dir or _DEFAULT_LOGS_DIR) / f"{stem}__{stamp}.log"


# ────────────────────────────────────────────────────────────────────────────────
# Public API
# ────────────────────────────────────────────────────────────────────────────────

def init_logging(
      level: str = "INFO"
    , *
    , force: bool = True
    , write_output: bool = False
    , log_file: Optional[Path] = None
    , logs_dir: Optional[Path] = None
) -> None:
    """
    Configure the root logger.

    Parameters
    ----------
    level : str, default "INFO"
        Level name. Overridden by FREIGHT_LOG_LEVEL.
    force : bool, default True
        Drop handlers already attached to the root logger first.
    write_output : bool, default False
        Also write to a per-run file under `logs_dir` (default ./logs).
    log_file : Path, optional
        Also write to this file. Takes precedence over `write_output`.
    logs_dir : Path, optional
        Directory for the per-run file.
    """
    global _log_file

    root = logging.getLogger()
    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)

    numeric_level = _resolve_level(level)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT, style="{")

    console = logging.StreamHandler(stream=sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    _log_file = None
    if log_file is None and write_output:
        log_file = _run_log_path(logs_dir)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        _log_file = path.resolve()

    get_logger(__name__).debug(
        "init_logging: level=%s file=%s.",
        logging.getLevelName(numeric_level),
        _log_file,
    )


def get_current_log_path() -> Optional[Path]:
    """
    Log file written by the root logger, or None.

    Falls back to the root handlers when logging was configured elsewhere.
    """
    if _log_file is not None:
        return _log_file
    for handler in logging.getLogger().handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)
    return None


def log_banner(
      log: logging.Logger
    , msg: str
    , *
    , char: str = "─"
    , width: int = 60
) -> None:
    """Log `msg` between two horizontal bars (INFO)."""
    bar = char * width
    log.info(bar)
    log.info(msg)
    log.info(bar)


def get_logger(
    name: Optional[str] = None
) -> logging.Logger:
    """logging.getLogger, kept here so modules never import logging setup directly."""
    return logging.getLogger(name if name is not None else "freight_routes")
