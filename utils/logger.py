"""Centralized logging with account number masking."""

from __future__ import annotations

import logging
import os
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# 6 to 12 digit runs: account numbers, the last 4 digits stay readable
_ACCOUNT_PATTERN = re.compile(r"(?<!\d)\d{2,8}(\d{4})(?!\d)")

_DEFAULT_LOG_DIR = Path.home() / ".kontoMCP" / "logs"


class _MaskingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = mask_account_numbers(str(record.msg))
        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: _mask_arg(v) for k, v in record.args.items()}
            else:
                record.args = tuple(_mask_arg(a) for a in record.args)
        return True


def _mask_arg(value: object) -> object:
    return mask_account_numbers(value) if isinstance(value, str) else value


def mask_account_numbers(text: str) -> str:
    def _replace(m: re.Match) -> str:  # type: ignore[type-arg]
        full = m.group(0)
        return "*" * (len(full) - 4) + m.group(1)
    return _ACCOUNT_PATTERN.sub(_replace, text)


def setup_logger(name: str = "kontoMCP") -> logging.Logger:
    log_dir = Path(os.getenv("KONTOMCP_LOG_DIR", "") or _DEFAULT_LOG_DIR).expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)
    console_level = os.getenv("KONTOMCP_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    console.addFilter(_MaskingFilter())

    fh = RotatingFileHandler(
        log_dir / "server.log", maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d – %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    fh.addFilter(_MaskingFilter())

    logger.addHandler(console)
    logger.addHandler(fh)
    return logger


logger = setup_logger()
