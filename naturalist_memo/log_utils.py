# -*- coding: utf-8 -*-
"""Logger factory shared by all modules.

Handlers live on the ``naturalist_memo`` package logger only: one console
handler with a common format, plus a rotating file handler once a log
directory is given. Module loggers carry no handlers and propagate to it,
so a host application's logging config still sees every record.
"""
from __future__ import annotations
import logging
import logging.handlers
import os
from typing import Dict, Optional

PACKAGE_LOGGER = 'naturalist_memo'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
LOG_FILE = 'naturalist_memo.log'

# ハンドラを二重登録しないためのキャッシュ (ルートロガー名 -> ロガー)
_LOGGER_CACHE: Dict[str, logging.Logger] = {}


def _root_name(name: str) -> str:
    return name.split('.', 1)[0]


def _configure(root: str, level: int) -> logging.Logger:
    if root in _LOGGER_CACHE:
        return _LOGGER_CACHE[root]
    logger = logging.getLogger(root)
    logger.setLevel(level)
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)
    _LOGGER_CACHE[root] = logger
    return logger


def _add_file_handler(logger: logging.Logger, log_dir: str):
    path = os.path.abspath(os.path.join(log_dir, LOG_FILE))
    for h in logger.handlers:
        if isinstance(h, logging.handlers.RotatingFileHandler) and h.baseFilename == path:
            return
    os.makedirs(log_dir, exist_ok=True)
    fh = logging.handlers.RotatingFileHandler(path, maxBytes=1_000_000, backupCount=3, encoding='utf-8')
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(fh)


def get_logger(name: str = PACKAGE_LOGGER, log_dir: Optional[str] = None,
               level: int = logging.INFO) -> logging.Logger:
    """Return ``logging.getLogger(name)`` after configuring its top-level logger.

    ``log_dir`` adds a rotating ``naturalist_memo.log`` file handler to the
    top-level logger (once per directory).
    """
    root = _configure(_root_name(name), level)
    if log_dir:
        _add_file_handler(root, log_dir)
    return logging.getLogger(name)
