# File: mdc/utils/log.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Logging de la app: consola + logs/mdc.log, nivel y carpeta por env.
# Notes: Se configura una sola vez desde mdc.app.main(). Los módulos solo piden su logger.
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

ENV_LOG_LEVEL = "MDC_LOG_LEVEL"
ENV_LOG_DIR = "MDC_LOG_DIR"
LOG_FILENAME = "mdc.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_configured_path: Optional[Path] = None
_LOGGER_CONFIGURED = False


def resolve_level(default: int = logging.INFO) -> int:
    """Nivel efectivo: MDC_LOG_LEVEL (si es válido) o `default`."""
    raw = (os.environ.get(ENV_LOG_LEVEL, "") or "").strip().upper()
    if raw in _LEVELS:
        return getattr(logging, raw)
    return default


def resolve_log_dir(default: str | os.PathLike = "logs") -> Path:
    raw = (os.environ.get(ENV_LOG_DIR, "") or "").strip()
    return Path(raw) if raw else Path(default)


def _file_handler(log_dir: Path, level: int, fmt: logging.Formatter) -> Optional[logging.FileHandler]:
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / LOG_FILENAME, encoding="utf-8")
    except OSError as e:
        logging.getLogger(__name__).warning("Sin archivo de log en %s (%s); solo consola", log_dir, e)
        return None
    fh.setLevel(level)
    fh.setFormatter(fmt)
    return fh


def setup_logging(log_dir: str | os.PathLike = "logs", level: int = logging.INFO) -> Optional[Path]:
    """Configura el root logger (consola + archivo) una única vez.

    MDC_LOG_LEVEL y MDC_LOG_DIR pisan los argumentos. Si el archivo no se
    puede abrir se sigue solo con consola. Devuelve la ruta del archivo de
    log, o None si no hay archivo.
    """
    global _LOGGER_CONFIGURED, _configured_path
    if _LOGGER_CONFIGURED:
        return _configured_path

    level = resolve_level(level)
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    root = logging.getLogger()
    root.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)
    root.addHandler(console)

    d = resolve_log_dir(log_dir)
    fh = _file_handler(d, level, fmt)
    if fh is not None:
        root.addHandler(fh)
        _configured_path = d / LOG_FILENAME

    _LOGGER_CONFIGURED = True
    return _configured_path


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
