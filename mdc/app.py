# File: mdc/app.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Entry-point de la aplicación.
# Notes: Orden: logging -> mdc_settings.json (env) -> Qt.
from __future__ import annotations

import sys
from PySide6.QtWidgets import QApplication

from mdc.core.settings import apply_project_settings
from mdc.core.version import APP_NAME, APP_VERSION

from mdc.ui.main_window import MainWindow
from mdc.utils.log import setup_logging, get_logger

log = get_logger(__name__)


def main() -> int:
    log_path = setup_logging()
    # Project-level defaults (repo-local): mdc_settings.json
    apply_project_settings(logger=log, prefer_env=True)
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    w = MainWindow()
    w.show()
    log.info("MDC iniciado (v%s), log: %s", APP_VERSION, log_path or "solo consola")
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
