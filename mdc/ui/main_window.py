# File: mdc/ui/main_window.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Ventana principal: lienzo central + barra de estado; persiste la geometría de la ventana.
# Notes: La configuración del lienzo se lee una vez al construir (load_canvas_config).
from __future__ import annotations

import base64

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QStatusBar

from mdc.core.controller import InteractionController
from mdc.core.settings import AppSettings, load_canvas_config
from mdc.core.version import APP_NAME, APP_VERSION
from mdc.ui.canvas_container import CanvasContainer
from mdc.ui.canvas_view import CanvasView
from mdc.utils.log import get_logger

log = get_logger(__name__)

HINT_TEXT = "Arrastrá los puntos · rueda = zoom · arrastrar fondo = mover vista"


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("{} v{}".format(APP_NAME, APP_VERSION))
        self.resize(1200, 1000)

        self._settings = AppSettings.load()
        self._config = load_canvas_config()
        log.info(
            "Lienzo: %d puntos, zoom_step=%s, escala %s..%s",
            len(self._config.initial_points),
            self._config.zoom_step,
            self._config.min_scale,
            self._config.max_scale,
        )

        self._build_ui()
        self._restore_ui_state()

    def _build_ui(self) -> None:
        controller = InteractionController(config=self._config)
        self._canvas = CanvasView(controller, self)
        self._canvas_container = CanvasContainer(self._canvas, self)
        self.setCentralWidget(self._canvas_container)

        sb = QStatusBar(self)
        self.setStatusBar(sb)
        self._status_label = QLabel(HINT_TEXT, self)
        sb.addPermanentWidget(self._status_label)

    def canvas(self) -> CanvasView:
        return self._canvas

    def closeEvent(self, event: QCloseEvent) -> None:
        self._persist_ui_state()
        event.accept()

    # ----------------------------
    # UI state persistente (layout)
    # ----------------------------
    def _restore_ui_state(self) -> None:
        try:
            if self._settings.ui_main_geometry_b64:
                raw = base64.b64decode(self._settings.ui_main_geometry_b64.encode("ascii"), validate=False)
                self.restoreGeometry(raw)
        except Exception:
            # No romper arranque
            log.debug("No se pudo restaurar geometry", exc_info=True)

    def _persist_ui_state(self) -> None:
        try:
            raw = bytes(self.saveGeometry())
            self._settings.ui_main_geometry_b64 = base64.b64encode(raw).decode("ascii")
            self._settings.save()
        except Exception:
            log.debug("No se pudo persistir geometry", exc_info=True)
