# File: mdc/ui/canvas_container.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Contenedor del lienzo: CanvasView + barra inferior (zoom + punto seleccionado).
# Notes: Solo lectura: la barra refleja el snapshot, no despacha gestos.

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from mdc.core.models import SessionSnapshot
from mdc.ui.canvas_view import CanvasView


def format_zoom(scale: float) -> str:
    return f"Zoom: {float(scale) * 100.0:.0f}%"


def format_selection(snapshot: SessionSnapshot) -> str:
    i = snapshot.selection.index
    if i is None or i >= len(snapshot.chain):
        return "Sin selección"
    p = snapshot.chain[i]
    return f"Punto {i}: ({p.x:.0f}, {p.y:.0f})"


class CanvasContainer(QWidget):
    """Widget central: lienzo + barra de estado del lienzo."""

    def __init__(self, canvas: CanvasView, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.canvas = canvas

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(2)
        root.addWidget(self.canvas, 1)

        bar = QWidget(self)
        bl = QHBoxLayout(bar)
        bl.setContentsMargins(6, 0, 6, 0)
        bl.setSpacing(8)

        self._sel = QLabel("Sin selección", bar)
        self._sel.setAlignment(Qt.AlignVCenter | Qt.AlignLeft)
        bl.addWidget(self._sel, 1)

        self._pct = QLabel("Zoom: 100%", bar)
        self._pct.setAlignment(Qt.AlignVCenter | Qt.AlignRight)
        self._pct.setMinimumWidth(90)
        bl.addWidget(self._pct, 0)

        root.addWidget(bar, 0)

        self.canvas.snapshot_changed.connect(self._on_snapshot)
        self._on_snapshot(self.canvas.snapshot())

    def _on_snapshot(self, snapshot: SessionSnapshot) -> None:
        self._pct.setText(format_zoom(snapshot.view.scale))
        self._sel.setText(format_selection(snapshot))
