# File: mdc/ui/items/point_items.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Marcador de punto arrastrable (círculo) que reporta drag/click/hover a su dueño.
# Notes: El item no conoce el modelo; solo reenvía índice + posición lógica (coords del padre).

from __future__ import annotations

import logging

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPen
from PySide6.QtWidgets import QGraphicsEllipseItem, QGraphicsItem

log = logging.getLogger(__name__)

# Distancia (px de pantalla) por debajo de la cual un press+release cuenta como click.
CLICK_SLOP_PX = 3.0


class PointMarkerOwner:
    """Contrato mínimo del dueño de los marcadores (lo implementa CanvasView)."""

    def point_drag_moved(self, index: int, pos: QPointF) -> None:  # pragma: no cover (UI)
        _ = (index, pos)

    def point_clicked(self, index: int) -> None:  # pragma: no cover (UI)
        _ = index

    def point_hover_entered(self, index: int) -> None:  # pragma: no cover (UI)
        _ = index

    def point_hover_left(self, index: int) -> None:  # pragma: no cover (UI)
        _ = index


class PointMarkerItem(QGraphicsEllipseItem):
    """Círculo movible para el punto `index` de la cadena."""

    def __init__(self, index: int, owner: PointMarkerOwner, parent: QGraphicsItem | None = None) -> None:
        super().__init__(parent)
        self._index = int(index)
        self._owner = owner
        self.setPen(QPen(Qt.NoPen))
        self.setAcceptHoverEvents(True)
        self.setCursor(Qt.PointingHandCursor)
        self.setFlag(self.GraphicsItemFlag.ItemIsMovable, True)
        # Necesario para ItemPositionHasChanged.
        self.setFlag(self.GraphicsItemFlag.ItemSendsGeometryChanges, True)

    @property
    def index(self) -> int:
        return self._index

    def set_marker(self, x: float, y: float, radius: float, fill: str) -> None:
        r = float(radius)
        rect = QRectF(-r, -r, 2.0 * r, 2.0 * r)
        if self.rect() != rect:
            self.setRect(rect)
        color = QColor(fill)
        if self.brush().color() != color:
            self.setBrush(QBrush(color))
        self.setPos(float(x), float(y))

    def itemChange(self, change, value):  # pragma: no cover (UI)
        if change == self.GraphicsItemChange.ItemPositionHasChanged:
            try:
                self._owner.point_drag_moved(self._index, self.pos())
            except Exception:
                log.exception("Drag del punto %s falló", self._index)
        return super().itemChange(change, value)

    def mouseReleaseEvent(self, event) -> None:  # pragma: no cover (UI)
        super().mouseReleaseEvent(event)
        try:
            moved = event.screenPos() - event.buttonDownScreenPos(Qt.LeftButton)
            if moved.manhattanLength() <= CLICK_SLOP_PX:
                self._owner.point_clicked(self._index)
        except Exception:
            log.exception("Click del punto %s falló", self._index)

    def hoverEnterEvent(self, event) -> None:  # pragma: no cover (UI)
        super().hoverEnterEvent(event)
        try:
            self._owner.point_hover_entered(self._index)
        except Exception:
            log.exception("Hover del punto %s falló", self._index)

    def hoverLeaveEvent(self, event) -> None:  # pragma: no cover (UI)
        super().hoverLeaveEvent(event)
        try:
            self._owner.point_hover_left(self._index)
        except Exception:
            log.exception("Hover del punto %s falló", self._index)
