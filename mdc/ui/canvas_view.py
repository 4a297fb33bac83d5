# File: mdc/ui/canvas_view.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Lienzo (QGraphicsView) que dibuja la cadena, distancias y ángulos; traduce mouse/rueda a gestos.
# Notes: La vista NO escala; el ViewState se aplica como QTransform del item raíz ("stage").
from __future__ import annotations

import logging

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen, QTransform
from PySide6.QtWidgets import (
    QGraphicsItem,
    QGraphicsLineItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSimpleTextItem,
    QGraphicsView,
)

from mdc.core.controller import InteractionController
from mdc.core.gestures import (
    CanvasDragMove,
    CanvasDragStart,
    CanvasWheel,
    PointClick,
    PointDragMove,
    PointEnter,
    PointLeave,
)
from mdc.core.models import Point, SessionSnapshot
from mdc.core.scene import SceneDescription, build_scene
from mdc.core.settings import load_canvas_config
from mdc.core.version import LABEL_FILL, LABEL_FONT_SIZE, SEGMENT_STROKE, SEGMENT_STROKE_WIDTH, SHEET_FILL
from mdc.ui.items.point_items import PointMarkerItem, PointMarkerOwner

log = logging.getLogger(__name__)

# Orden de apilado dentro del stage.
Z_SHEET = -10
Z_SEGMENT = 0
Z_LABEL = 1
Z_MARKER = 2


def _event_vp_pos(event) -> QPointF:
    try:
        return QPointF(event.position())  # Qt6
    except Exception:
        return QPointF(event.pos())       # Qt5 fallback


class CanvasView(QGraphicsView, PointMarkerOwner):
    """Sustrato de render: escena retenida + eventos de puntero.

    Coordenadas:
    - Escena == pantalla (sceneRect = viewport, sin scroll, sin transform de vista).
    - Hijos del stage == coordenadas lógicas de la cadena.
    """

    snapshot_changed = Signal(object)  # SessionSnapshot

    def __init__(self, controller: InteractionController | None = None, parent=None):
        super().__init__(parent)

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        self._controller = controller or InteractionController(config=load_canvas_config())
        self._controller.set_redraw_callback(self._on_redraw)

        # True mientras el redibujado mueve items (ignora ItemPositionHasChanged propio).
        self._syncing = False

        # Pan con arrastre del fondo (botón izquierdo fuera de un punto).
        self._pan_active = False
        self._pan_press_vp: QPointF | None = None
        self._pan_origin0: Point | None = None

        self.setRenderHint(QPainter.Antialiasing, True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setTransformationAnchor(QGraphicsView.NoAnchor)
        self.setResizeAnchor(QGraphicsView.NoAnchor)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)
        self.setDragMode(QGraphicsView.NoDrag)
        self.setMouseTracking(True)

        # Stage: único item raíz; su transform es el ViewState.
        self._stage = QGraphicsRectItem()
        self._stage.setFlag(QGraphicsItem.GraphicsItemFlag.ItemHasNoContents, True)
        self._scene.addItem(self._stage)

        self._sheet = QGraphicsRectItem(self._stage)
        self._sheet.setPen(QPen(Qt.NoPen))
        self._sheet.setBrush(QBrush(QColor(SHEET_FILL)))
        self._sheet.setZValue(Z_SHEET)

        self._segment_pen = QPen(QColor(SEGMENT_STROKE), SEGMENT_STROKE_WIDTH)
        self._label_font = QFont()
        self._label_font.setPixelSize(LABEL_FONT_SIZE)
        self._label_brush = QBrush(QColor(LABEL_FILL))

        self._segment_items: list[QGraphicsLineItem] = []
        self._distance_items: list[QGraphicsSimpleTextItem] = []
        self._angle_items: list[QGraphicsSimpleTextItem] = []
        self._marker_items: list[PointMarkerItem] = []

        self._last_scene: SceneDescription | None = None
        self._controller.request_redraw()

    # ------------------------------------------------------------
    # API
    # ------------------------------------------------------------
    def controller(self) -> InteractionController:
        return self._controller

    def snapshot(self) -> SessionSnapshot:
        return self._controller.snapshot

    def last_scene(self) -> SceneDescription | None:
        return self._last_scene

    # ------------------------------------------------------------
    # Redibujado (un pase por snapshot)
    # ------------------------------------------------------------
    def _on_redraw(self, snapshot: SessionSnapshot) -> None:
        scene = build_scene(snapshot, self._controller.config)
        self._syncing = True
        try:
            v = scene.transform
            self._stage.setTransform(QTransform(v.scale, 0.0, 0.0, v.scale, v.translation.x, v.translation.y))
            self._sync_segments(scene)
            self._sync_angles(scene)
            self._sync_markers(scene)
        finally:
            self._syncing = False
        self._last_scene = scene
        self.snapshot_changed.emit(snapshot)

    def _resize_pool(self, pool: list, n: int, factory) -> None:
        while len(pool) > n:
            it = pool.pop()
            self._scene.removeItem(it)
        while len(pool) < n:
            pool.append(factory(len(pool)))

    def _new_label(self, _i: int) -> QGraphicsSimpleTextItem:
        it = QGraphicsSimpleTextItem(self._stage)
        it.setFont(self._label_font)
        it.setBrush(self._label_brush)
        it.setZValue(Z_LABEL)
        return it

    def _new_segment(self, _i: int) -> QGraphicsLineItem:
        it = QGraphicsLineItem(self._stage)
        it.setPen(self._segment_pen)
        it.setZValue(Z_SEGMENT)
        return it

    def _new_marker(self, i: int) -> PointMarkerItem:
        it = PointMarkerItem(i, self, self._stage)
        it.setZValue(Z_MARKER)
        return it

    def _sync_segments(self, scene: SceneDescription) -> None:
        n = len(scene.segments)
        self._resize_pool(self._segment_items, n, self._new_segment)
        self._resize_pool(self._distance_items, n, self._new_label)
        for seg, line, label in zip(scene.segments, self._segment_items, self._distance_items):
            line.setLine(seg.start.x, seg.start.y, seg.end.x, seg.end.y)
            label.setText(seg.text)
            label.setPos(seg.label_pos.x, seg.label_pos.y)

    def _sync_angles(self, scene: SceneDescription) -> None:
        self._resize_pool(self._angle_items, len(scene.angles), self._new_label)
        for ang, label in zip(scene.angles, self._angle_items):
            label.setText(ang.text)
            label.setPos(ang.label_pos.x, ang.label_pos.y)

    def _sync_markers(self, scene: SceneDescription) -> None:
        self._resize_pool(self._marker_items, len(scene.markers), self._new_marker)
        for m, it in zip(scene.markers, self._marker_items):
            it.set_marker(m.center.x, m.center.y, m.radius, m.fill)

    # ------------------------------------------------------------
    # PointMarkerOwner
    # ------------------------------------------------------------
    def _dispatch(self, event) -> None:
        try:
            self._controller.dispatch(event)
        except Exception:
            # Nunca romper el event loop de Qt por un gesto.
            log.error("Fallo al despachar %r", event, exc_info=True)

    def point_drag_moved(self, index: int, pos: QPointF) -> None:
        if self._syncing:
            return
        self._dispatch(PointDragMove(index, Point(float(pos.x()), float(pos.y()))))

    def point_clicked(self, index: int) -> None:
        self._dispatch(PointClick(index))

    def point_hover_entered(self, index: int) -> None:
        self._dispatch(PointEnter(index))

    def point_hover_left(self, index: int) -> None:
        self._dispatch(PointLeave(index))

    # ------------------------------------------------------------
    # Eventos de vista
    # ------------------------------------------------------------
    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        vp = self.viewport().size()
        r = QRectF(0.0, 0.0, float(vp.width()), float(vp.height()))
        self._scene.setSceneRect(r)
        # La hoja vive en coordenadas lógicas (se escala/traslada con el stage).
        self._sheet.setRect(r)

    def wheelEvent(self, event) -> None:
        dy = 0
        try:
            dy = int(event.angleDelta().y())
        except Exception:
            dy = 0

        if not dy:
            super().wheelEvent(event)
            return

        sp = self.mapToScene(_event_vp_pos(event).toPoint())
        # Qt: angleDelta > 0 = rueda hacia arriba. El modelo usa delta_y > 0 = hacia abajo.
        self._dispatch(CanvasWheel(Point(float(sp.x()), float(sp.y())), float(-dy)))
        # Sin scroll nativo del view.
        event.accept()

    def mousePressEvent(self, event) -> None:
        try:
            btn = event.button()
        except Exception:
            btn = None

        if btn == Qt.LeftButton:
            vp = _event_vp_pos(event)
            if not isinstance(self.itemAt(vp.toPoint()), PointMarkerItem):
                self._pan_active = True
                self._pan_press_vp = vp
                self._pan_origin0 = self._controller.view.translation
                self.setCursor(Qt.ClosedHandCursor)
                self._dispatch(CanvasDragStart(self._pan_origin0))
                event.accept()
                return

        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        if self._pan_active and self._pan_press_vp is not None and self._pan_origin0 is not None:
            p = _event_vp_pos(event)
            dx = float(p.x() - self._pan_press_vp.x())
            dy = float(p.y() - self._pan_press_vp.y())
            self._dispatch(CanvasDragMove(Point(self._pan_origin0.x + dx, self._pan_origin0.y + dy)))
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        try:
            btn = event.button()
        except Exception:
            btn = None

        if self._pan_active and btn == Qt.LeftButton:
            self._pan_active = False
            self._pan_press_vp = None
            self._pan_origin0 = None
            self.unsetCursor()
            event.accept()
            return
        super().mouseReleaseEvent(event)
