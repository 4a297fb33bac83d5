# File: mdc/core/controller.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: InteractionController: despacha gestos a PointChain / ViewTransform y pide un redibujado por cambio.
# Notes: Dueño único de chain/selection/view. Reemplazo de valor completo, nunca mutación parcial.
from __future__ import annotations

import logging
from typing import Callable, Optional

from mdc.core.gestures import (
    CanvasDragMove,
    CanvasDragStart,
    CanvasWheel,
    GestureEvent,
    PointClick,
    PointDragMove,
    PointEnter,
    PointLeave,
)
from mdc.core.models import PointChain, Selection, SessionSnapshot, ViewState
from mdc.core.settings import CanvasConfig
from mdc.core.view_transform import apply_drag, apply_wheel
from mdc.utils.errors import MdcValidationError

log = logging.getLogger(__name__)

RedrawCallback = Callable[[SessionSnapshot], None]


class InteractionController:
    """Despachador puro de gestos.

    Cada evento aceptado produce un SessionSnapshot nuevo y exactamente una
    llamada al callback de redibujado. Los eventos rechazados (índice fuera
    de rango, posición inválida, tipo desconocido) son no-op: no cambian estado ni redibujan.
    """

    def __init__(
        self,
        chain: Optional[PointChain] = None,
        view: Optional[ViewState] = None,
        *,
        config: Optional[CanvasConfig] = None,
        on_redraw: Optional[RedrawCallback] = None,
    ) -> None:
        self._config = config or CanvasConfig()
        if chain is None:
            chain = PointChain.initialize(self._config.initial_points)
        self._snapshot = SessionSnapshot(chain=chain, selection=Selection.none(), view=view or ViewState())
        self._on_redraw = on_redraw

    # ----------------------------
    # Estado (solo lectura)
    # ----------------------------
    @property
    def config(self) -> CanvasConfig:
        return self._config

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    @property
    def chain(self) -> PointChain:
        return self._snapshot.chain

    @property
    def selection(self) -> Selection:
        return self._snapshot.selection

    @property
    def view(self) -> ViewState:
        return self._snapshot.view

    def set_redraw_callback(self, cb: Optional[RedrawCallback]) -> None:
        self._on_redraw = cb

    def request_redraw(self) -> None:
        """Redibuja el snapshot actual (arranque / resize). No cambia estado."""
        if self._on_redraw is not None:
            self._on_redraw(self._snapshot)

    # ----------------------------
    # Dispatch
    # ----------------------------
    def dispatch(self, event: GestureEvent) -> Optional[SessionSnapshot]:
        """Aplica un gesto. Devuelve el snapshot nuevo, o None si se rechazó."""
        log.debug("gesto: %r", event)
        try:
            snap = self._transition(event)
        except MdcValidationError as e:
            log.warning("Gesto ignorado (%s): %s", type(event).__name__, e)
            return None
        if snap is None:
            log.warning("Gesto desconocido ignorado: %r", event)
            return None

        self._snapshot = snap
        self.request_redraw()
        return snap

    def _transition(self, event: GestureEvent) -> Optional[SessionSnapshot]:
        s = self._snapshot
        if isinstance(event, PointDragMove):
            return SessionSnapshot(s.chain.update_point(event.index, event.position), s.selection, s.view)
        if isinstance(event, (PointClick, PointEnter)):
            return SessionSnapshot(s.chain, s.chain.set_selection(event.index), s.view)
        if isinstance(event, PointLeave):
            return SessionSnapshot(s.chain, s.chain.set_selection(None), s.view)
        if isinstance(event, CanvasWheel):
            delta = -event.delta_y if self._config.invert_wheel else event.delta_y
            view = apply_wheel(
                s.view,
                event.pointer,
                delta,
                step=self._config.zoom_step,
                min_scale=self._config.min_scale,
                max_scale=self._config.max_scale,
            )
            return SessionSnapshot(s.chain, s.selection, view)
        if isinstance(event, (CanvasDragStart, CanvasDragMove)):
            return SessionSnapshot(s.chain, s.selection, apply_drag(s.view, event.origin))
        return None
