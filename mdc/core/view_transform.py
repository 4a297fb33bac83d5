# File: mdc/core/view_transform.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Zoom (rueda) anclado al cursor + pan (arrastre de fondo) sobre ViewState.
# Notes: Funciones puras. No dependen de Qt; el adapter de UI solo pasa coordenadas de pantalla.
from __future__ import annotations

from typing import Optional

from mdc.core.models import Point, ViewState
from mdc.core.version import DEFAULT_ZOOM_STEP


def clamp_scale(scale: float, min_scale: Optional[float] = None, max_scale: Optional[float] = None) -> float:
    s = float(scale)
    if min_scale is not None and s < min_scale:
        s = float(min_scale)
    if max_scale is not None and s > max_scale:
        s = float(max_scale)
    return s


def logical_under_cursor(view: ViewState, pointer_screen_pos: Point) -> Point:
    """Punto lógico que está debajo del cursor con la vista actual."""
    return view.to_logical(pointer_screen_pos)


def apply_wheel(
    view: ViewState,
    pointer_screen_pos: Point,
    wheel_delta_y: float,
    *,
    step: float = DEFAULT_ZOOM_STEP,
    min_scale: Optional[float] = None,
    max_scale: Optional[float] = None,
) -> ViewState:
    """Zoom de un paso manteniendo fijo el punto lógico bajo el cursor.

    Regla de dirección (heredada): delta_y > 0 (rueda "hacia abajo") agranda
    la escala; cualquier otro valor la achica.

    El clamp opcional se aplica a la escala nueva ANTES de recalcular la
    traslación, así el punto bajo el cursor sigue anclado aunque se clampee.
    """
    old_scale = float(view.scale)
    new_scale = old_scale * step if wheel_delta_y > 0 else old_scale / step
    new_scale = clamp_scale(new_scale, min_scale, max_scale)

    anchor = logical_under_cursor(view, pointer_screen_pos)
    translation = Point(
        pointer_screen_pos.x - anchor.x * new_scale,
        pointer_screen_pos.y - anchor.y * new_scale,
    )
    return ViewState(scale=new_scale, translation=translation)


def apply_drag(view: ViewState, new_canvas_origin_screen_pos: Point) -> ViewState:
    """Pan: la traslación pasa a ser el nuevo origen del lienzo (escala igual)."""
    return ViewState(scale=view.scale, translation=Point.from_any(new_canvas_origin_screen_pos))
