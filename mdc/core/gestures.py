# File: mdc/core/gestures.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Eventos de gesto (variante etiquetada) que entran al InteractionController.
# Notes: Coordenadas: los eventos de punto traen posición lógica; los de lienzo, de pantalla.
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from mdc.core.models import Point


@dataclass(frozen=True)
class PointDragMove:
    """Arrastre de un punto: `position` es la nueva posición lógica."""

    index: int
    position: Point


@dataclass(frozen=True)
class PointClick:
    index: int


@dataclass(frozen=True)
class PointEnter:
    index: int


@dataclass(frozen=True)
class PointLeave:
    index: int


@dataclass(frozen=True)
class CanvasWheel:
    """Rueda sobre el lienzo. `delta_y` > 0 = rueda hacia abajo (convención navegador)."""

    pointer: Point
    delta_y: float


@dataclass(frozen=True)
class CanvasDragStart:
    """Inicio de arrastre del fondo. `origin` = origen del lienzo en pantalla."""

    origin: Point


@dataclass(frozen=True)
class CanvasDragMove:
    origin: Point


GestureEvent = Union[
    PointDragMove,
    PointClick,
    PointEnter,
    PointLeave,
    CanvasWheel,
    CanvasDragStart,
    CanvasDragMove,
]
