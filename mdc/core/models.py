# File: mdc/core/models.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Modelos de datos de la sesión: Point, PointChain, Selection, ViewState.
# Notes: Todo es inmutable (frozen). Cada cambio devuelve un valor nuevo.
from __future__ import annotations

import math

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Iterator, Optional

from mdc.core.version import DEFAULT_POINTS
from mdc.utils.errors import MdcIndexError, MdcValidationError


@dataclass(frozen=True)
class Point:
    """Posición en coordenadas lógicas (antes de escala/traslación)."""

    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"x": float(self.x), "y": float(self.y)}

    @staticmethod
    def from_any(v: Any) -> "Point":
        """Acepta Point, (x, y), [x, y] o {"x": .., "y": ..}."""
        if isinstance(v, Point):
            return v
        if isinstance(v, dict):
            return Point(_as_float(v.get("x"), "point.x"), _as_float(v.get("y"), "point.y"))
        if isinstance(v, (list, tuple)) and len(v) == 2:
            return Point(_as_float(v[0], "point.x"), _as_float(v[1], "point.y"))
        raise MdcValidationError(f"Punto inválido: {v!r}")


@dataclass(frozen=True)
class Selection:
    """Índice seleccionado (o ninguno). Solo afecta el estilo del marcador."""

    index: Optional[int] = None

    @staticmethod
    def none() -> "Selection":
        return Selection(None)

    @property
    def is_empty(self) -> bool:
        return self.index is None

    def is_selected(self, i: int) -> bool:
        return self.index is not None and self.index == i


@dataclass(frozen=True)
class PointChain:
    """Secuencia ordenada de puntos.

    El orden define qué puntos son consecutivos (segmentos) y cuáles son
    interiores (ángulos). El largo es variable en el modelo aunque la UI
    no permite agregar/quitar puntos.
    """

    points: tuple[Point, ...] = field(default_factory=tuple)

    @classmethod
    def initialize(cls, points: Optional[Iterable[Any]] = None) -> "PointChain":
        src = DEFAULT_POINTS if points is None else points
        return cls(tuple(Point.from_any(p) for p in src))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, i: int) -> Point:
        return self.points[self._check_index(i)]

    def _check_index(self, i: Any) -> int:
        # Sin wrap-around de Python: -1 es inválido.
        if isinstance(i, bool) or not isinstance(i, int) or not 0 <= i < len(self.points):
            raise MdcIndexError(f"Índice fuera de rango: {i!r} (n={len(self.points)})")
        return i

    def update_point(self, index: int, new_position: Point) -> "PointChain":
        """Reemplaza el punto `index`; el resto y el orden quedan igual."""
        i = self._check_index(index)
        pts = list(self.points)
        pts[i] = Point.from_any(new_position)
        return replace(self, points=tuple(pts))

    def set_selection(self, index: Optional[int]) -> Selection:
        if index is None:
            return Selection.none()
        return Selection(self._check_index(index))

    def segments(self) -> tuple[tuple[Point, Point], ...]:
        """Pares consecutivos (n-1). Tupla: se puede recorrer varias veces e indexar."""
        pts = self.points
        return tuple((pts[i], pts[i + 1]) for i in range(len(pts) - 1))

    def interior_vertices(self) -> tuple[tuple[Point, Point, Point], ...]:
        pts = self.points
        return tuple((pts[i - 1], pts[i], pts[i + 1]) for i in range(1, len(pts) - 1))

    def to_dict(self) -> dict[str, Any]:
        return {"points": [p.to_dict() for p in self.points]}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "PointChain":
        raw = d.get("points", [])
        if not isinstance(raw, list):
            raise MdcValidationError("chain.points debe ser una lista")
        return PointChain.initialize(raw)


@dataclass(frozen=True)
class ViewState:
    """Transformación afín lógico -> pantalla: screen = logical * scale + translation."""

    scale: float = 1.0
    translation: Point = field(default_factory=lambda: Point(0.0, 0.0))

    def __post_init__(self) -> None:
        s = float(self.scale)
        if not (s > 0.0) or math.isinf(s):
            raise MdcValidationError(f"Escala inválida: {self.scale!r} (debe ser > 0)")

    def to_screen(self, p: Point) -> Point:
        return Point(p.x * self.scale + self.translation.x, p.y * self.scale + self.translation.y)

    def to_logical(self, p: Point) -> Point:
        return Point((p.x - self.translation.x) / self.scale, (p.y - self.translation.y) / self.scale)


@dataclass(frozen=True)
class SessionSnapshot:
    """Estado completo de la sesión que se entrega a cada redibujado."""

    chain: PointChain
    selection: Selection = field(default_factory=Selection.none)
    view: ViewState = field(default_factory=ViewState)


def _as_float(v: Any, field_name: str) -> float:
    try:
        return float(v)
    except Exception as e:
        raise MdcValidationError(f"{field_name} debe ser número (recibido: {v!r})") from e
