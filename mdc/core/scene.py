# File: mdc/core/scene.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Derivación de lo que hay que dibujar (segmentos, etiquetas, marcadores) desde un snapshot.
# Notes: Sin Qt. El CanvasView solo traduce SceneDescription a items.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mdc.core.models import Point, SessionSnapshot, ViewState
from mdc.core.settings import CanvasConfig
from mdc.core.version import MARKER_FILL, MARKER_FILL_SELECTED, MARKER_RADIUS, MARKER_RADIUS_SELECTED
from mdc.geom.measure import (
    angle_label_position,
    distance,
    distance_label_position,
    format_angle,
    format_distance,
    interior_angle_degrees,
)


@dataclass(frozen=True)
class SegmentLabel:
    index: int
    start: Point
    end: Point
    length: float
    text: str
    label_pos: Point


@dataclass(frozen=True)
class AngleLabel:
    # Índice del vértice interior dentro de la cadena (1..n-2).
    index: int
    vertex: Point
    degrees: float
    text: str
    label_pos: Point


@dataclass(frozen=True)
class Marker:
    index: int
    center: Point
    radius: float
    fill: str
    selected: bool


@dataclass(frozen=True)
class SceneDescription:
    segments: tuple[SegmentLabel, ...] = ()
    angles: tuple[AngleLabel, ...] = ()
    markers: tuple[Marker, ...] = ()
    transform: ViewState = field(default_factory=ViewState)


def build_scene(snapshot: SessionSnapshot, config: Optional[CanvasConfig] = None) -> SceneDescription:
    """Recalcula segmentos + distancias, ángulos interiores y marcadores."""
    cfg = config or CanvasConfig()
    chain = snapshot.chain

    segments = []
    for i, (a, b) in enumerate(chain.segments()):
        d = distance(a, b)
        segments.append(
            SegmentLabel(
                index=i,
                start=a,
                end=b,
                length=d,
                text=format_distance(d, cfg.distance_unit, cfg.distance_decimals),
                label_pos=distance_label_position(a, b),
            )
        )

    angles = []
    for i, (a, b, c) in enumerate(chain.interior_vertices(), start=1):
        deg = interior_angle_degrees(a, b, c)
        angles.append(AngleLabel(index=i, vertex=b, degrees=deg, text=format_angle(deg), label_pos=angle_label_position(b)))

    markers = []
    for i, p in enumerate(chain):
        sel = snapshot.selection.is_selected(i)
        markers.append(
            Marker(
                index=i,
                center=p,
                radius=MARKER_RADIUS_SELECTED if sel else MARKER_RADIUS,
                fill=MARKER_FILL_SELECTED if sel else MARKER_FILL,
                selected=sel,
            )
        )

    return SceneDescription(
        segments=tuple(segments),
        angles=tuple(angles),
        markers=tuple(markers),
        transform=snapshot.view,
    )
