# File: mdc/core/settings.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Configuración: mdc_settings.json (repo-local) -> env vars -> CanvasConfig; preferencias de usuario.
# Notes: No depende de Qt. Nunca rompe el arranque: ante valores inválidos se loguea y se usan defaults.
from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from mdc.core.models import Point, PointChain
from mdc.core.version import (
    DEFAULT_DISTANCE_DECIMALS,
    DEFAULT_DISTANCE_UNIT,
    DEFAULT_MAX_SCALE,
    DEFAULT_MIN_SCALE,
    DEFAULT_POINTS,
    DEFAULT_ZOOM_STEP,
)
from mdc.utils.errors import MdcConfigError, MdcValidationError

log = logging.getLogger(__name__)


def settings_dir() -> Path:
    """Carpeta de settings del usuario (~/.mdc)."""
    return Path.home() / ".mdc"


def settings_path() -> Path:
    return settings_dir() / "settings.json"


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: mdc_settings.json en la raíz del repo (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "mdc_settings.json"

ENV_ZOOM_STEP = "MDC_CANVAS_ZOOM_STEP"
ENV_MIN_SCALE = "MDC_CANVAS_MIN_SCALE"
ENV_MAX_SCALE = "MDC_CANVAS_MAX_SCALE"
ENV_INVERT_WHEEL = "MDC_CANVAS_INVERT_WHEEL"
ENV_DISTANCE_UNIT = "MDC_DISTANCE_UNIT"
ENV_DISTANCE_DECIMALS = "MDC_DISTANCE_DECIMALS"
ENV_INITIAL_POINTS = "MDC_INITIAL_POINTS"
ENV_KEYS = (
    ENV_ZOOM_STEP,
    ENV_MIN_SCALE,
    ENV_MAX_SCALE,
    ENV_INVERT_WHEEL,
    ENV_DISTANCE_UNIT,
    ENV_DISTANCE_DECIMALS,
    ENV_INITIAL_POINTS,
)


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca mdc_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except Exception as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        _log.warning("%s: la raíz no es un objeto JSON; se ignora", p)
        return {}
    return data


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def apply_project_settings(
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga mdc_settings.json (si existe) y aplica overrides vía variables de entorno.

    Los consumidores (load_canvas_config) leen solo env vars; este módulo es
    el único que conoce el JSON.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa.
    - Si `prefer_env=False`, el JSON pisa la env var.

    Devuelve un dict con los valores *aplicados desde JSON*.
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    data = load_project_settings(p.parent, logger=_log)
    if not data:
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    # Canvas - zoom por rueda
    step = _deep_get(data, "canvas.zoom_step")
    if isinstance(step, (int, float)) and not isinstance(step, bool):
        if 1.001 <= float(step) <= 2.0:
            applied["canvas.zoom_step"] = float(step)
            _set_env(ENV_ZOOM_STEP, float(step))
        else:
            _log.warning("canvas.zoom_step fuera de rango (1.001..2.0): %r", step)

    zmin = _deep_get(data, "canvas.min_scale")
    if isinstance(zmin, (int, float)) and not isinstance(zmin, bool) and zmin > 0:
        applied["canvas.min_scale"] = float(zmin)
        _set_env(ENV_MIN_SCALE, float(zmin))

    zmax = _deep_get(data, "canvas.max_scale")
    if isinstance(zmax, (int, float)) and not isinstance(zmax, bool) and zmax > 0:
        applied["canvas.max_scale"] = float(zmax)
        _set_env(ENV_MAX_SCALE, float(zmax))

    inv = _deep_get(data, "canvas.invert_wheel")
    if isinstance(inv, bool):
        applied["canvas.invert_wheel"] = inv
        _set_env(ENV_INVERT_WHEEL, "1" if inv else "0")

    # Etiquetas de distancia
    unit = _deep_get(data, "canvas.distance_unit")
    if isinstance(unit, str):
        applied["canvas.distance_unit"] = unit.strip()
        _set_env(ENV_DISTANCE_UNIT, unit.strip())

    dec = _deep_get(data, "canvas.distance_decimals")
    if isinstance(dec, int) and not isinstance(dec, bool) and 0 <= dec <= 6:
        applied["canvas.distance_decimals"] = dec
        _set_env(ENV_DISTANCE_DECIMALS, dec)

    # Cadena inicial: [[x, y], ...] o [{"x":..,"y":..}, ...]
    pts = _deep_get(data, "chain.initial_points")
    if pts is not None:
        try:
            chain = PointChain.from_dict({"points": pts})
        except MdcValidationError as e:
            _log.warning("chain.initial_points inválido: %s", e)
        else:
            applied["chain.initial_points"] = chain.to_dict()["points"]
            _set_env(ENV_INITIAL_POINTS, format_points_env(list(chain)))

    if applied:
        _log.info("Project settings aplicados desde %s: %s", p, applied)
    return applied


# ------------------------------
# Env helpers (acotados)
# ------------------------------

def _env_int(name: str, default: int, *, min_value: int = 0, max_value: int = 12) -> int:
    raw = (os.environ.get(name, "") or "").strip()
    if not raw:
        return default
    try:
        v = int(raw)
    except ValueError:
        log.warning("%s inválido (int): %r", name, raw)
        return default
    return max(min_value, min(max_value, v))


def _env_float(name: str, default: float, *, min_value: float = -1e9, max_value: float = 1e9) -> float:
    raw = (os.environ.get(name, "") or "").strip()
    if not raw:
        return default
    try:
        v = float(raw)
    except ValueError:
        log.warning("%s inválido (float): %r", name, raw)
        return default
    if not math.isfinite(v):
        return default
    return max(min_value, min(max_value, v))


def _env_bool(name: str, default: bool) -> bool:
    raw = (os.environ.get(name, "") or "").strip().lower()
    if not raw:
        return default
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    return default


def format_points_env(points: list[Point]) -> str:
    return ";".join(f"{p.x:g},{p.y:g}" for p in points)


def parse_points_env(raw: str) -> tuple[Point, ...]:
    """Parsea "x,y;x,y;..." (formato de MDC_INITIAL_POINTS)."""
    out: list[Point] = []
    for chunk in raw.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = chunk.split(",")
        if len(parts) != 2:
            raise MdcConfigError(f"Punto inválido en {ENV_INITIAL_POINTS}: {chunk!r}")
        try:
            out.append(Point(float(parts[0]), float(parts[1])))
        except ValueError as e:
            raise MdcConfigError(f"Punto inválido en {ENV_INITIAL_POINTS}: {chunk!r}") from e
    return tuple(out)


@dataclass(frozen=True)
class CanvasConfig:
    """Parámetros de interacción/etiquetas del lienzo (ya validados)."""

    zoom_step: float = DEFAULT_ZOOM_STEP
    min_scale: float = DEFAULT_MIN_SCALE
    max_scale: float = DEFAULT_MAX_SCALE
    # False = rueda hacia abajo agranda (comportamiento heredado).
    invert_wheel: bool = False
    distance_unit: str = DEFAULT_DISTANCE_UNIT
    distance_decimals: int = DEFAULT_DISTANCE_DECIMALS
    initial_points: tuple[Point, ...] = field(default_factory=lambda: tuple(Point(x, y) for x, y in DEFAULT_POINTS))


def load_canvas_config() -> CanvasConfig:
    """Arma CanvasConfig desde env vars (ver apply_project_settings)."""
    d = CanvasConfig()
    zmin = _env_float(ENV_MIN_SCALE, d.min_scale, min_value=1e-6, max_value=1e6)
    zmax = _env_float(ENV_MAX_SCALE, d.max_scale, min_value=1e-6, max_value=1e6)
    if zmax < zmin:
        log.warning("max_scale < min_scale (%s < %s); se usan defaults", zmax, zmin)
        zmin, zmax = d.min_scale, d.max_scale

    pts = d.initial_points
    raw_pts = (os.environ.get(ENV_INITIAL_POINTS, "") or "").strip()
    if raw_pts:
        try:
            pts = parse_points_env(raw_pts)
        except MdcConfigError as e:
            log.warning("%s; se usa la cadena por defecto", e)

    return CanvasConfig(
        zoom_step=_env_float(ENV_ZOOM_STEP, d.zoom_step, min_value=1.001, max_value=2.0),
        min_scale=zmin,
        max_scale=zmax,
        invert_wheel=_env_bool(ENV_INVERT_WHEEL, d.invert_wheel),
        distance_unit=(os.environ.get(ENV_DISTANCE_UNIT) or d.distance_unit).strip(),
        distance_decimals=_env_int(ENV_DISTANCE_DECIMALS, d.distance_decimals, min_value=0, max_value=6),
        initial_points=pts,
    )


@dataclass
class AppSettings:
    """Preferencias persistentes del usuario (solo layout de ventana)."""

    # Se guarda como base64 (bytes->str) para evitar dependencia a Qt.
    ui_main_geometry_b64: str = ""

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "AppSettings":
        p = path or settings_path()
        try:
            if not p.exists():
                return cls()
            data = json.loads(p.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                return cls()
            out = cls()
            out.ui_main_geometry_b64 = str(data.get("ui_main_geometry_b64", "") or "")
            return out
        except Exception:
            log.debug("No se pudieron cargar settings: %s", p, exc_info=True)
            return cls()

    def save(self, path: Optional[Path] = None) -> None:
        p = path or settings_path()
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            payload: Dict[str, Any] = {
                "schema_version": 1,
                "ui_main_geometry_b64": str(self.ui_main_geometry_b64 or ""),
            }
            p.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except Exception:
            log.debug("No se pudieron guardar settings", exc_info=True)
