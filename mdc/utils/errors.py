# File: mdc/utils/errors.py
# Project: MedidorCadena (MDC)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Errores tipados del proyecto.
# Notes: El controlador convierte MdcIndexError en no-op; nunca llega a Qt.
from __future__ import annotations


class MdcError(Exception):
    """Error base del proyecto."""


class MdcValidationError(MdcError):
    """Error de validación (input/estado)."""


class MdcIndexError(MdcValidationError, IndexError):
    """Índice de punto fuera de rango [0, n)."""


class MdcConfigError(MdcValidationError):
    """Valor de configuración inválido (mdc_settings.json / env)."""
