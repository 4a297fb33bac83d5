"""Shared fixtures for the MDC core tests (no Qt)."""
import os

import pytest

from mdc.core.controller import InteractionController
from mdc.core.models import Point, PointChain, ViewState
from mdc.core import settings
from mdc.core.settings import CanvasConfig


@pytest.fixture
def default_chain():
    """Default square: (100,100),(100,900),(900,900),(900,100)."""
    return PointChain.initialize()


@pytest.fixture
def identity_view():
    return ViewState(scale=1.0, translation=Point(0.0, 0.0))


@pytest.fixture
def redraws():
    """List that records every snapshot handed to the redraw callback."""
    return []


@pytest.fixture
def controller(default_chain, identity_view, redraws):
    return InteractionController(
        default_chain,
        identity_view,
        config=CanvasConfig(),
        on_redraw=redraws.append,
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Start from an empty MDC_* environment and restore it afterwards.

    apply_project_settings writes os.environ directly, so every known key is
    registered with monkeypatch first (setenv + delenv) to get it undone.
    """
    for k in list(os.environ):
        if k.startswith("MDC_"):
            monkeypatch.delenv(k)
    for k in settings.ENV_KEYS:
        monkeypatch.setenv(k, "x")
        monkeypatch.delenv(k)
    return monkeypatch
