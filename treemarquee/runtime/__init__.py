"""Interactive runtime: config, event loop, pointer routing, and app wiring."""

from __future__ import annotations

from .app import SelectionApp, run_app

__all__ = ["SelectionApp", "run_app"]
