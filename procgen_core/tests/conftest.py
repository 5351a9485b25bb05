"""Pytest configuration for procgen_core tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# //1.- Ensure repository root is available on the Python path for package imports.
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# //2.- Keep environment-driven configuration from leaking between tests.
@pytest.fixture(autouse=True)
def _clear_procgen_environment(monkeypatch):
    for name in ("PROCGEN_ENGINE", "PROCGEN_SEED", "PROCGEN_SEED_HIGH"):
        monkeypatch.delenv(name, raising=False)
