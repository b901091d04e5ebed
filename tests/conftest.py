"""
tests/conftest.py
=================
Shared fixtures: seeded randomness and an isolated settings location.
"""
import random

import pytest


@pytest.fixture
def seeded_rng():
    return random.Random(20240101)


@pytest.fixture
def settings_path(tmp_path, monkeypatch):
    """Point the default settings path at an empty temp dir so a real user file never leaks in."""
    path = tmp_path / "settings" / "password_strength.json"
    monkeypatch.setattr("password_strength_tester.config.DEFAULT_SETTINGS_PATH", path)
    monkeypatch.setattr("password_strength_tester.cli.DEFAULT_SETTINGS_PATH", path)
    return path
