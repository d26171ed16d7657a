from __future__ import annotations

import logging

import pytest

from main import resolve_log_level


@pytest.mark.parametrize("name, level", [
    ("DEBUG", logging.DEBUG),
    ("WARNING", logging.WARNING),
    ("ERROR", logging.ERROR),
])
def test_level_names_resolve(name, level) -> None:
    assert resolve_log_level(name) == level


@pytest.mark.parametrize("name", ["BASIC_FORMAT", "NOPE", "", "Logger"])
def test_anything_else_falls_back_to_info(name) -> None:
    assert resolve_log_level(name) == logging.INFO
