"""Pytest configuration for integration tests.

Skips Textual-driven tests when the environment asks for headless-only runs.
"""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    """Skip integration tests when PERMALERT_SKIP_TUI_TESTS is set."""
    if not os.environ.get("PERMALERT_SKIP_TUI_TESTS"):
        return
    skip_marker = pytest.mark.skip(reason="Textual integration tests disabled")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip_marker)
