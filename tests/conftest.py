"""pytest configuration and fixtures for formmaker tests."""

import os

import pytest

from formmaker.protocols import set_form_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration."""
    set_form_config(None)
    yield
    set_form_config(None)


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PyQt6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
    # Don't quit - may cause issues with other tests
