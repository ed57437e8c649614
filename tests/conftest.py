"""pytest configuration and fixtures for pyqt-validated-forms tests."""

import os
from dataclasses import dataclass
from typing import Optional

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def default_forms_config():
    """Every test starts and ends with the default FormsConfig."""
    from pyqt_validated_forms.protocols import set_forms_config

    set_forms_config(None)
    yield
    set_forms_config(None)


@dataclass
class Person:
    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None
    height: Optional[float] = None
    subscribed: bool = False
    photo: Optional[str] = None


@pytest.fixture
def person():
    return Person()


class RecordingContainer:
    """ViewContainer that records what it receives."""

    def __init__(self):
        self.views = []
        self.clear_count = 0

    def clear(self):
        self.views = []
        self.clear_count += 1

    def add_view(self, view):
        self.views.append(view)


class RecordingView:
    """ElementView that records refreshes and errors."""

    def __init__(self, controller):
        self.controller = controller
        self.refreshed = []
        self.errors = []

    def refresh_from(self, controller):
        self.refreshed.append(getattr(controller, 'display_value', None))

    def show_error(self, message):
        self.errors.append(message)


class RecordingViewFactory:
    def __init__(self):
        self.created = []

    def create_view(self, controller):
        view = RecordingView(controller)
        self.created.append(view)
        return view


@pytest.fixture
def container():
    return RecordingContainer()


@pytest.fixture
def view_factory():
    return RecordingViewFactory()
